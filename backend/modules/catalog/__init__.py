"""
Catalog module.

Public course listing plus admin-only course management.

Public API:
- CatalogService: list, get, create, update, delete courses
- ICourseRepository: storage interface
- Course, CourseCreate, CourseUpdate: models
- slugify: title to URL slug
"""

from .interfaces import ICourseRepository
from .models import Course, CourseCreate, CourseUpdate
from .exceptions import CourseNotFoundError
from .service import CatalogService, slugify

__all__ = [
    "ICourseRepository",
    "Course",
    "CourseCreate",
    "CourseUpdate",
    "CourseNotFoundError",
    "CatalogService",
    "slugify",
]
