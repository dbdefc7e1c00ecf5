"""
Catalog service.

Read access is public. Write access is gated by the admin dependency at
the route layer, so the service only owns slugs and timestamps. Repository
calls are blocking Supabase requests and run in worker threads.
"""

import asyncio
import logging
import re
from typing import Optional

from shared.repository import utc_now_iso

from .exceptions import CourseNotFoundError
from .interfaces import ICourseRepository
from .models import Course, CourseCreate, CourseUpdate

logger = logging.getLogger(__name__)

_SLUG_SEPARATORS = re.compile(r"[^a-z0-9]+")


def slugify(title: str) -> str:
    """
    URL slug for a course title.

    Lowercases and collapses every run of characters outside [a-z0-9]
    into a single hyphen, e.g. "Intro to No-Code!" -> "intro-to-no-code-".
    """
    return _SLUG_SEPARATORS.sub("-", title.lower())


class CatalogService:
    """Course catalog operations."""

    def __init__(self, repository: ICourseRepository):
        self._repository = repository

    async def list_courses(self, category: Optional[str] = None) -> list[Course]:
        return await asyncio.to_thread(self._repository.list_courses, category)

    async def get_course(self, course_id: str) -> Course:
        course = await asyncio.to_thread(self._repository.get, course_id)
        if course is None:
            raise CourseNotFoundError(course_id)
        return course

    async def create_course(self, request: CourseCreate) -> Course:
        data = request.model_dump(exclude_none=True)
        data["slug"] = slugify(request.title)
        data["created_at"] = utc_now_iso()

        course = await asyncio.to_thread(self._repository.create, data)
        logger.info("Created course %s (%s)", course.id, course.slug)
        return course

    async def update_course(self, course_id: str, request: CourseUpdate) -> Course:
        data = request.model_dump(exclude_unset=True)
        if "title" in data:
            data["slug"] = slugify(data["title"])
        data["updated_at"] = utc_now_iso()

        course = await asyncio.to_thread(self._repository.update, course_id, data)
        if course is None:
            raise CourseNotFoundError(course_id)
        return course

    async def delete_course(self, course_id: str) -> None:
        if not await asyncio.to_thread(self._repository.delete, course_id):
            raise CourseNotFoundError(course_id)
        logger.info("Deleted course %s", course_id)
