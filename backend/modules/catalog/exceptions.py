"""
Catalog module exceptions.
"""

from shared.exceptions import NotFoundError


class CourseNotFoundError(NotFoundError):
    """Raised when a course does not exist."""

    def __init__(self, course_id: str):
        super().__init__(
            "Course not found",
            code="COURSE_NOT_FOUND",
            details={"course_id": course_id},
        )
