"""
Catalog module interfaces.
"""

from typing import Any, Optional, Protocol, runtime_checkable

from .models import Course


@runtime_checkable
class ICourseRepository(Protocol):
    """Persistence for courses."""

    def list_courses(self, category: Optional[str] = None) -> list[Course]:
        ...

    def get(self, course_id: str) -> Optional[Course]:
        ...

    def create(self, data: dict[str, Any]) -> Course:
        ...

    def update(self, course_id: str, data: dict[str, Any]) -> Optional[Course]:
        """Apply changes; None if the course does not exist."""
        ...

    def delete(self, course_id: str) -> bool:
        """Delete a course; False if it did not exist."""
        ...
