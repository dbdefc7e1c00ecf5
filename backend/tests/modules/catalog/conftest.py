"""
Pytest fixtures for catalog module tests.
"""

import itertools
from typing import Any, Optional

import pytest

from modules.catalog.interfaces import ICourseRepository
from modules.catalog.models import Course
from modules.catalog.service import CatalogService


class InMemoryCourseRepository(ICourseRepository):
    def __init__(self):
        self.rows: dict[str, dict[str, Any]] = {}
        self._ids = itertools.count(1)

    def list_courses(self, category: Optional[str] = None) -> list[Course]:
        return [
            Course(**row) for row in self.rows.values()
            if category is None or row.get("category") == category
        ]

    def get(self, course_id: str) -> Optional[Course]:
        row = self.rows.get(course_id)
        return Course(**row) if row else None

    def create(self, data: dict[str, Any]) -> Course:
        course_id = f"course-{next(self._ids)}"
        self.rows[course_id] = {**data, "id": course_id}
        return Course(**self.rows[course_id])

    def update(self, course_id: str, data: dict[str, Any]) -> Optional[Course]:
        if course_id not in self.rows:
            return None
        self.rows[course_id].update(data)
        return Course(**self.rows[course_id])

    def delete(self, course_id: str) -> bool:
        return self.rows.pop(course_id, None) is not None


@pytest.fixture
def repository() -> InMemoryCourseRepository:
    return InMemoryCourseRepository()


@pytest.fixture
def catalog(repository) -> CatalogService:
    return CatalogService(repository)
