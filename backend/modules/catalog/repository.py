"""
Course repository for the `courses` table.
"""

from typing import Any, Optional

from shared.repository import BaseRepository

from .interfaces import ICourseRepository
from .models import Course


class CourseRepository(BaseRepository[Course], ICourseRepository):
    """Supabase-backed course storage."""

    def list_courses(self, category: Optional[str] = None) -> list[Course]:
        query = self._db.table("courses").select("*")
        if category is not None:
            query = query.eq("category", category)
        result = query.order("created_at", desc=True).execute()
        return [Course(**row) for row in result.data]

    def get(self, course_id: str) -> Optional[Course]:
        result = self._db.table("courses").select("*").eq("id", course_id).execute()
        if not result.data:
            return None
        return Course(**result.data[0])

    def create(self, data: dict[str, Any]) -> Course:
        result = self._db.table("courses").insert(data).execute()
        return Course(**result.data[0])

    def update(self, course_id: str, data: dict[str, Any]) -> Optional[Course]:
        result = self._db.table("courses").update(data).eq("id", course_id).execute()
        if not result.data:
            return None
        return Course(**result.data[0])

    def delete(self, course_id: str) -> bool:
        result = self._db.table("courses").delete().eq("id", course_id).execute()
        return bool(result.data)
