"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and providing shared utilities for data operations.
"""

from datetime import datetime, timezone
from typing import TypeVar, Generic
from supabase import Client


T = TypeVar("T")


def utc_now_iso() -> str:
    """Current UTC time as an ISO-8601 string, the format stored in every table."""
    return datetime.now(timezone.utc).isoformat()


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - Generic type parameter for model type hints

    Subclasses should implement domain-specific data access methods
    and handle dict-to-Pydantic model mapping internally.

    Example:
        class CourseRepository(BaseRepository[Course]):
            def get_by_id(self, course_id: str) -> Optional[Course]:
                result = self._db.table("courses").select("*").eq("id", course_id).execute()
                if not result.data:
                    return None
                return Course(**result.data[0])
    """

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db
