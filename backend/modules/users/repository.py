"""
User profile repository for the `users` table.
"""

from typing import Any, Optional

from shared.repository import BaseRepository

from .interfaces import IUserRepository
from .models import UserProfile


class UserRepository(BaseRepository[UserProfile], IUserRepository):
    """Supabase-backed profile storage."""

    def get(self, user_id: str) -> Optional[UserProfile]:
        result = self._db.table("users").select("*").eq("id", user_id).execute()
        if not result.data:
            return None
        return UserProfile(**result.data[0])

    def get_by_email(self, email: str) -> Optional[UserProfile]:
        result = (
            self._db.table("users")
            .select("*")
            .eq("email", email.lower())
            .limit(1)
            .execute()
        )
        if not result.data:
            return None
        return UserProfile(**result.data[0])

    def create(self, user_id: str, data: dict[str, Any]) -> UserProfile:
        row = {**data, "id": user_id}
        result = self._db.table("users").insert(row).execute()
        return UserProfile(**result.data[0])

    def update(self, user_id: str, data: dict[str, Any]) -> Optional[UserProfile]:
        result = self._db.table("users").update(data).eq("id", user_id).execute()
        if not result.data:
            return None
        return UserProfile(**result.data[0])

    def delete(self, user_id: str) -> None:
        self._db.table("users").delete().eq("id", user_id).execute()
