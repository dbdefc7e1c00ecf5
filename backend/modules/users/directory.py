"""
Supabase Auth implementation of the user directory.

Admin operations run on the service-role client. Password sign-in runs on
a fresh anon client each time, since it stores a session on its client.
supabase-py is synchronous, so every call runs in a worker thread.
"""

import asyncio
import logging
from typing import Any, Callable, Optional

from supabase import Client, AuthError

from modules.auth.exceptions import InvalidCredentialError

from .exceptions import EmailAlreadyExistsError, SignupRejectedError, UserNotFoundError
from .interfaces import IUserDirectory

logger = logging.getLogger(__name__)

# GoTrue error codes for an address that is already registered.
EMAIL_EXISTS_CODES = frozenset({"email_exists", "user_already_exists"})


def _is_duplicate_email(error: AuthError) -> bool:
    if getattr(error, "code", None) in EMAIL_EXISTS_CODES:
        return True
    return "already been registered" in str(error).lower()


class SupabaseUserDirectory(IUserDirectory):
    """Identity operations backed by Supabase Auth."""

    def __init__(
        self,
        db: Client,
        auth_client_factory: Callable[[], Client],
        redirect_url: Optional[str] = None,
    ):
        self._db = db
        self._auth_client_factory = auth_client_factory
        self._redirect_url = redirect_url

    def _link_options(self) -> dict[str, Any]:
        return {"redirect_to": self._redirect_url} if self._redirect_url else {}

    async def sign_in(self, email: str, password: str) -> str:
        client = self._auth_client_factory()
        try:
            response = await asyncio.to_thread(
                client.auth.sign_in_with_password, {"email": email, "password": password}
            )
        except AuthError as e:
            logger.info("Sign-in rejected for %s: %s", email, e)
            raise InvalidCredentialError("Invalid email or password")

        if response.user is None:
            raise InvalidCredentialError("Invalid email or password")
        return response.user.id

    async def create_user(self, email: str, password: str, display_name: Optional[str]) -> str:
        try:
            response = await asyncio.to_thread(self._db.auth.admin.create_user, {
                "email": email,
                "password": password,
                "email_confirm": False,
                "user_metadata": {"display_name": display_name},
            })
        except AuthError as e:
            if _is_duplicate_email(e):
                # Identity exists without a profile row, e.g. an earlier signup
                # failed halfway.
                logger.warning("Identity already registered for %s", email)
                raise EmailAlreadyExistsError(email)
            logger.warning("Identity provider refused signup for %s: %s", email, e)
            raise SignupRejectedError(str(e))
        return response.user.id

    async def update_user(self, user_id: str, attributes: dict[str, Any]) -> None:
        try:
            await asyncio.to_thread(
                self._db.auth.admin.update_user_by_id, user_id, {"user_metadata": attributes}
            )
        except (AuthError, ValueError) as e:
            logger.info("Cannot update identity %s: %s", user_id, e)
            raise UserNotFoundError(user_id)

    async def delete_user(self, user_id: str) -> None:
        try:
            await asyncio.to_thread(self._db.auth.admin.delete_user, user_id)
        except (AuthError, ValueError) as e:
            logger.info("Cannot delete identity %s: %s", user_id, e)
            raise UserNotFoundError(user_id)

    async def generate_verification_link(self, email: str, password: str) -> Optional[str]:
        try:
            response = await asyncio.to_thread(self._db.auth.admin.generate_link, {
                "type": "signup",
                "email": email,
                "password": password,
                "options": self._link_options(),
            })
        except AuthError as e:
            logger.error("Could not generate verification link for %s: %s", email, e)
            return None
        return response.properties.action_link

    async def generate_password_reset_link(self, email: str) -> Optional[str]:
        try:
            response = await asyncio.to_thread(self._db.auth.admin.generate_link, {
                "type": "recovery",
                "email": email,
                "options": self._link_options(),
            })
        except AuthError as e:
            logger.info("No password reset link issued for %s: %s", email, e)
            return None
        return response.properties.action_link
