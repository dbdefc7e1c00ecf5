"""
Account service.

Login, signup, profile management and password reset. Identity lives in
the managed provider (IUserDirectory); profile and membership data live in
the `users` table (IUserRepository). Sessions are self-issued tokens.

Repository calls are blocking Supabase requests and run in worker threads.
Emails never hold up a response: they go to the request's BackgroundTasks
when a route supplies one, otherwise to a tracked asyncio task.
"""

import asyncio
import logging
from typing import Optional

from email_validator import EmailNotValidError, EmailUndeliverableError, validate_email
from fastapi import BackgroundTasks

from shared.repository import utc_now_iso
from modules.auth.exceptions import ForbiddenError
from modules.auth.strategies import SelfIssuedTokenStrategy
from modules.notifications import (
    INotificationDispatcher,
    OutgoingEmail,
    login_notification_email,
    password_reset_email,
    welcome_email,
)

from .exceptions import EmailAlreadyExistsError, InvalidEmailError, UserNotFoundError
from .interfaces import IUserDirectory, IUserRepository
from .models import AuthResponse, Found, NotFound, UserLookup, UserProfile

logger = logging.getLogger(__name__)

PASSWORD_RESET_MESSAGE = "If an account exists for this email, a password reset link has been sent"


class AccountService:
    """User-facing account operations."""

    def __init__(
        self,
        directory: IUserDirectory,
        repository: IUserRepository,
        tokens: SelfIssuedTokenStrategy,
        notifications: INotificationDispatcher,
        check_deliverability: bool = True,
        send_login_notifications: bool = False,
    ):
        self._directory = directory
        self._repository = repository
        self._tokens = tokens
        self._notifications = notifications
        self._check_deliverability = check_deliverability
        self._send_login_notifications = send_login_notifications
        self._pending: set[asyncio.Task] = set()

    # -------------------------------------------------------------------------
    # Notifications
    # -------------------------------------------------------------------------

    def _notify(self, message: OutgoingEmail, background: Optional[BackgroundTasks]) -> None:
        if background is not None:
            background.add_task(self._notifications.dispatch, message)
            return

        task = asyncio.create_task(self._notifications.dispatch(message))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def drain_notifications(self) -> None:
        """Wait for emails scheduled outside a request (shutdown, tests)."""
        if self._pending:
            await asyncio.gather(*self._pending)

    # -------------------------------------------------------------------------
    # Sessions
    # -------------------------------------------------------------------------

    async def login(
        self,
        email: str,
        password: str,
        background: Optional[BackgroundTasks] = None,
    ) -> AuthResponse:
        """
        Sign in with email and password and mint a session token.

        Raises:
            InvalidCredentialError: Wrong email or password
        """
        user_id = await self._directory.sign_in(email, password)
        profile = await asyncio.to_thread(self._repository.get, user_id)
        profile = profile or UserProfile(id=user_id, email=email)

        if self._send_login_notifications:
            self._notify(login_notification_email(profile.email, profile.display_name), background)

        return AuthResponse(token=self._tokens.issue(user_id), user=profile)

    async def signup(
        self,
        email: str,
        password: str,
        display_name: Optional[str] = None,
        background: Optional[BackgroundTasks] = None,
    ) -> AuthResponse:
        """
        Create an account, queue the welcome/verification email and sign in.

        Raises:
            InvalidEmailError: Malformed address or a domain without mail servers
            EmailAlreadyExistsError: An account already uses this address
            SignupRejectedError: The identity provider refused the account
        """
        email = await self.normalize_email(email)

        lookup = await self.lookup_user(email)
        if isinstance(lookup, Found):
            raise EmailAlreadyExistsError(email)

        user_id = await self._directory.create_user(email, password, display_name)
        verification_link = await self._directory.generate_verification_link(email, password)

        now = utc_now_iso()
        profile = await asyncio.to_thread(self._repository.create, user_id, {
            "email": email,
            "display_name": display_name,
            "email_verified": False,
            "created_at": now,
            "updated_at": now,
        })
        logger.info("Created account %s", user_id)

        self._notify(welcome_email(email, display_name, verification_link), background)

        return AuthResponse(
            token=self._tokens.issue(user_id),
            user=profile,
            message="Please check your email to verify your account",
        )

    async def normalize_email(self, email: str) -> str:
        """
        Validate syntax and, optionally, that the domain accepts mail.

        The deliverability check does a DNS lookup, so it runs off the
        event loop.
        """
        try:
            result = await asyncio.to_thread(
                validate_email, email, check_deliverability=self._check_deliverability
            )
        except EmailUndeliverableError:
            raise InvalidEmailError(
                email,
                "Invalid email domain or domain does not accept emails",
                code="INVALID_EMAIL_DOMAIN",
            )
        except EmailNotValidError:
            raise InvalidEmailError(email, "Invalid email format")
        return result.normalized.lower()

    async def lookup_user(self, email: str) -> UserLookup:
        """Find a profile by email without using exceptions for the miss."""
        profile = await asyncio.to_thread(self._repository.get_by_email, email)
        if profile is None:
            return NotFound(email=email)
        return Found(user=profile)

    # -------------------------------------------------------------------------
    # Profiles
    # -------------------------------------------------------------------------

    @staticmethod
    def _require_self(caller_id: str, user_id: str) -> None:
        if caller_id != user_id:
            raise ForbiddenError("You can only access your own account", resource=f"users/{user_id}")

    async def get_profile(self, caller_id: str, user_id: str) -> UserProfile:
        self._require_self(caller_id, user_id)
        profile = await asyncio.to_thread(self._repository.get, user_id)
        if profile is None:
            raise UserNotFoundError(user_id)
        return profile

    async def update_profile(
        self,
        caller_id: str,
        user_id: str,
        display_name: Optional[str] = None,
        photo_url: Optional[str] = None,
    ) -> UserProfile:
        self._require_self(caller_id, user_id)
        changes = {
            key: value
            for key, value in {"display_name": display_name, "photo_url": photo_url}.items()
            if value is not None
        }

        if changes:
            await self._directory.update_user(user_id, changes)

        profile = await asyncio.to_thread(
            self._repository.update, user_id, {**changes, "updated_at": utc_now_iso()}
        )
        if profile is None:
            raise UserNotFoundError(user_id)
        return profile

    async def delete_account(self, caller_id: str, user_id: str) -> None:
        self._require_self(caller_id, user_id)
        await self._directory.delete_user(user_id)
        await asyncio.to_thread(self._repository.delete, user_id)
        logger.info("Deleted account %s", user_id)

    # -------------------------------------------------------------------------
    # Password reset
    # -------------------------------------------------------------------------

    async def request_password_reset(
        self,
        email: str,
        background: Optional[BackgroundTasks] = None,
    ) -> str:
        """
        Email a password-reset link if the account exists.

        The returned message is the same either way so the endpoint cannot
        be used to discover registered addresses.
        """
        link = await self._directory.generate_password_reset_link(email)
        if link:
            self._notify(password_reset_email(email, link), background)
        return PASSWORD_RESET_MESSAGE
