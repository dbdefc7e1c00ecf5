"""
Users module interfaces.

IUserDirectory wraps the identity provider; IUserRepository wraps the
`users` profile table. AccountService combines both.
"""

from typing import Any, Optional, Protocol, runtime_checkable

from .models import UserProfile


@runtime_checkable
class IUserDirectory(Protocol):
    """Managed identity provider operations."""

    async def sign_in(self, email: str, password: str) -> str:
        """
        Check an email/password pair.

        Returns:
            The user's ID

        Raises:
            InvalidCredentialError: If the pair is rejected
        """
        ...

    async def create_user(self, email: str, password: str, display_name: Optional[str]) -> str:
        """
        Create an unverified identity and return its user ID.

        Raises:
            EmailAlreadyExistsError: The address already has an identity
            SignupRejectedError: The provider refused the account
        """
        ...

    async def update_user(self, user_id: str, attributes: dict[str, Any]) -> None:
        """Raises UserNotFoundError for an unknown user ID."""
        ...

    async def delete_user(self, user_id: str) -> None:
        """Raises UserNotFoundError for an unknown user ID."""
        ...

    async def generate_verification_link(self, email: str, password: str) -> Optional[str]:
        """Email-verification link, or None if the provider could not issue one."""
        ...

    async def generate_password_reset_link(self, email: str) -> Optional[str]:
        """Password-reset link, or None if there is no such account."""
        ...


@runtime_checkable
class IUserRepository(Protocol):
    """Persistence for user profiles."""

    def get(self, user_id: str) -> Optional[UserProfile]:
        ...

    def get_by_email(self, email: str) -> Optional[UserProfile]:
        ...

    def create(self, user_id: str, data: dict[str, Any]) -> UserProfile:
        ...

    def update(self, user_id: str, data: dict[str, Any]) -> Optional[UserProfile]:
        """Update a profile; None if it does not exist."""
        ...

    def delete(self, user_id: str) -> None:
        ...
