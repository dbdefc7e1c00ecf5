"""
Pytest fixtures for users module tests.

In-memory identity provider and profile table.
"""

import asyncio
import itertools
from typing import Any, Optional

import pytest

from modules.auth.exceptions import InvalidCredentialError
from modules.auth.strategies import SelfIssuedTokenStrategy
from modules.notifications.models import OutgoingEmail
from modules.users.exceptions import EmailAlreadyExistsError
from modules.users.interfaces import IUserDirectory, IUserRepository
from modules.users.models import UserProfile
from modules.users.service import AccountService

from tests.conftest import TEST_JWT_SECRET


class FakeDirectory(IUserDirectory):
    def __init__(self):
        self.passwords: dict[str, tuple[str, str]] = {}  # email -> (user_id, password)
        self.attributes: dict[str, dict[str, Any]] = {}
        self.deleted: list[str] = []
        self._ids = itertools.count(1)

    async def sign_in(self, email: str, password: str) -> str:
        entry = self.passwords.get(email)
        if entry is None or entry[1] != password:
            raise InvalidCredentialError("Invalid email or password")
        return entry[0]

    async def create_user(self, email: str, password: str, display_name: Optional[str]) -> str:
        if email in self.passwords:
            raise EmailAlreadyExistsError(email)
        user_id = f"user-{next(self._ids)}"
        self.passwords[email] = (user_id, password)
        self.attributes[user_id] = {"display_name": display_name}
        return user_id

    async def update_user(self, user_id: str, attributes: dict[str, Any]) -> None:
        self.attributes.setdefault(user_id, {}).update(attributes)

    async def delete_user(self, user_id: str) -> None:
        self.deleted.append(user_id)

    async def generate_verification_link(self, email: str, password: str) -> Optional[str]:
        return f"https://auth.example.com/verify?email={email}"

    async def generate_password_reset_link(self, email: str) -> Optional[str]:
        if email not in self.passwords:
            return None
        return f"https://auth.example.com/reset?email={email}"


class InMemoryUserRepository(IUserRepository):
    def __init__(self):
        self.rows: dict[str, dict[str, Any]] = {}

    def get(self, user_id: str) -> Optional[UserProfile]:
        row = self.rows.get(user_id)
        return UserProfile(**row) if row else None

    def get_by_email(self, email: str) -> Optional[UserProfile]:
        for row in self.rows.values():
            if row["email"] == email.lower():
                return UserProfile(**row)
        return None

    def create(self, user_id: str, data: dict[str, Any]) -> UserProfile:
        self.rows[user_id] = {**data, "id": user_id}
        return UserProfile(**self.rows[user_id])

    def update(self, user_id: str, data: dict[str, Any]) -> Optional[UserProfile]:
        if user_id not in self.rows:
            return None
        self.rows[user_id].update(data)
        return UserProfile(**self.rows[user_id])

    def delete(self, user_id: str) -> None:
        self.rows.pop(user_id, None)


class RecordingDispatcher:
    """Notification dispatcher that keeps what it was asked to send."""

    def __init__(self):
        self.sent: list[OutgoingEmail] = []

    async def send(self, message: OutgoingEmail) -> None:
        self.sent.append(message)

    async def dispatch(self, message: OutgoingEmail) -> bool:
        self.sent.append(message)
        return True


class SlowDispatcher(RecordingDispatcher):
    """Recording dispatcher behind a relay that takes `delay` seconds per message."""

    def __init__(self, delay: float):
        super().__init__()
        self.delay = delay

    async def dispatch(self, message: OutgoingEmail) -> bool:
        await asyncio.sleep(self.delay)
        return await super().dispatch(message)


@pytest.fixture
def directory() -> FakeDirectory:
    return FakeDirectory()


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def dispatcher() -> RecordingDispatcher:
    return RecordingDispatcher()


@pytest.fixture
def tokens() -> SelfIssuedTokenStrategy:
    return SelfIssuedTokenStrategy(secret=TEST_JWT_SECRET)


@pytest.fixture
def accounts(directory, user_repository, tokens, dispatcher) -> AccountService:
    return AccountService(
        directory=directory,
        repository=user_repository,
        tokens=tokens,
        notifications=dispatcher,
        check_deliverability=False,
    )
