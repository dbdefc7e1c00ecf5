"""
Users module.

Account lifecycle on top of the managed identity provider, plus the
`users` profile table that also carries membership state.

Public API:
- AccountService: login, signup, profile management, password reset
- IUserDirectory / IUserRepository: provider and storage interfaces
- UserProfile, Found, NotFound: profile models and lookup result
- User exceptions: UserNotFoundError, InvalidEmailError, EmailAlreadyExistsError
"""

from .interfaces import IUserDirectory, IUserRepository
from .models import Found, NotFound, UserLookup, UserProfile
from .exceptions import (
    EmailAlreadyExistsError,
    InvalidEmailError,
    SignupRejectedError,
    UserNotFoundError,
)
from .service import AccountService

__all__ = [
    "IUserDirectory",
    "IUserRepository",
    "Found",
    "NotFound",
    "UserLookup",
    "UserProfile",
    "EmailAlreadyExistsError",
    "InvalidEmailError",
    "SignupRejectedError",
    "UserNotFoundError",
    "AccountService",
]
