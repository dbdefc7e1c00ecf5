"""
Users module exceptions.
"""

from shared.exceptions import NotFoundError, ValidationError


class UserNotFoundError(NotFoundError):
    """Raised when a user profile does not exist."""

    def __init__(self, user_id: str):
        super().__init__(
            "User not found",
            code="USER_NOT_FOUND",
            details={"user_id": user_id},
        )


class InvalidEmailError(ValidationError):
    """Raised when an email address is malformed or cannot receive mail."""

    def __init__(self, email: str, reason: str, code: str = "INVALID_EMAIL_FORMAT"):
        super().__init__(
            reason,
            code=code,
            details={"email": email},
        )


class EmailAlreadyExistsError(ValidationError):
    """Raised when signing up with an email that already has an account."""

    def __init__(self, email: str):
        super().__init__(
            "Email already exists",
            code="EMAIL_ALREADY_EXISTS",
            details={"email": email},
        )


class SignupRejectedError(ValidationError):
    """Raised when the identity provider refuses to create the account."""

    def __init__(self, reason: str):
        super().__init__(reason, code="SIGNUP_REJECTED")
