"""
Authentication module exceptions.

These exceptions are raised by the auth module and can be caught
by API error handlers to return appropriate HTTP responses.
"""

from shared.exceptions import AuthenticationError, AuthorizationError


class MalformedCredentialError(AuthenticationError):
    """Raised when the Authorization header is missing or not `Bearer <token>`."""

    def __init__(self, message: str = "Unauthorized - No token provided or invalid format"):
        super().__init__(message, code="MALFORMED_CREDENTIAL")


class InvalidCredentialError(AuthenticationError):
    """Raised when no trust source accepts the bearer token."""

    def __init__(self, message: str = "Unauthorized - Invalid token"):
        super().__init__(message, code="INVALID_CREDENTIAL")


class ForbiddenError(AuthorizationError):
    """Raised when a caller acts on a resource that is not theirs."""

    def __init__(self, message: str = "Forbidden", resource: str | None = None):
        super().__init__(
            message,
            code="FORBIDDEN",
            details={"resource": resource} if resource else {},
        )
