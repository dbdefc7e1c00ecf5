"""
Base exception classes for the NoDevBuild backend.

Each module should define its own exceptions that inherit from these bases.
This enables consistent error handling across the application: the API layer
maps each base class to one HTTP status code.
"""

from typing import Optional, Any


class NoDevBuildError(Exception):
    """
    Base exception for all NoDevBuild errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.message,
            "code": self.code,
            "details": self.details,
        }


class NotFoundError(NoDevBuildError):
    """Resource not found."""

    pass


class ValidationError(NoDevBuildError):
    """Input validation failed."""

    pass


class ConflictError(NoDevBuildError):
    """Request conflicts with the current state of a resource."""

    pass


class AuthenticationError(NoDevBuildError):
    """Authentication failed (invalid or missing credentials)."""

    pass


class AuthorizationError(NoDevBuildError):
    """Authorization failed (insufficient permissions)."""

    pass


class ExternalServiceError(NoDevBuildError):
    """Error communicating with an external service."""

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service


class ServiceTimeoutError(ExternalServiceError):
    """An external service did not answer in time. Safe to retry."""

    pass
