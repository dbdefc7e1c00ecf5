"""
Shared infrastructure for the NoDevBuild backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Supabase client factory
- exceptions: Base exception classes
- repository: Base class for Supabase-backed repositories

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import get_supabase_client, get_supabase_auth_client, reset_client_cache
from .exceptions import (
    NoDevBuildError,
    NotFoundError,
    ValidationError,
    ConflictError,
    AuthenticationError,
    AuthorizationError,
    ExternalServiceError,
    ServiceTimeoutError,
)
from .models import CallerIdentity, CamelModel

__all__ = [
    "Settings",
    "get_settings",
    "get_supabase_client",
    "get_supabase_auth_client",
    "reset_client_cache",
    "NoDevBuildError",
    "NotFoundError",
    "ValidationError",
    "ConflictError",
    "AuthenticationError",
    "AuthorizationError",
    "ExternalServiceError",
    "ServiceTimeoutError",
    "CallerIdentity",
    "CamelModel",
]
