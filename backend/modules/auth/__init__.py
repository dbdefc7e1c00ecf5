"""
Authentication module.

Verifies bearer credentials against the identity provider and against
self-issued session tokens.

Public API:
- ICredentialVerifier: Interface for credential verification
- CredentialVerifier: Ordered-strategy implementation
- ProviderTokenStrategy / SelfIssuedTokenStrategy: Trust sources
- Auth exceptions: MalformedCredentialError, InvalidCredentialError, ForbiddenError
"""

from .interfaces import ICredentialVerifier, ITokenVerificationStrategy
from .models import TokenSource, SelfIssuedClaims
from .service import CredentialVerifier, build_credential_verifier, parse_bearer
from .strategies import ProviderTokenStrategy, SelfIssuedTokenStrategy
from .exceptions import (
    MalformedCredentialError,
    InvalidCredentialError,
    ForbiddenError,
)

__all__ = [
    # Interfaces
    "ICredentialVerifier",
    "ITokenVerificationStrategy",
    # Models
    "TokenSource",
    "SelfIssuedClaims",
    # Implementation
    "CredentialVerifier",
    "build_credential_verifier",
    "parse_bearer",
    "ProviderTokenStrategy",
    "SelfIssuedTokenStrategy",
    # Exceptions
    "MalformedCredentialError",
    "InvalidCredentialError",
    "ForbiddenError",
]
