"""
Authentication module interfaces.

Other modules should depend on these protocols, not the concrete
implementations. The verifier runs an ordered list of strategies, so a
new trust source only needs to satisfy ITokenVerificationStrategy.
"""

from typing import Optional, Protocol, runtime_checkable

from shared.models import CallerIdentity


@runtime_checkable
class ITokenVerificationStrategy(Protocol):
    """One trust source a bearer token can be checked against."""

    name: str

    async def verify(self, token: str) -> CallerIdentity:
        """
        Verify a raw token against this trust source.

        Raises:
            InvalidCredentialError: If this source does not accept the token
        """
        ...


@runtime_checkable
class ICredentialVerifier(Protocol):
    """
    Interface for bearer credential verification.

    This protocol defines the contract that the auth module exposes
    to the API layer and to other modules.
    """

    async def verify_header(self, authorization: Optional[str]) -> CallerIdentity:
        """
        Verify an `Authorization` header value.

        Args:
            authorization: Raw header value, e.g. "Bearer eyJ..."

        Returns:
            CallerIdentity of the verified subject

        Raises:
            MalformedCredentialError: If the header is not `Bearer <token>`
            InvalidCredentialError: If no trust source accepts the token
        """
        ...

    async def verify_token(self, token: str) -> CallerIdentity:
        """
        Verify a bare token against every strategy in priority order.

        Raises:
            InvalidCredentialError: If no trust source accepts the token
        """
        ...
