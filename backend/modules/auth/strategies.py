"""
Token verification strategies.

Each strategy checks a bearer token against one trust source:

- ProviderTokenStrategy asks Supabase Auth whether it issued the token.
- SelfIssuedTokenStrategy verifies an HS256 token signed by this backend
  at login/signup, and also mints those tokens.
"""

import asyncio
import logging
from datetime import datetime, timedelta, timezone

import jwt
from pydantic import ValidationError as PydanticValidationError
from supabase import Client, AuthError

from shared.models import CallerIdentity

from .exceptions import InvalidCredentialError
from .models import SelfIssuedClaims, TokenSource

logger = logging.getLogger(__name__)


class ProviderTokenStrategy:
    """Verifies tokens issued by the managed identity provider."""

    name = TokenSource.PROVIDER.value

    def __init__(self, db: Client):
        self._db = db

    async def verify(self, token: str) -> CallerIdentity:
        # supabase-py is synchronous; keep the round trip off the event loop.
        try:
            response = await asyncio.to_thread(self._db.auth.get_user, token)
        except AuthError as e:
            raise InvalidCredentialError(f"Identity provider rejected token: {e}")

        if response is None or response.user is None:
            raise InvalidCredentialError("Identity provider returned no user for token")

        return CallerIdentity(subject=response.user.id, source=self.name)


class SelfIssuedTokenStrategy:
    """
    Issues and verifies this backend's own session tokens.

    The signing secret is passed in explicitly (from Settings) rather than
    read from module scope, so tests and the container control it.
    """

    name = TokenSource.SELF_ISSUED.value

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        expiration_hours: int = 24,
    ):
        self._secret = secret
        self._algorithm = algorithm
        self._expiration = timedelta(hours=expiration_hours)

    def issue(self, subject: str) -> str:
        """
        Mint a signed token for a user.

        Args:
            subject: User ID to embed as the `sub` claim

        Returns:
            Encoded JWT string
        """
        if not self._secret:
            raise RuntimeError("JWT_SECRET is not configured; cannot issue tokens")

        now = datetime.now(timezone.utc)
        payload = {
            "sub": subject,
            "iat": int(now.timestamp()),
            "exp": int((now + self._expiration).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    async def verify(self, token: str) -> CallerIdentity:
        if not self._secret:
            raise InvalidCredentialError("Self-issued tokens are not configured")

        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["sub", "exp"]},
            )
            claims = SelfIssuedClaims(**payload)
        except jwt.ExpiredSignatureError:
            raise InvalidCredentialError("Token has expired")
        except jwt.InvalidTokenError as e:
            raise InvalidCredentialError(f"Invalid token: {e}")
        except PydanticValidationError:
            raise InvalidCredentialError("Token claims are malformed")

        return CallerIdentity(subject=claims.sub, source=self.name)
