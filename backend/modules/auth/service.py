"""
Credential verifier implementation.

Validates bearer credentials by trying each trust source in a fixed
priority order: the identity provider first, then self-issued tokens.
Both login mechanisms stay valid at the same time.
"""

import logging
from typing import Optional, Sequence

from supabase import Client

from shared.config import Settings
from shared.models import CallerIdentity

from .interfaces import ICredentialVerifier, ITokenVerificationStrategy
from .exceptions import InvalidCredentialError, MalformedCredentialError
from .strategies import ProviderTokenStrategy, SelfIssuedTokenStrategy

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


def parse_bearer(authorization: Optional[str]) -> str:
    """
    Extract the token from an `Authorization: Bearer <token>` header value.

    Raises:
        MalformedCredentialError: If the header is missing, uses another
            scheme, or carries an empty token
    """
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        raise MalformedCredentialError()

    token = authorization[len(BEARER_PREFIX):].strip()
    if not token:
        raise MalformedCredentialError("Unauthorized - Token is empty")

    return token


class CredentialVerifier(ICredentialVerifier):
    """
    Runs an ordered list of verification strategies.

    The first strategy that accepts the token wins and later strategies are
    never consulted. Verification is read-only.
    """

    def __init__(self, strategies: Sequence[ITokenVerificationStrategy]):
        if not strategies:
            raise ValueError("CredentialVerifier needs at least one strategy")
        self._strategies = list(strategies)

    @property
    def strategies(self) -> list[ITokenVerificationStrategy]:
        return list(self._strategies)

    async def verify_header(self, authorization: Optional[str]) -> CallerIdentity:
        token = parse_bearer(authorization)
        return await self.verify_token(token)

    async def verify_token(self, token: str) -> CallerIdentity:
        if not token:
            raise MalformedCredentialError("Unauthorized - Token is empty")

        failures: dict[str, str] = {}
        for strategy in self._strategies:
            try:
                identity = await strategy.verify(token)
            except InvalidCredentialError as e:
                failures[strategy.name] = e.message
                continue
            return identity

        logger.info("Bearer token rejected by all trust sources: %s", failures)
        raise InvalidCredentialError()


def build_credential_verifier(
    settings: Settings,
    db: Client,
) -> tuple[CredentialVerifier, SelfIssuedTokenStrategy]:
    """
    Wire the verifier with secrets taken from settings.

    Returns the verifier together with the self-issued strategy, which the
    accounts service also uses to mint tokens.
    """
    self_issued = SelfIssuedTokenStrategy(
        secret=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        expiration_hours=settings.jwt_expiration_hours,
    )
    verifier = CredentialVerifier([ProviderTokenStrategy(db), self_issued])
    return verifier, self_issued
