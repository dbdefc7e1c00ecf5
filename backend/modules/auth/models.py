"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

from enum import Enum
from pydantic import BaseModel, Field


class TokenSource(str, Enum):
    """Trust sources a bearer token can be verified against."""

    PROVIDER = "provider"        # Issued by Supabase Auth
    SELF_ISSUED = "self_issued"  # Signed by this backend at login/signup


class SelfIssuedClaims(BaseModel):
    """
    Decoded payload of a self-issued session token.

    Only the subject and expiry are required; everything else is ignored.
    """

    sub: str = Field(..., min_length=1, description="Subject (user ID)")
    exp: int = Field(..., description="Expiration timestamp")
    iat: int | None = Field(None, description="Issued at timestamp")

    model_config = {"extra": "ignore"}
