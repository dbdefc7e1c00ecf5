"""
Users module data models.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Union

from pydantic import EmailStr, Field

from shared.models import CamelModel
from modules.referrals.models import PlanType
from modules.payments.models import MembershipStatus


class UserProfile(CamelModel):
    """
    A row of the `users` table.

    Membership fields are written by the payment reconciler and are empty
    until the first completed purchase.
    """

    id: str
    email: EmailStr
    display_name: Optional[str] = None
    photo_url: Optional[str] = None
    email_verified: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    membership_status: MembershipStatus = MembershipStatus.NONE
    plan_type: Optional[PlanType] = None
    amount_paid: Optional[int] = None
    currency: Optional[str] = None
    subscription_start_date: Optional[datetime] = None
    last_payment_date: Optional[datetime] = None

    model_config = {"extra": "ignore"}


@dataclass(frozen=True)
class Found:
    """Lookup hit."""

    user: UserProfile


@dataclass(frozen=True)
class NotFound:
    """Lookup miss."""

    email: str


UserLookup = Union[Found, NotFound]


# -----------------------------------------------------------------------------
# API request/response bodies
# -----------------------------------------------------------------------------


class LoginRequest(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class SignupRequest(CamelModel):
    email: str = Field(..., min_length=3, description="Validated by the service, not the schema")
    password: str = Field(..., min_length=6)
    display_name: Optional[str] = Field(None, max_length=100)


class UpdateProfileRequest(CamelModel):
    display_name: Optional[str] = Field(None, max_length=100)
    photo_url: Optional[str] = Field(None, max_length=2048)


class PasswordResetRequest(CamelModel):
    email: EmailStr


class AuthResponse(CamelModel):
    token: str
    user: UserProfile
    message: Optional[str] = None


class MessageResponse(CamelModel):
    message: str
