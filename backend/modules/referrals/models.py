"""
Referral module data models.

All money amounts are integers in the currency's minor unit (paise for INR).
"""

from datetime import date, datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from shared.models import CamelModel


EXPIRY_DATE_FORMAT = "%d-%m-%Y"


class PlanType(str, Enum):
    """Membership plans that can be purchased."""

    BASIC = "basicPlan"
    PREMIUM = "premiumPlan"


# Base prices in paise
PLAN_PRICES: dict[PlanType, int] = {
    PlanType.BASIC: 180_000,    # Rs 1800
    PlanType.PREMIUM: 500_000,  # Rs 5000
}


class RejectionReason(str, Enum):
    """Why a referral code could not be applied."""

    UNKNOWN_CODE = "unknown_code"
    INACTIVE = "inactive"
    EXPIRED = "expired"
    PLAN_NOT_ACCEPTED = "plan_not_accepted"


REJECTION_MESSAGES = {
    RejectionReason.UNKNOWN_CODE: "Invalid referral code",
    RejectionReason.INACTIVE: "Referral code is no longer active",
    RejectionReason.EXPIRED: "Referral code has expired",
    RejectionReason.PLAN_NOT_ACCEPTED: "This referral code is not valid for {plan_type}",
}


class ReferralCode(BaseModel):
    """A static referral code definition."""

    code: str = Field(..., min_length=1)
    discount_percent: int = Field(..., ge=0, le=100)
    expiry_date: str = Field(..., description="Last valid day, DD-MM-YYYY")
    is_active: bool = True
    accepted_plans: frozenset[PlanType]

    model_config = {"frozen": True}

    @field_validator("expiry_date")
    @classmethod
    def _check_expiry_format(cls, value: str) -> str:
        datetime.strptime(value, EXPIRY_DATE_FORMAT)
        return value

    @property
    def expires_on(self) -> date:
        """Expiry as a calendar date."""
        return datetime.strptime(self.expiry_date, EXPIRY_DATE_FORMAT).date()


class ReferralResolution(BaseModel):
    """
    Outcome of resolving a referral code for a plan.

    Either `valid` is False and `reason` says why, or `valid` is True and
    the discount fields are populated.
    """

    valid: bool
    code: str
    plan_type: PlanType
    reason: Optional[RejectionReason] = None
    message: Optional[str] = None
    discount_percent: Optional[int] = None
    base_amount: Optional[int] = None
    amount_to_pay: Optional[int] = None
    accepted_plans: list[PlanType] = Field(default_factory=list)
    expiry_date: Optional[str] = None


class VerifyReferralRequest(CamelModel):
    """Request body for referral verification."""

    code: str = Field(..., min_length=1)
    plan_type: PlanType


class VerifyReferralResponse(CamelModel):
    """Response body for a referral code that applies."""

    is_valid: bool
    discount_percent: int
    amount_to_pay: int
    accepted_plans: list[PlanType]
    plan_type: PlanType
    expiry_date: str
