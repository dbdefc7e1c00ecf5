"""
Referral module.

Resolves static referral codes into discounted plan prices.

Public API:
- resolve_referral: code + plan -> ReferralResolution
- price_for_plan: amount to charge, with silent fallback to the base price
- PlanType, PLAN_PRICES: plan identifiers and base prices in paise
"""

from .codes import REFERRAL_CODES
from .models import (
    PLAN_PRICES,
    PlanType,
    ReferralCode,
    ReferralResolution,
    RejectionReason,
)
from .exceptions import ReferralRejectedError
from .service import apply_discount, base_price, price_for_plan, resolve_referral

__all__ = [
    "REFERRAL_CODES",
    "PLAN_PRICES",
    "PlanType",
    "ReferralCode",
    "ReferralResolution",
    "RejectionReason",
    "ReferralRejectedError",
    "apply_discount",
    "base_price",
    "price_for_plan",
    "resolve_referral",
]
