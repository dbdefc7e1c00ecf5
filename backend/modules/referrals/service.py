"""
Referral discount resolver.

Pure functions: the result depends only on the code table, the plan and
the date passed in (today's local date by default).
"""

from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Optional

from .codes import REFERRAL_CODES
from .models import (
    PLAN_PRICES,
    REJECTION_MESSAGES,
    PlanType,
    ReferralCode,
    ReferralResolution,
    RejectionReason,
)


def base_price(plan_type: PlanType) -> int:
    """Undiscounted price of a plan in paise."""
    return PLAN_PRICES[PlanType(plan_type)]


def apply_discount(amount: int, discount_percent: int) -> int:
    """
    Subtract a percentage discount from an amount in minor units.

    The discount is rounded half-up to a whole minor unit before it is
    subtracted.
    """
    discount = (Decimal(amount) * Decimal(discount_percent) / Decimal(100)).quantize(
        Decimal(1), rounding=ROUND_HALF_UP
    )
    return amount - int(discount)


def _reject(code: str, plan_type: PlanType, reason: RejectionReason) -> ReferralResolution:
    return ReferralResolution(
        valid=False,
        code=code,
        plan_type=plan_type,
        reason=reason,
        message=REJECTION_MESSAGES[reason].format(plan_type=plan_type.value),
    )


def resolve_referral(
    code: str,
    plan_type: PlanType,
    today: Optional[date] = None,
    codes: Iterable[ReferralCode] = REFERRAL_CODES,
) -> ReferralResolution:
    """
    Resolve a referral code for a plan.

    Args:
        code: Code as typed by the user (case-sensitive)
        plan_type: Plan being purchased
        today: Date to check expiry against; defaults to the local date
        codes: Code table to search

    Returns:
        ReferralResolution, valid or carrying the rejection reason
    """
    plan_type = PlanType(plan_type)
    today = today or date.today()

    referral = next((ref for ref in codes if ref.code == code), None)
    if referral is None:
        return _reject(code, plan_type, RejectionReason.UNKNOWN_CODE)
    if not referral.is_active:
        return _reject(code, plan_type, RejectionReason.INACTIVE)
    if today > referral.expires_on:
        return _reject(code, plan_type, RejectionReason.EXPIRED)
    if plan_type not in referral.accepted_plans:
        return _reject(code, plan_type, RejectionReason.PLAN_NOT_ACCEPTED)

    original = base_price(plan_type)
    return ReferralResolution(
        valid=True,
        code=code,
        plan_type=plan_type,
        discount_percent=referral.discount_percent,
        base_amount=original,
        amount_to_pay=apply_discount(original, referral.discount_percent),
        accepted_plans=sorted(referral.accepted_plans, key=lambda p: p.value),
        expiry_date=referral.expiry_date,
    )


def price_for_plan(
    plan_type: PlanType,
    referral_code: Optional[str] = None,
    today: Optional[date] = None,
    codes: Iterable[ReferralCode] = REFERRAL_CODES,
) -> tuple[int, Optional[ReferralResolution]]:
    """
    Amount to charge for a plan, falling back to the base price when the
    referral code is absent or does not apply.
    """
    if not referral_code:
        return base_price(plan_type), None

    resolution = resolve_referral(referral_code, plan_type, today=today, codes=codes)
    if resolution.valid:
        return resolution.amount_to_pay, resolution
    return base_price(plan_type), resolution
