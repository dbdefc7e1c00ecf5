"""
Static referral code table.

Read-only at request time; add codes here and redeploy.
"""

from .models import PlanType, ReferralCode


REFERRAL_CODES: tuple[ReferralCode, ...] = (
    ReferralCode(
        code="OFF75",
        discount_percent=75,
        expiry_date="28-04-2026",
        is_active=True,
        accepted_plans=frozenset({PlanType.PREMIUM, PlanType.BASIC}),
    ),
    ReferralCode(
        code="OFF99",
        discount_percent=99,
        expiry_date="28-04-2026",
        is_active=True,
        accepted_plans=frozenset({PlanType.PREMIUM, PlanType.BASIC}),
    ),
)
