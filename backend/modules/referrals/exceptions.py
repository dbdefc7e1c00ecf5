"""
Referral module exceptions.
"""

from shared.exceptions import ValidationError

from .models import ReferralResolution


class ReferralRejectedError(ValidationError):
    """Raised when a referral code explicitly checked by the user does not apply."""

    def __init__(self, resolution: ReferralResolution):
        super().__init__(
            resolution.message or "Invalid referral code",
            code=resolution.reason.value.upper() if resolution.reason else "INVALID_REFERRAL",
            details={"code": resolution.code, "plan_type": resolution.plan_type.value},
        )
        self.resolution = resolution
