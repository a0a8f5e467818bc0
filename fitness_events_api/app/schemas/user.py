"""
Pydantic models for user data.

Users are created at registration by another part of the system; the
API only reads them.  ``UserRead`` is returned by the lookup route and
``UserSummary`` is embedded in reviews and registration listings.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from .base import ApiModel


class UserSummary(ApiModel):
    id: str
    name: str
    email: Optional[str] = None
    mobile_number: str


class UserRead(UserSummary):
    """Schema returned by the mobile number lookup."""

    city: Optional[str] = None
    gender: Optional[str] = None
    created_at: datetime
    fiddle_fitness_coins: int = 0


class ReferralValidate(ApiModel):
    referral_code: Optional[str] = Field(None, examples=["XYZAB - Kapil Bamotriya"])


class ReferralResult(ApiModel):
    """Outcome of a referral code check.

    ``referral_code`` is the display form ``CODE - Name`` when valid and
    ``INVALID CODE!`` otherwise.
    """

    valid: bool
    referral_code: str
