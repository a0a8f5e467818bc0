"""
User endpoints for API v1.

Users are looked up by mobile number in any formatting; the service
normalizes it to the last 10 digits.  The registrations listing is
used by the chat bot and requires the integration API key.
"""

import logging

from fastapi import APIRouter, Depends

from fitness_events_api.app.core import errors
from fitness_events_api.app.core.security import require_api_key
from fitness_events_api.app.schemas.registration import UserRegistrations
from fitness_events_api.app.schemas.user import ReferralResult, ReferralValidate, UserRead
from fitness_events_api.app.services.user_service import UserService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/referral", response_model=ReferralResult)
async def validate_referral(payload: ReferralValidate) -> ReferralResult:
    """Validate a referral code entered on the registration form.

    Returns the code in ``CODE - Name`` form when it belongs to a user,
    or ``INVALID CODE!`` otherwise.  400 when no code is given.
    """
    try:
        return await UserService.validate_referral_code(payload.referral_code)
    except errors.ApiError:
        raise
    except Exception as e:
        logger.exception("Error validating referral code: %s", e)
        raise errors.UpstreamError("Failed to validate referral code") from e


@router.get("/{mobile_number}", response_model=UserRead)
async def get_user(mobile_number: str) -> UserRead:
    """Fetch a user by mobile number.  404 if no user matches."""
    try:
        return await UserService.get_by_mobile_number(mobile_number)
    except errors.ApiError:
        raise
    except Exception as e:
        logger.exception("Error fetching user: %s", e)
        raise errors.UpstreamError("Failed to fetch user") from e


@router.get(
    "/{mobile_number}/registrations",
    response_model=UserRegistrations,
    dependencies=[Depends(require_api_key)],
)
async def get_user_registrations(mobile_number: str) -> UserRegistrations:
    """List a user's registrations, split into upcoming and past events."""
    try:
        return await UserService.list_registrations(mobile_number)
    except errors.ApiError:
        raise
    except Exception as e:
        logger.exception("Error fetching user registrations: %s", e)
        raise errors.UpstreamError("Failed to fetch user registrations") from e
