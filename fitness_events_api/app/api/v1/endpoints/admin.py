"""
Admin endpoints for API v1.

``/login`` exchanges the admin username and password for a bearer
token; every other admin route requires that token.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends

from fitness_events_api.app.core import errors
from fitness_events_api.app.core.security import require_admin
from fitness_events_api.app.schemas.admin import AdminLogin, AdminToken
from fitness_events_api.app.schemas.review import AdminReviewRead
from fitness_events_api.app.services.admin_service import AdminService
from fitness_events_api.app.services.review_service import ReviewService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/login", response_model=AdminToken)
async def admin_login(credentials: AdminLogin) -> AdminToken:
    """Authenticate an admin and return a token.

    400 when username or password is missing, 401 when they do not
    match the stored admin record.
    """
    try:
        token = await AdminService.login(credentials.username, credentials.password)
    except errors.ApiError:
        raise
    except Exception as e:
        logger.exception("Admin login error: %s", e)
        raise errors.UpstreamError("Login failed") from e
    return AdminToken(token=token)


@router.get("/reviews", response_model=List[AdminReviewRead])
async def list_all_reviews(admin: dict = Depends(require_admin)) -> List[AdminReviewRead]:
    """Every review across all events, newest first (admin only)."""
    try:
        return await ReviewService.list_all()
    except errors.ApiError:
        raise
    except Exception as e:
        logger.exception("Error fetching event reviews: %s", e)
        raise errors.UpstreamError("Failed to fetch event reviews") from e
