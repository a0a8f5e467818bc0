"""
Trainer endpoints for API v1.

Read-only listing for integrations, protected by the API key.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends

from fitness_events_api.app.core import errors
from fitness_events_api.app.core.security import require_api_key
from fitness_events_api.app.schemas.trainer import TrainerRead
from fitness_events_api.app.services.trainer_service import TrainerService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[TrainerRead], dependencies=[Depends(require_api_key)])
async def list_trainers() -> List[TrainerRead]:
    """Every trainer with the number of upcoming and past events."""
    try:
        return await TrainerService.list_trainers()
    except errors.ApiError:
        raise
    except Exception as e:
        logger.exception("Error fetching trainers: %s", e)
        raise errors.UpstreamError("Failed to fetch trainers") from e
