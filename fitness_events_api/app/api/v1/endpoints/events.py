"""
Event endpoints for API v1.

The category listing feeds the booking flow of the chat bot.  It and the
read-only event list and detail are protected by the integration API
key.  Event reviews are public.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Query

from fitness_events_api.app.core import errors
from fitness_events_api.app.core.security import require_api_key
from fitness_events_api.app.schemas.event import CategoryEvents, CategoryRequest, EventDetail, EventRead
from fitness_events_api.app.schemas.review import EventReviews
from fitness_events_api.app.services.event_service import EventService
from fitness_events_api.app.services.review_service import ReviewService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/category",
    response_model=CategoryEvents,
    dependencies=[Depends(require_api_key)],
)
async def list_events_by_category(payload: CategoryRequest) -> CategoryEvents:
    """Upcoming events of a category that are still open for registration.

    - **category**: category key, e.g. ``cat_yoga``.  Required.

    ``mediaLink`` is ``null`` for categories missing from the category
    table; that is not an error.
    """
    try:
        return await EventService.list_by_category(payload.category)
    except errors.ApiError:
        raise
    except Exception as e:
        logger.exception("Error fetching events by category: %s", e)
        raise errors.UpstreamError("Failed to fetch events") from e


@router.get("/{event_id}/reviews", response_model=EventReviews)
async def get_event_reviews(event_id: str) -> EventReviews:
    """Completed reviews of an event with the average rating."""
    try:
        return await ReviewService.list_for_event(event_id)
    except errors.ApiError:
        raise
    except Exception as e:
        logger.exception("Error fetching event reviews: %s", e)
        raise errors.UpstreamError("Failed to fetch event reviews") from e


@router.get("", response_model=List[EventRead], dependencies=[Depends(require_api_key)])
async def list_events(
    event_filter: str = Query("all", alias="filter", description="``upcoming`` or ``all``"),
) -> List[EventRead]:
    """List events by date with trainers, registration count and ratings.

    ``?filter=upcoming`` keeps events dated today or later.
    """
    try:
        return await EventService.list_events(event_filter)
    except errors.ApiError:
        raise
    except Exception as e:
        logger.exception("Error fetching events: %s", e)
        raise errors.UpstreamError("Failed to fetch events") from e


@router.get("/{event_id}", response_model=EventDetail, dependencies=[Depends(require_api_key)])
async def get_event(event_id: str) -> EventDetail:
    """Fetch one event with its registrants.  404 if it does not exist."""
    try:
        return await EventService.get_event(event_id)
    except errors.ApiError:
        raise
    except Exception as e:
        logger.exception("Error fetching event: %s", e)
        raise errors.UpstreamError("Failed to fetch event") from e
