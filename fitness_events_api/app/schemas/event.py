"""
Pydantic models for event data.

``CategoryEvent`` is an upcoming event as listed by category, with
trainer names flattened and a human readable date.  ``EventSummary``
is embedded in review listings.  ``EventRead`` and ``EventDetail`` back the
read-only event list and detail routes.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from .base import ApiModel
from .trainer import TrainerSummary


class CategoryRequest(ApiModel):
    category: Optional[str] = Field(None, examples=["cat_yoga"])


class CategoryEvent(ApiModel):
    id: str
    title: str
    description: Optional[str] = None
    event_date: datetime
    event_time: Optional[str] = None
    location: Optional[str] = None
    price: float = 0
    registration_deadline: Optional[datetime] = None
    trainers: List[str] = []
    formatted_date: str


class CategoryEvents(ApiModel):
    category: str
    # None for categories missing from the static category table
    media_link: Optional[str] = None
    events: List[CategoryEvent]
    count: int


class EventSummary(ApiModel):
    id: str
    title: str
    event_date: datetime
    category: str


class EventRead(ApiModel):
    """An event as listed by ``GET /events``.

    ``averageRating`` and ``totalReviews`` cover completed reviews only,
    the same numbers the per-event review listing reports.
    """

    id: str
    title: str
    description: Optional[str] = None
    category: str
    event_date: datetime
    event_time: Optional[str] = None
    location: Optional[str] = None
    price: float = 0
    registration_deadline: Optional[datetime] = None
    created_at: datetime
    trainers: List[TrainerSummary] = []
    registered_users: int = 0
    is_past: bool
    is_deadline_passed: bool
    average_rating: float = 0
    total_reviews: int = 0


class EventRegistrant(ApiModel):
    id: str
    user_id: str
    user_name: str
    email: Optional[str] = None
    mobile_number: str
    registration_date: datetime


class EventDetail(EventRead):
    registrations: List[EventRegistrant] = []
