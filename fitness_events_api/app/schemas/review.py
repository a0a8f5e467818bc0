"""
Pydantic schemas for event reviews.

Reviews are written by the feedback flow elsewhere in the system; the
API only reads them.  Admins see every review with its event; the
per-event listing only includes completed reviews and adds the
average rating.
"""

from datetime import datetime
from typing import List, Optional

from .base import ApiModel
from .event import EventSummary
from .user import UserSummary


class ReviewRead(ApiModel):
    id: str
    user_id: str
    event_id: str
    rating: Optional[int] = None
    comment: Optional[str] = None
    status: str
    created_at: datetime
    user: UserSummary


class AdminReviewRead(ReviewRead):
    event: EventSummary


class EventReviews(ApiModel):
    reviews: List[ReviewRead]
    average_rating: float
    total_reviews: int
