"""
Pydantic models for trainers.

Trainers are managed from the admin panel elsewhere; the API lists
them with a count of their upcoming and past events.
"""

from datetime import datetime
from typing import Optional

from .base import ApiModel


class TrainerSummary(ApiModel):
    id: str
    name: str


class TrainerRead(TrainerSummary):
    email: Optional[str] = None
    mobile_number: Optional[str] = None
    created_at: datetime
    upcoming_events: int = 0
    past_events: int = 0
