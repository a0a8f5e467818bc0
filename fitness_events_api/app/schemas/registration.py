"""
Pydantic models for a user's event registrations.

Registrations are split into upcoming and past events relative to the
time of the request.
"""

from datetime import datetime
from typing import List, Optional

from .base import ApiModel
from .user import UserSummary


class RegistrationRead(ApiModel):
    id: str
    event_id: str
    event_title: str
    event_description: Optional[str] = None
    event_date: datetime
    formatted_date: str
    event_time: Optional[str] = None
    price: float = 0
    registration_date: datetime
    is_past: bool
    status: str
    trainers: List[str] = []


class RegistrationGroups(ApiModel):
    upcoming: List[RegistrationRead]
    past: List[RegistrationRead]


class UserRegistrations(ApiModel):
    user: UserSummary
    registrations: RegistrationGroups
    total_registrations: int
