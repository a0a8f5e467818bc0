"""
Static table of event categories.

Each category has a stable key stored on events (``value``), a label
shown to users and a media link pointing at the category artwork
published under ``settings.media_base_url``.
"""

from dataclasses import dataclass
from typing import List, Optional

from .config import settings


@dataclass(frozen=True)
class EventCategory:
    value: str
    label: str
    media_slug: str

    @property
    def media_link(self) -> str:
        return f"{settings.media_base_url.rstrip('/')}/{self.media_slug}.jpg"


EVENT_CATEGORIES: List[EventCategory] = [
    EventCategory("cat_yoga", "Yoga", "yoga"),
    EventCategory("cat_meditation", "Meditation", "meditation"),
    EventCategory("cat_workout", "Workout", "workout"),
    EventCategory("cat_dance", "Dance", "dance"),
    EventCategory("cat_swimming", "Swimming", "swimming"),
    EventCategory("cat_cycling", "Cycling", "cycling"),
    EventCategory("cat_running", "Running", "running"),
    EventCategory("cat_martial_arts", "Martial Arts", "martial-arts"),
    EventCategory("cat_pilates", "Pilates", "pilates"),
    EventCategory("cat_zumba", "Zumba", "zumba"),
]


def find_category(value: str) -> Optional[EventCategory]:
    """Look up a category by key.  Unknown keys return ``None``."""
    for category in EVENT_CATEGORIES:
        if category.value == value:
            return category
    return None
