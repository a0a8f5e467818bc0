"""
Business logic for events.

Events are created and edited from the admin panel elsewhere; this
service only reads them: the category listing for the booking flow and
the event list and detail used by integrations.
"""

import logging
import sqlite3
from datetime import datetime, time, timezone
from typing import Dict, Iterable, List, Optional

from ..core import errors
from ..core.categories import find_category
from ..core.db import from_db_timestamp, get_connection, to_db_timestamp
from ..schemas.event import CategoryEvent, CategoryEvents, EventDetail, EventRead, EventRegistrant
from ..schemas.trainer import TrainerSummary
from ..utils.dates import format_long_date
from .review_service import COMPLETED, compute_average_rating

EVENT_COLUMNS = """
    e.id, e.title, e.description, e.category, e.event_date, e.event_time, e.location,
    e.price, e.registration_deadline, e.created_at,
    (SELECT COUNT(*) FROM event_registrations r WHERE r.event_id = e.id) AS registered_users
"""


def fetch_trainers(cursor: sqlite3.Cursor, event_ids: Iterable[str]) -> Dict[str, List[TrainerSummary]]:
    """Map each event id to its trainers, ordered by name.

    Flattens the event/trainer join in a single query.  Events without
    trainers are absent from the result.
    """
    ids = list(event_ids)
    if not ids:
        return {}
    placeholders = ", ".join("?" for _ in ids)
    rows = cursor.execute(
        f"""
        SELECT et.event_id, t.id, t.name
        FROM event_trainers et
        JOIN trainers t ON t.id = et.trainer_id
        WHERE et.event_id IN ({placeholders})
        ORDER BY t.name
        """,
        tuple(ids),
    ).fetchall()
    trainers: Dict[str, List[TrainerSummary]] = {}
    for row in rows:
        trainers.setdefault(row["event_id"], []).append(TrainerSummary(id=row["id"], name=row["name"]))
    return trainers


def fetch_trainer_names(cursor: sqlite3.Cursor, event_ids: Iterable[str]) -> Dict[str, List[str]]:
    """Like ``fetch_trainers`` but with the names only."""
    return {
        event_id: [trainer.name for trainer in trainers]
        for event_id, trainers in fetch_trainers(cursor, event_ids).items()
    }


def fetch_completed_ratings(cursor: sqlite3.Cursor, event_ids: Iterable[str]) -> Dict[str, List[Optional[int]]]:
    """Ratings of the completed reviews of each event (unrated ones as ``None``)."""
    ids = list(event_ids)
    if not ids:
        return {}
    placeholders = ", ".join("?" for _ in ids)
    rows = cursor.execute(
        f"SELECT event_id, rating FROM event_reviews WHERE status = ? AND event_id IN ({placeholders})",
        (COMPLETED, *ids),
    ).fetchall()
    ratings: Dict[str, List[Optional[int]]] = {}
    for row in rows:
        ratings.setdefault(row["event_id"], []).append(row["rating"])
    return ratings


class EventService:
    """Сервис для чтения мероприятий."""

    @classmethod
    async def list_by_category(cls, category: Optional[str], now: Optional[datetime] = None) -> CategoryEvents:
        """Return upcoming events of a category that still accept registrations.

        An event is listed when its date is strictly in the future and
        its registration deadline is either unset or in the future.
        Events are ordered by date, soonest first.  ``mediaLink`` comes
        from the static category table and is ``None`` for unknown
        categories.

        Raises ``ValidationError`` when ``category`` is empty.
        """
        logger = logging.getLogger(__name__)
        if not category:
            raise errors.ValidationError("Category is required")
        now_ts = to_db_timestamp(now or datetime.now(timezone.utc))
        conn = get_connection()
        try:
            cursor = conn.cursor()
            rows = cursor.execute(
                """
                SELECT id, title, description, event_date, event_time, location, price, registration_deadline
                FROM events
                WHERE category = ?
                  AND event_date > ?
                  AND (registration_deadline IS NULL OR registration_deadline > ?)
                ORDER BY event_date ASC
                """,
                (category, now_ts, now_ts),
            ).fetchall()
            trainers = fetch_trainer_names(cursor, (row["id"] for row in rows))
        finally:
            conn.close()

        events: List[CategoryEvent] = []
        for row in rows:
            event_date = from_db_timestamp(row["event_date"])
            events.append(
                CategoryEvent(
                    id=row["id"],
                    title=row["title"],
                    description=row["description"],
                    event_date=event_date,
                    event_time=row["event_time"],
                    location=row["location"],
                    price=row["price"] or 0,
                    registration_deadline=from_db_timestamp(row["registration_deadline"]),
                    trainers=trainers.get(row["id"], []),
                    formatted_date=format_long_date(event_date),
                )
            )

        known = find_category(category)
        media_link = known.media_link if known else None
        if media_link is None:
            logger.warning("No media link configured for category %s", category)
        return CategoryEvents(category=category, media_link=media_link, events=events, count=len(events))

    @staticmethod
    def _event_fields(row, trainers, ratings, now: datetime) -> dict:
        event_date = from_db_timestamp(row["event_date"])
        deadline = from_db_timestamp(row["registration_deadline"])
        return dict(
            id=row["id"],
            title=row["title"],
            description=row["description"],
            category=row["category"],
            event_date=event_date,
            event_time=row["event_time"],
            location=row["location"],
            price=row["price"] or 0,
            registration_deadline=deadline,
            created_at=row["created_at"],
            trainers=trainers.get(row["id"], []),
            registered_users=row["registered_users"],
            is_past=event_date < now,
            is_deadline_passed=deadline is not None and deadline <= now,
            average_rating=compute_average_rating(ratings.get(row["id"], [])),
            total_reviews=len(ratings.get(row["id"], [])),
        )

    @classmethod
    async def list_events(cls, event_filter: Optional[str] = "all", now: Optional[datetime] = None) -> List[EventRead]:
        """List events ordered by date, soonest first.

        ``event_filter="upcoming"`` keeps events dated today (UTC) or later;
        any other value lists every event.
        """
        now = now or datetime.now(timezone.utc)
        query = f"SELECT {EVENT_COLUMNS} FROM events e"
        params: tuple = ()
        if event_filter == "upcoming":
            start_of_day = datetime.combine(now.date(), time.min, tzinfo=timezone.utc)
            query += " WHERE e.event_date >= ?"
            params = (to_db_timestamp(start_of_day),)
        query += " ORDER BY e.event_date ASC"
        conn = get_connection()
        try:
            cursor = conn.cursor()
            rows = cursor.execute(query, params).fetchall()
            ids = [row["id"] for row in rows]
            trainers = fetch_trainers(cursor, ids)
            ratings = fetch_completed_ratings(cursor, ids)
        finally:
            conn.close()
        return [EventRead(**cls._event_fields(row, trainers, ratings, now)) for row in rows]

    @classmethod
    async def get_event(cls, event_id: str, now: Optional[datetime] = None) -> EventDetail:
        """One event with its trainers, registrants and review stats.

        Raises ``NotFoundError`` for an unknown id.
        """
        now = now or datetime.now(timezone.utc)
        conn = get_connection()
        try:
            cursor = conn.cursor()
            row = cursor.execute(
                f"SELECT {EVENT_COLUMNS} FROM events e WHERE e.id = ?",
                (event_id,),
            ).fetchone()
            if not row:
                raise errors.NotFoundError("Event not found")
            registrations = cursor.execute(
                """
                SELECT r.id, r.created_at, u.id AS user_id, u.name, u.email, u.mobile_number
                FROM event_registrations r
                JOIN users u ON u.id = r.user_id
                WHERE r.event_id = ?
                ORDER BY r.created_at ASC
                """,
                (event_id,),
            ).fetchall()
            trainers = fetch_trainers(cursor, [event_id])
            ratings = fetch_completed_ratings(cursor, [event_id])
        finally:
            conn.close()
        return EventDetail(
            **cls._event_fields(row, trainers, ratings, now),
            registrations=[
                EventRegistrant(
                    id=reg["id"],
                    user_id=reg["user_id"],
                    user_name=reg["name"],
                    email=reg["email"],
                    mobile_number=reg["mobile_number"],
                    registration_date=reg["created_at"],
                )
                for reg in registrations
            ],
        )
