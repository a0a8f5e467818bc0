"""
Business logic for reviews.

Reviews are collected after an event by the feedback flow and stored
in ``event_reviews``.  Only reviews whose status is ``completed`` are
shown per event and counted in the average rating; admins can list
every review regardless of status.
"""

from typing import Iterable, List, Optional

from ..core.db import get_connection
from ..schemas.event import EventSummary
from ..schemas.review import AdminReviewRead, EventReviews, ReviewRead
from ..schemas.user import UserSummary

COMPLETED = "completed"


def compute_average_rating(ratings: Iterable[Optional[float]]) -> float:
    """Arithmetic mean of the positive ratings.

    Missing ratings and ratings ``<= 0`` are left out of both the sum
    and the count.  Returns 0 when nothing remains.
    """
    valid = [rating for rating in ratings if rating is not None and rating > 0]
    if not valid:
        return 0
    return sum(valid) / len(valid)


def _user_summary(row) -> UserSummary:
    return UserSummary(
        id=row["user_id"],
        name=row["user_name"],
        email=row["user_email"],
        mobile_number=row["user_mobile_number"],
    )


class ReviewService:
    """Service for reading event reviews."""

    @classmethod
    async def list_all(cls) -> List[AdminReviewRead]:
        """Every review across all events, newest first, with user and event."""
        conn = get_connection()
        try:
            rows = conn.execute(
                """
                SELECT r.id, r.user_id, r.event_id, r.rating, r.comment, r.status, r.created_at,
                       u.name AS user_name, u.email AS user_email, u.mobile_number AS user_mobile_number,
                       e.title AS event_title, e.event_date, e.category AS event_category
                FROM event_reviews r
                JOIN users u ON u.id = r.user_id
                JOIN events e ON e.id = r.event_id
                ORDER BY r.created_at DESC
                """
            ).fetchall()
        finally:
            conn.close()
        return [
            AdminReviewRead(
                id=row["id"],
                user_id=row["user_id"],
                event_id=row["event_id"],
                rating=row["rating"],
                comment=row["comment"],
                status=row["status"],
                created_at=row["created_at"],
                user=_user_summary(row),
                event=EventSummary(
                    id=row["event_id"],
                    title=row["event_title"],
                    event_date=row["event_date"],
                    category=row["event_category"],
                ),
            )
            for row in rows
        ]

    @classmethod
    async def list_for_event(cls, event_id: str) -> EventReviews:
        """Completed reviews of one event with the average rating.

        An unknown event yields an empty list and an average of 0.
        """
        conn = get_connection()
        try:
            rows = conn.execute(
                """
                SELECT r.id, r.user_id, r.event_id, r.rating, r.comment, r.status, r.created_at,
                       u.name AS user_name, u.email AS user_email, u.mobile_number AS user_mobile_number
                FROM event_reviews r
                JOIN users u ON u.id = r.user_id
                WHERE r.event_id = ? AND r.status = ?
                ORDER BY r.created_at DESC
                """,
                (event_id, COMPLETED),
            ).fetchall()
        finally:
            conn.close()
        reviews = [
            ReviewRead(
                id=row["id"],
                user_id=row["user_id"],
                event_id=row["event_id"],
                rating=row["rating"],
                comment=row["comment"],
                status=row["status"],
                created_at=row["created_at"],
                user=_user_summary(row),
            )
            for row in rows
        ]
        return EventReviews(
            reviews=reviews,
            average_rating=compute_average_rating(review.rating for review in reviews),
            total_reviews=len(reviews),
        )
