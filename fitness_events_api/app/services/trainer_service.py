"""
Business logic for trainers.

Read-only: trainers are created from the admin panel elsewhere.  Each
trainer is listed with the number of events they run that are still
ahead and that already took place.
"""

from datetime import datetime, timezone
from typing import List, Optional

from ..core.db import get_connection, to_db_timestamp
from ..schemas.trainer import TrainerRead


class TrainerService:
    """Сервис для чтения тренеров."""

    @classmethod
    async def list_trainers(cls, now: Optional[datetime] = None) -> List[TrainerRead]:
        """Every trainer ordered by name, with upcoming and past event counts.

        An event is upcoming when its date is after ``now`` and past
        otherwise.
        """
        now_ts = to_db_timestamp(now or datetime.now(timezone.utc))
        conn = get_connection()
        try:
            rows = conn.execute(
                """
                SELECT t.id, t.name, t.email, t.mobile_number, t.created_at,
                       COALESCE(SUM(CASE WHEN e.event_date > ? THEN 1 ELSE 0 END), 0) AS upcoming_events,
                       COALESCE(SUM(CASE WHEN e.event_date <= ? THEN 1 ELSE 0 END), 0) AS past_events
                FROM trainers t
                LEFT JOIN event_trainers et ON et.trainer_id = t.id
                LEFT JOIN events e ON e.id = et.event_id
                GROUP BY t.id
                ORDER BY t.name
                """,
                (now_ts, now_ts),
            ).fetchall()
        finally:
            conn.close()
        return [TrainerRead.model_validate(dict(row)) for row in rows]
