"""
Business logic for users.

Users are looked up by mobile number, which is always normalized to
its last 10 digits first so that ``+91 98765-43210`` and ``9876543210``
find the same record.
"""

import logging
import sqlite3
from datetime import datetime, timezone
from typing import List, Optional

from ..core import errors
from ..core.db import from_db_timestamp, get_connection
from ..schemas.registration import RegistrationGroups, RegistrationRead, UserRegistrations
from ..schemas.user import ReferralResult, UserRead, UserSummary
from ..utils.dates import format_long_date
from ..utils.phone import extract_last_10_digits
from ..utils.referral import extract_referral_code, format_referral_code
from .event_service import fetch_trainer_names

INVALID_REFERRAL = "INVALID CODE!"


class UserService:
    """Сервис для работы с пользователями."""

    @staticmethod
    def _find_by_mobile_number(cursor: sqlite3.Cursor, mobile_number: str) -> sqlite3.Row:
        """Fetch the user row for a (raw) mobile number or raise ``NotFoundError``."""
        row = cursor.execute(
            """
            SELECT id, name, email, city, gender, mobile_number, created_at, fiddle_fitness_coins
            FROM users WHERE mobile_number = ?
            """,
            (extract_last_10_digits(mobile_number),),
        ).fetchone()
        if not row:
            raise errors.NotFoundError("User not found")
        return row

    @classmethod
    async def get_by_mobile_number(cls, mobile_number: str) -> UserRead:
        conn = get_connection()
        try:
            row = cls._find_by_mobile_number(conn.cursor(), mobile_number)
        finally:
            conn.close()
        return UserRead(
            id=row["id"],
            name=row["name"],
            email=row["email"],
            city=row["city"],
            gender=row["gender"],
            mobile_number=row["mobile_number"],
            created_at=row["created_at"],
            fiddle_fitness_coins=row["fiddle_fitness_coins"],
        )

    @classmethod
    async def list_registrations(cls, mobile_number: str, now: Optional[datetime] = None) -> UserRegistrations:
        """Return a user's registrations split into upcoming and past events.

        Registrations are ordered newest first.  An event counts as past
        once its date is before ``now``.
        """
        if not mobile_number:
            raise errors.ValidationError("Mobile number is required")
        now = now or datetime.now(timezone.utc)
        conn = get_connection()
        try:
            cursor = conn.cursor()
            user = cls._find_by_mobile_number(cursor, mobile_number)
            rows = cursor.execute(
                """
                SELECT r.id, r.created_at AS registration_date,
                       e.id AS event_id, e.title, e.description, e.event_date, e.event_time, e.price
                FROM event_registrations r
                JOIN events e ON e.id = r.event_id
                WHERE r.user_id = ?
                ORDER BY r.created_at DESC
                """,
                (user["id"],),
            ).fetchall()
            trainers = fetch_trainer_names(cursor, {row["event_id"] for row in rows})
        finally:
            conn.close()

        registrations: List[RegistrationRead] = []
        for row in rows:
            event_date = from_db_timestamp(row["event_date"])
            is_past = event_date < now
            registrations.append(
                RegistrationRead(
                    id=row["id"],
                    event_id=row["event_id"],
                    event_title=row["title"],
                    event_description=row["description"],
                    event_date=event_date,
                    formatted_date=format_long_date(event_date),
                    event_time=row["event_time"],
                    price=row["price"] or 0,
                    registration_date=row["registration_date"],
                    is_past=is_past,
                    status="Completed" if is_past else "Upcoming",
                    trainers=trainers.get(row["event_id"], []),
                )
            )
        return UserRegistrations(
            user=UserSummary(
                id=user["id"],
                name=user["name"],
                email=user["email"],
                mobile_number=user["mobile_number"],
            ),
            registrations=RegistrationGroups(
                upcoming=[r for r in registrations if not r.is_past],
                past=[r for r in registrations if r.is_past],
            ),
            total_registrations=len(registrations),
        )

    @classmethod
    async def validate_referral_code(cls, referral_code: Optional[str]) -> ReferralResult:
        """Check a referral code typed into the registration form.

        Accepts either the bare code or the display form ``CODE - Name``.
        A known code comes back in display form so the form can show
        who referred the user.
        """
        logger = logging.getLogger(__name__)
        code = extract_referral_code(referral_code.strip() if referral_code else None)
        if not code:
            raise errors.ValidationError("Referral code is required")
        conn = get_connection()
        try:
            row = conn.execute(
                "SELECT name, referral_code FROM users WHERE referral_code = ?",
                (code,),
            ).fetchone()
        finally:
            conn.close()
        if not row:
            logger.info("Unknown referral code %s", code)
            return ReferralResult(valid=False, referral_code=INVALID_REFERRAL)
        return ReferralResult(valid=True, referral_code=format_referral_code(row["referral_code"], row["name"]))
