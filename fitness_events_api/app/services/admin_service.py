"""
Business logic for admin authentication.

Admin accounts live in the ``admins`` table (the configured account is
seeded by ``init_db``).  A successful login yields a signed token with
the ``admin`` role, valid for ``settings.admin_token_expire_minutes``.
"""

import logging
from typing import Optional

from ..core import errors
from ..core.db import get_connection
from ..core.security import create_access_token, verify_password


class AdminService:
    """Service for admin login."""

    @classmethod
    async def authenticate(cls, username: str, password: str) -> bool:
        """Return ``True`` when the credentials match a stored admin."""
        conn = get_connection()
        try:
            row = conn.execute(
                "SELECT password FROM admins WHERE username = ?",
                (username,),
            ).fetchone()
        finally:
            conn.close()
        if not row:
            return False
        return verify_password(password, row["password"])

    @classmethod
    async def login(cls, username: Optional[str], password: Optional[str]) -> str:
        """Verify credentials and issue an admin token.

        Raises ``ValidationError`` when either field is missing and
        ``UnauthorizedError`` when the credentials do not match.
        """
        logger = logging.getLogger(__name__)
        if not username or not password:
            raise errors.ValidationError("Username and password are required")
        if not await cls.authenticate(username, password):
            logger.warning("Failed admin login for %s", username)
            raise errors.UnauthorizedError("Invalid credentials")
        logger.info("Admin %s logged in", username)
        return create_access_token({"sub": username, "role": "admin"})
