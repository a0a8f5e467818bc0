"""Pydantic schemas for admin authentication."""

from typing import Optional

from .base import ApiModel


class AdminLogin(ApiModel):
    # Optional so that missing fields produce a 400 from the route
    # rather than a schema error.
    username: Optional[str] = None
    password: Optional[str] = None


class AdminToken(ApiModel):
    token: str
