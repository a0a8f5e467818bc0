"""
Google OAuth helpers for obtaining a calendar refresh token.

Only the pieces needed by the ``fitness-get-refresh-token`` script are
implemented: building the consent URL and exchanging the authorization
code for tokens.
"""

import logging
from typing import Any, Dict, Iterable, Optional
from urllib.parse import urlencode

import requests

logger = logging.getLogger(__name__)

AUTHORIZE_URL = "https://accounts.google.com/o/oauth2/v2/auth"
TOKEN_URL = "https://oauth2.googleapis.com/token"
CALENDAR_SCOPES = (
    "https://www.googleapis.com/auth/calendar",
    "https://www.googleapis.com/auth/calendar.events",
)


def build_authorize_url(client_id: str, redirect_uri: str, scopes: Iterable[str] = CALENDAR_SCOPES) -> str:
    """Consent URL requesting offline access.

    ``prompt=consent`` forces Google to issue a refresh token even when
    the user granted access before.
    """
    query = {
        "client_id": client_id,
        "redirect_uri": redirect_uri,
        "response_type": "code",
        "scope": " ".join(scopes),
        "access_type": "offline",
        "prompt": "consent",
    }
    return f"{AUTHORIZE_URL}?{urlencode(query)}"


def exchange_code(
    code: str,
    client_id: str,
    client_secret: str,
    redirect_uri: str,
    session: Optional[requests.Session] = None,
) -> Dict[str, Any]:
    """Exchange an authorization code for tokens.

    Returns Google's token response (``access_token``,
    ``refresh_token``, ``expires_in``...).  HTTP errors propagate as
    ``requests.HTTPError``.
    """
    http = session or requests
    response = http.post(
        TOKEN_URL,
        data={
            "code": code,
            "client_id": client_id,
            "client_secret": client_secret,
            "redirect_uri": redirect_uri,
            "grant_type": "authorization_code",
        },
        timeout=30,
    )
    response.raise_for_status()
    tokens = response.json()
    if "refresh_token" not in tokens:
        logger.warning("Token response has no refresh_token; was consent already granted?")
    return tokens
