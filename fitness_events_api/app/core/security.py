"""
Security helpers for admin tokens, API keys and password hashing.

This module implements a lightweight JSON Web Token (JWT) mechanism
using HMAC‑SHA256 signatures and base64url encoding.  Tokens embed
arbitrary claims and an expiration timestamp (``exp``) and are signed
with ``settings.admin_jwt_secret``.  Passwords are hashed with
PBKDF2‑HMAC‑SHA256 and stored as ``salthex$hashhex``.

Two FastAPI dependencies guard routes:

* ``require_admin`` expects ``Authorization: Bearer <token>`` carrying
  a token issued by the admin login route.
* ``require_api_key`` expects the shared integration key in the
  ``X-API-Key`` header or the ``apiKey`` query parameter.
"""

import base64
import hashlib
import hmac
import json
import os
import secrets
import string
import time
from typing import Any, Dict, Optional

from fastapi import Depends, Header, Query
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .config import settings
from .errors import ForbiddenError, UnauthorizedError

API_KEY_ALPHABET = string.digits + string.ascii_lowercase
PBKDF2_ITERATIONS = 100_000


def _b64_url_encode(data: bytes) -> str:
    """Base64‑url encode bytes without padding."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("utf-8")


def _b64_url_decode(data: str) -> bytes:
    """Decode base64‑url encoded string, adding padding if necessary."""
    padding = '=' * (-len(data) % 4)
    return base64.urlsafe_b64decode(data + padding)


def _sign(message: bytes, secret: str) -> bytes:
    return hmac.new(secret.encode("utf-8"), message, hashlib.sha256).digest()


def create_access_token(data: Dict[str, Any], expires_delta: Optional[int] = None) -> str:
    """Create a signed JWT token with the given payload.

    The payload is extended with ``iat`` and ``exp`` (UNIX timestamps).
    The token is a string of the form ``header.payload.signature``,
    each part base64url encoded.

    Parameters
    ----------
    data : dict
        Claims to embed in the token (e.g. ``{"sub": "admin", "role": "admin"}``).
    expires_delta : Optional[int]
        Lifetime of the token in seconds.  Defaults to
        ``settings.admin_token_expire_minutes * 60``.

    Returns
    -------
    str
        A signed JWT token.
    """
    to_encode = dict(data)
    now = int(time.time())
    exp_seconds = expires_delta or settings.admin_token_expire_minutes * 60
    to_encode["iat"] = now
    to_encode["exp"] = now + exp_seconds
    header = {"alg": "HS256", "typ": "JWT"}
    header_b64 = _b64_url_encode(json.dumps(header, separators=(',', ':')).encode("utf-8"))
    payload_b64 = _b64_url_encode(json.dumps(to_encode, separators=(',', ':')).encode("utf-8"))
    signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
    signature_b64 = _b64_url_encode(_sign(signing_input, settings.admin_jwt_secret))
    return f"{header_b64}.{payload_b64}.{signature_b64}"


def decode_access_token(token: str) -> Optional[Dict[str, Any]]:
    """Verify and decode a JWT token.

    Returns the payload when the signature matches and ``exp`` lies in
    the future, otherwise ``None``.
    """
    parts = token.split('.')
    if len(parts) != 3:
        return None
    header_b64, payload_b64, signature_b64 = parts
    signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
    expected_sig = _sign(signing_input, settings.admin_jwt_secret)
    try:
        actual_sig = _b64_url_decode(signature_b64)
        if not hmac.compare_digest(expected_sig, actual_sig):
            return None
        data = json.loads(_b64_url_decode(payload_b64).decode("utf-8"))
    except (ValueError, UnicodeDecodeError):
        # binascii.Error and json.JSONDecodeError are both ValueErrors
        return None
    if not isinstance(data, dict):
        return None
    if data.get("exp") is None or int(data["exp"]) < int(time.time()):
        return None
    return data


def hash_password(password: str) -> str:
    """Hash a password using PBKDF2‑HMAC with SHA‑256.

    A 16‑byte random salt is generated for each password.  The result
    holds the salt and the digest in hex, separated by ``$``.
    """
    salt = os.urandom(16)
    dk = hashlib.pbkdf2_hmac('sha256', password.encode('utf-8'), salt, PBKDF2_ITERATIONS)
    return f"{salt.hex()}${dk.hex()}"


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against a stored salt+hash string."""
    try:
        salt_hex, hash_hex = hashed_password.split('$', 1)
        salt = bytes.fromhex(salt_hex)
        stored_hash = bytes.fromhex(hash_hex)
    except ValueError:
        return False
    dk = hashlib.pbkdf2_hmac('sha256', plain_password.encode('utf-8'), salt, PBKDF2_ITERATIONS)
    return hmac.compare_digest(dk, stored_hash)


def generate_api_key(length: int = 32) -> str:
    """Return a random key of lowercase letters and digits."""
    return "".join(secrets.choice(API_KEY_ALPHABET) for _ in range(length))


security = HTTPBearer(auto_error=False)


def require_admin(credentials: HTTPAuthorizationCredentials = Depends(security)) -> Dict[str, Any]:
    """Dependency that admits only requests carrying a valid admin token.

    Raises ``UnauthorizedError`` when the header is missing or the token
    is invalid/expired, and ``ForbiddenError`` when the token does not
    carry the ``admin`` role.  Returns the decoded payload.
    """
    if credentials is None:
        raise UnauthorizedError("Admin authentication required")
    payload = decode_access_token(credentials.credentials)
    if not payload:
        raise UnauthorizedError("Invalid or expired admin token")
    if payload.get("role") != "admin":
        raise ForbiddenError("Admin access required")
    return payload


def require_api_key(
    x_api_key: Optional[str] = Header(None, alias="X-API-Key"),
    api_key_query: Optional[str] = Query(None, alias="apiKey"),
) -> None:
    """Dependency checking the shared integration API key.

    The header wins over the query parameter, which exists for
    clients (e.g. chat bots) that cannot set headers.
    """
    provided = x_api_key or api_key_query
    if not provided:
        raise UnauthorizedError("API key required")
    if not hmac.compare_digest(provided.encode("utf-8"), settings.api_key.encode("utf-8")):
        raise UnauthorizedError("Invalid API key")
