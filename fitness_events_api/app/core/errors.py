"""
Error taxonomy shared by services and routes.

Services raise these exceptions; the application registers a handler
(see ``main.py``) that renders them as ``{"error": message}`` with the
status code carried by the class.  Anything that is not an ``ApiError``
is caught by the route, logged and re-raised as ``UpstreamError``.
"""

from fastapi import status


class ApiError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(ApiError):
    """Missing or invalid input."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(ApiError):
    """No record matches the request."""

    status_code = status.HTTP_404_NOT_FOUND


class UnauthorizedError(ApiError):
    """Bad credentials, missing or invalid token."""

    status_code = status.HTTP_401_UNAUTHORIZED


class ForbiddenError(ApiError):
    status_code = status.HTTP_403_FORBIDDEN


class UpstreamError(ApiError):
    """The database or a third-party service failed."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class GatewayError(UpstreamError):
    """The payment gateway rejected the request or could not be reached."""
