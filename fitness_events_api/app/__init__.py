"""
Application package initializer.

The project is organised by concern: ``core`` holds settings, logging,
database and security helpers; ``schemas`` the request/response
models; ``services`` the business logic per domain; ``api`` the
versioned routers; ``utils`` small shared helpers; ``scripts`` the
one-off operational commands.
"""

from .main import app  # noqa: F401
