"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
API starts in a development checkout without any configuration; in a
production deployment override them via environment variables or a
``.env`` file loaded before this module is imported.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Fitness Events API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional path of a log file in addition to the console handler.
    log_file: str = os.getenv("LOG_FILE", "")

    # Path or connection string for the SQLite database.  Relative paths
    # are resolved against the package root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "fitness_events.db")

    # Shared key for integrations (chat bot, forms) calling the
    # API-key protected routes via ``X-API-Key`` or ``?apiKey=``.
    api_key: str = os.getenv("API_KEY", "your-secret-api-key-change-this-in-production")

    # Admin record seeded into the ``admins`` table on start-up.
    admin_username: str = os.getenv("ADMIN_USERNAME", "admin")
    admin_password: str = os.getenv("ADMIN_PASSWORD", "admin123")
    admin_jwt_secret: str = os.getenv("ADMIN_JWT_SECRET", "admin-secret-key-change-this-in-production")
    admin_token_expire_minutes: int = int(os.getenv("ADMIN_TOKEN_EXPIRE_MINUTES", str(60 * 24)))

    # Razorpay credentials used for invoice creation.
    razorpay_key_id: str = os.getenv("RAZORPAY_KEY_ID", "")
    razorpay_key_secret: str = os.getenv("RAZORPAY_KEY_SECRET", "")
    razorpay_api_url: str = os.getenv("RAZORPAY_API_URL", "https://api.razorpay.com/v1")

    # Base URL under which category artwork is published.
    media_base_url: str = os.getenv("MEDIA_BASE_URL", "https://media.fiddlefitness.in/categories")

    # Google OAuth client used by the refresh token script.
    google_client_id: str = os.getenv("GOOGLE_CLIENT_ID", "")
    google_client_secret: str = os.getenv("GOOGLE_CLIENT_SECRET", "")
    google_redirect_uri: str = os.getenv("GOOGLE_REDIRECT_URI", "http://localhost:3000/oauth2callback")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
