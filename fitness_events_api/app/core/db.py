"""
SQLite database integration and simple migration system.

This module provides functions for obtaining a database connection
(``get_connection``), applying migrations on application start
(``init_db``) and a few helpers for the storage conventions shared by
the services: text identifiers and UTC timestamps stored as
``YYYY-MM-DDTHH:MM:SSZ`` strings, so that comparing the text compares
the instants.

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
"""

import os
import sqlite3
import uuid
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterator, Optional

from .config import settings
from .security import hash_password

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def get_database_path() -> str:
    """Compute the path to the SQLite database file.

    If ``settings.database_url`` is an absolute path, use it directly.
    Otherwise resolve it relative to the package root.
    """
    db_url = settings.database_url
    if os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent  # fitness_events_api/
    return str((base_dir / db_url).resolve())


def get_connection() -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    Rows are returned as ``sqlite3.Row`` so columns can be accessed by
    name.  Timestamps are kept as the strings they were stored as.
    """
    conn = sqlite3.connect(get_database_path())
    conn.row_factory = sqlite3.Row
    # Foreign key enforcement is per connection in SQLite.
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


@contextmanager
def get_cursor() -> Iterator[sqlite3.Cursor]:
    """Context manager that yields a cursor and closes the connection on exit."""
    conn = get_connection()
    try:
        yield conn.cursor()
        conn.commit()
    finally:
        conn.close()


def new_id() -> str:
    """Generate a text primary key."""
    return uuid.uuid4().hex


def to_db_timestamp(value: datetime) -> str:
    """Format a datetime the way timestamps are stored.

    Naive datetimes are taken to be UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).strftime(TIMESTAMP_FORMAT)


def from_db_timestamp(value: Optional[str]) -> Optional[datetime]:
    """Parse a stored timestamp back into an aware UTC datetime."""
    if not value:
        return None
    return datetime.strptime(value, TIMESTAMP_FORMAT).replace(tzinfo=timezone.utc)


def utc_now() -> str:
    """Current time in storage format."""
    return to_db_timestamp(datetime.now(timezone.utc))


MIGRATIONS: list[tuple[int, str]] = [
    # Migration 1: Initial schema
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS users (
            id TEXT PRIMARY KEY,
            name TEXT NOT NULL,
            email TEXT,
            mobile_number TEXT NOT NULL UNIQUE,
            address TEXT,
            city TEXT,
            state TEXT,
            pincode TEXT,
            gender TEXT,
            referral_code TEXT UNIQUE,
            fiddle_fitness_coins INTEGER NOT NULL DEFAULT 0,
            created_at TEXT NOT NULL
        );

        CREATE TABLE IF NOT EXISTS trainers (
            id TEXT PRIMARY KEY,
            name TEXT NOT NULL,
            created_at TEXT NOT NULL
        );

        CREATE TABLE IF NOT EXISTS events (
            id TEXT PRIMARY KEY,
            title TEXT NOT NULL,
            description TEXT,
            event_date TEXT NOT NULL,
            event_time TEXT,
            location TEXT,
            price REAL,
            registration_deadline TEXT,
            category TEXT NOT NULL,
            created_at TEXT NOT NULL
        );

        CREATE TABLE IF NOT EXISTS event_trainers (
            event_id TEXT NOT NULL,
            trainer_id TEXT NOT NULL,
            PRIMARY KEY (event_id, trainer_id),
            FOREIGN KEY(event_id) REFERENCES events(id),
            FOREIGN KEY(trainer_id) REFERENCES trainers(id)
        );

        CREATE TABLE IF NOT EXISTS event_registrations (
            id TEXT PRIMARY KEY,
            user_id TEXT NOT NULL,
            event_id TEXT NOT NULL,
            created_at TEXT NOT NULL,
            FOREIGN KEY(user_id) REFERENCES users(id),
            FOREIGN KEY(event_id) REFERENCES events(id)
        );

        CREATE TABLE IF NOT EXISTS event_reviews (
            id TEXT PRIMARY KEY,
            user_id TEXT NOT NULL,
            event_id TEXT NOT NULL,
            rating INTEGER,
            comment TEXT,
            status TEXT NOT NULL DEFAULT 'pending',
            created_at TEXT NOT NULL,
            FOREIGN KEY(user_id) REFERENCES users(id),
            FOREIGN KEY(event_id) REFERENCES events(id)
        );

        CREATE TABLE IF NOT EXISTS invoices (
            id TEXT PRIMARY KEY,
            invoice_id TEXT NOT NULL,
            amount REAL NOT NULL,
            status TEXT NOT NULL,
            user_id TEXT NOT NULL,
            event_id TEXT NOT NULL,
            razorpay_invoice_id TEXT,
            invoice_url TEXT,
            created_at TEXT NOT NULL,
            FOREIGN KEY(user_id) REFERENCES users(id),
            FOREIGN KEY(event_id) REFERENCES events(id)
        );
        """,
    ),
    # Migration 2: admin accounts and lookup indices
    (
        2,
        """
        CREATE TABLE IF NOT EXISTS admins (
            id TEXT PRIMARY KEY,
            username TEXT NOT NULL UNIQUE,
            password TEXT NOT NULL,
            created_at TEXT NOT NULL
        );

        CREATE INDEX IF NOT EXISTS idx_events_category_date ON events(category, event_date);
        CREATE INDEX IF NOT EXISTS idx_event_reviews_event_id ON event_reviews(event_id);
        CREATE INDEX IF NOT EXISTS idx_event_registrations_user_id ON event_registrations(user_id);
        CREATE INDEX IF NOT EXISTS idx_invoices_user_id ON invoices(user_id);
        """,
    ),
    # Migration 3: trainer contact details
    (
        3,
        """
        ALTER TABLE trainers ADD COLUMN email TEXT;
        ALTER TABLE trainers ADD COLUMN mobile_number TEXT;
        CREATE INDEX IF NOT EXISTS idx_event_trainers_trainer_id ON event_trainers(trainer_id);
        """,
    ),
]


def init_db() -> None:
    """Initialise the database and apply pending migrations.

    Creates the ``migrations`` table if it does not exist, checks the
    current schema version, and applies any new migrations defined in
    ``MIGRATIONS``.  Finally makes sure the configured admin account
    exists.
    """
    with get_cursor() as cursor:
        cursor.execute(
            "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
        )
        cursor.execute("SELECT MAX(version) as version FROM migrations")
        row = cursor.fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0

        for version, sql in MIGRATIONS:
            if version > current_version:
                cursor.executescript(sql)
                cursor.execute(
                    "INSERT INTO migrations (version) VALUES (?)", (version,)
                )
                current_version = version

        existing = cursor.execute(
            "SELECT id FROM admins WHERE username = ?", (settings.admin_username,)
        ).fetchone()
        if not existing:
            cursor.execute(
                "INSERT INTO admins (id, username, password, created_at) VALUES (?, ?, ?, ?)",
                (new_id(), settings.admin_username, hash_password(settings.admin_password), utc_now()),
            )
