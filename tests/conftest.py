"""
Shared fixtures.

Every test runs against a fresh SQLite file under ``tmp_path`` with the
migrations applied.  ``seed`` inserts rows directly; ``gateway`` is a
fake payment gateway installed through ``app.dependency_overrides``.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

import pytest
from fastapi.testclient import TestClient

from fitness_events_api.app.core.config import settings
from fitness_events_api.app.core.db import get_connection, init_db, new_id, to_db_timestamp
from fitness_events_api.app.main import app
from fitness_events_api.app.services.payment_gateway import PaymentGateway, get_payment_gateway

API_KEY = "test-api-key"
ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "s3cret-pass"


def ts(**delta) -> str:
    """Storage timestamp relative to now, e.g. ``ts(days=3)``."""
    return to_db_timestamp(datetime.now(timezone.utc) + timedelta(**delta))


class Seed:
    """Inserts rows with sensible defaults; returns the new id."""

    ts = staticmethod(ts)

    def _insert(self, table: str, values: dict) -> str:
        values.setdefault("id", new_id())
        columns = ", ".join(values)
        placeholders = ", ".join("?" for _ in values)
        conn = get_connection()
        try:
            conn.execute(f"INSERT INTO {table} ({columns}) VALUES ({placeholders})", tuple(values.values()))
            conn.commit()
        finally:
            conn.close()
        return values["id"]

    def user(self, **values) -> str:
        data = {
            "name": "Asha Rao",
            "email": "asha@example.com",
            "mobile_number": "9876543210",
            "address": "12 MG Road",
            "city": "Bengaluru",
            "state": "Karnataka",
            "pincode": "560001",
            "gender": "female",
            "fiddle_fitness_coins": 50,
            "created_at": ts(days=-30),
        }
        data.update(values)
        return self._insert("users", data)

    def event(self, **values) -> str:
        data = {
            "title": "Sunrise Yoga",
            "description": "Morning flow",
            "event_date": ts(days=7),
            "event_time": "07:00 AM",
            "location": "Online",
            "price": 499.0,
            "registration_deadline": None,
            "category": "cat_yoga",
            "created_at": ts(days=-10),
        }
        data.update(values)
        return self._insert("events", data)

    def trainer(self, event_id: Optional[str], name: str, **values) -> str:
        trainer_id = self._insert("trainers", {"name": name, "created_at": ts(days=-20), **values})
        if event_id is not None:
            self.assign(event_id, trainer_id)
        return trainer_id

    def assign(self, event_id: str, trainer_id: str) -> None:
        conn = get_connection()
        try:
            conn.execute(
                "INSERT INTO event_trainers (event_id, trainer_id) VALUES (?, ?)",
                (event_id, trainer_id),
            )
            conn.commit()
        finally:
            conn.close()

    def review(self, user_id: str, event_id: str, **values) -> str:
        data = {
            "user_id": user_id,
            "event_id": event_id,
            "rating": 5,
            "comment": "Great session",
            "status": "completed",
            "created_at": ts(days=-1),
        }
        data.update(values)
        return self._insert("event_reviews", data)

    def registration(self, user_id: str, event_id: str, **values) -> str:
        data = {"user_id": user_id, "event_id": event_id, "created_at": ts(days=-2)}
        data.update(values)
        return self._insert("event_registrations", data)

    def rows(self, table: str) -> list:
        conn = get_connection()
        try:
            return [dict(row) for row in conn.execute(f"SELECT * FROM {table}").fetchall()]
        finally:
            conn.close()


class FakeGateway(PaymentGateway):
    """Records invoice payloads; fails with ``error`` when set."""

    def __init__(self) -> None:
        self.calls = []
        self.error = None
        self.response = {"id": "inv_TEST123", "short_url": "https://rzp.io/i/abc123"}

    def create_invoice(self, payload):
        self.calls.append(payload)
        if self.error is not None:
            raise self.error
        return dict(self.response)


@pytest.fixture(autouse=True)
def database(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "database_url", str(tmp_path / "test.db"))
    monkeypatch.setattr(settings, "api_key", API_KEY)
    monkeypatch.setattr(settings, "admin_username", ADMIN_USERNAME)
    monkeypatch.setattr(settings, "admin_password", ADMIN_PASSWORD)
    monkeypatch.setattr(settings, "admin_jwt_secret", "test-jwt-secret")
    init_db()
    yield


@pytest.fixture
def seed():
    return Seed()


@pytest.fixture
def gateway():
    fake = FakeGateway()
    app.dependency_overrides[get_payment_gateway] = lambda: fake
    yield fake
    app.dependency_overrides.pop(get_payment_gateway, None)


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def admin_headers(client):
    response = client.post(
        "/api/v1/admin/login",
        json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD},
    )
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest.fixture
def api_key_headers():
    return {"X-API-Key": API_KEY}
