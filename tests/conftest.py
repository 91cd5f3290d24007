"""Shared fixtures: in-memory SQLite, users, boarding houses, auth headers."""

from __future__ import annotations

import os

# Must be set before app.config / app.database are imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["PERMIT_REEVALUATION_CRON_ENABLED"] = "false"
os.environ["PERMIT_NEAR_EXPIRY_DAYS"] = "30"
os.environ["MAILGUN_API_KEY"] = ""
os.environ["MAILGUN_DOMAIN"] = ""
os.environ["JWT_SECRET_KEY"] = "test-secret"

from datetime import date, timedelta

import pytest
from fastapi.testclient import TestClient

from app.database import Base, SessionLocal, engine
from app.main import app
from app.models.boarding_house import BoardingHouse, PermitStatus, Room
from app.models.user import User, UserRole
from app.services.auth import create_access_token, get_password_hash


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

TODAY = date(2026, 3, 1)
PIN = (8.0296, 123.3171)  # Poblacion A


# ---------------------------------------------------------------------------
# Database
# ---------------------------------------------------------------------------


@pytest.fixture
def db():
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db) -> TestClient:
    # No context manager: startup (scheduler, admin seed) is not run in tests
    return TestClient(app)


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------


@pytest.fixture
def make_user(db):
    counter = {"n": 0}

    def _make(role: UserRole = UserRole.owner, email: str | None = None, password: str = "secret123") -> User:
        counter["n"] += 1
        user = User(
            email=email or f"{role.value}{counter['n']}@example.com",
            name=f"Test {role.value.title()} {counter['n']}",
            hashed_password=get_password_hash(password),
            role=role,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make


@pytest.fixture
def owner(make_user) -> User:
    return make_user(UserRole.owner, email="owner@example.com")


@pytest.fixture
def admin(make_user) -> User:
    return make_user(UserRole.admin, email="admin@midsalip.gov.ph")


@pytest.fixture
def make_house(db, owner):
    """Factory for a BoardingHouse. expires_in is days from `today` (default TODAY)."""
    counter = {"n": 0}

    def _make(
        expires_in: int = 365,
        today: date = TODAY,
        pinned: bool = True,
        rooms: int = 0,
        beds: int = 2,
        **overrides,
    ) -> BoardingHouse:
        counter["n"] += 1
        defaults = {
            "owner_id": owner.id,
            "name": f"Casa Midsalip {counter['n']}",
            "barangay": "Poblacion A",
            "address": "12 Rizal St, Poblacion A",
            "contact_number": "09171234567",
            "permit_number": f"BP-2026-{counter['n']:04d}",
            "permit_issue_date": today - timedelta(days=200),
            "permit_expiry_date": today + timedelta(days=expires_in),
            "latitude": PIN[0] if pinned else None,
            "longitude": PIN[1] if pinned else None,
            "permit_status": PermitStatus.pending,
            "is_active": False,
        }
        defaults.update(overrides)
        house = BoardingHouse(**defaults)
        db.add(house)
        db.flush()
        for i in range(1, rooms + 1):
            db.add(Room(boarding_house_id=house.id, name=f"Room {i}", capacity=beds))
        db.commit()
        db.refresh(house)
        return house

    return _make


@pytest.fixture
def auth_headers():
    def _headers(user: User) -> dict[str, str]:
        return {"Authorization": f"Bearer {create_access_token(user)}"}

    return _headers


class RecordingNotifier:
    """Stands in for notifications.emit and records each call."""

    def __init__(self, fail: bool = False):
        self.calls: list[dict] = []
        self.fail = fail

    def __call__(self, db, user_id, title, message, type, related_id=None):
        if self.fail:
            from app.exceptions import NotificationError

            raise NotificationError("notification store unavailable")
        self.calls.append(
            {"user_id": user_id, "title": title, "message": message, "type": type, "related_id": related_id}
        )


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def failing_notifier() -> RecordingNotifier:
    return RecordingNotifier(fail=True)


@pytest.fixture
def today() -> date:
    """The frozen evaluation date make_house builds permits around."""
    return TODAY
