"""Pytest configuration and shared fixtures."""

import os

# Settings are read at import time; keep the module-level app unseeded.
os.environ.setdefault("SEED_DEMO_DATA", "false")

from datetime import datetime  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from race_event_api.app.core.locks import KeyedLock  # noqa: E402
from race_event_api.app.core.security import create_access_token  # noqa: E402
from race_event_api.app.main import create_app  # noqa: E402
from race_event_api.app.schemas.event import EventCreate  # noqa: E402
from race_event_api.app.services.registration_service import RegistrationService  # noqa: E402
from race_event_api.app.storage import MemStorage  # noqa: E402


@pytest.fixture
def storage() -> MemStorage:
    return MemStorage()


@pytest.fixture
def seeded_storage() -> MemStorage:
    return MemStorage(seed=True)


@pytest.fixture
def client(storage: MemStorage) -> TestClient:
    return TestClient(create_app(storage=storage))


@pytest.fixture
def seeded_client(seeded_storage: MemStorage) -> TestClient:
    return TestClient(create_app(storage=seeded_storage))


@pytest.fixture
def registration_service(storage: MemStorage) -> RegistrationService:
    return RegistrationService(storage, KeyedLock())


@pytest.fixture
def make_event(storage: MemStorage):
    """Factory storing an event; keyword arguments override the defaults."""

    def _make_event(**overrides):
        data = {
            "title": "City 10K",
            "description": "Ten kilometres around the old town",
            "date": datetime(2024, 5, 1, 7, 0),
            "location": "Bandung, Indonesia",
            "category": "Running",
            "capacity": None,
            "price": 20,
            "organizer_id": 2,
            "status": "published",
            "registration_open": True,
        }
        data.update(overrides)
        return storage.create_event(EventCreate(**data))

    return _make_event


def bearer(user_id: int, username: str, role: str) -> dict:
    token = create_access_token({"id": user_id, "username": username, "role": role})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers() -> dict:
    return bearer(1, "admin", "admin")


@pytest.fixture
def participant_headers() -> dict:
    return bearer(3, "participant", "participant")
