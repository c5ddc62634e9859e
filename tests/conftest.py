from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from hotel_api.config import Settings, get_settings
from hotel_api.main import app
from hotel_api.services import BookingService, get_booking_service
from hotel_api.storage import InMemoryBookingStore, get_store

ADMIN_SECRET = "test-secret"

JANE = {
    "fullName": "Jane Doe",
    "email": "jane@x.com",
    "phone": "5551234567",
    "checkIn": "2025-06-01",
    "checkOut": "2025-06-03",
}


class TickingClock:
    """Returns a moment one second later on every call."""

    def __init__(self, start=datetime(2025, 5, 1, 12, 0, tzinfo=timezone.utc)):
        self.now = start

    def __call__(self):
        current = self.now
        self.now += timedelta(seconds=1)
        return current


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    return Settings(
        _env_file=None,
        ADMIN_PASSWORD=ADMIN_SECRET,
        DATA_DIR=str(tmp_path / "data"),
    )


@pytest.fixture
def store() -> InMemoryBookingStore:
    return InMemoryBookingStore()


@pytest.fixture
def service(store) -> BookingService:
    return BookingService(store, clock=TickingClock())


@pytest.fixture
def client(test_settings, store, service):
    app.dependency_overrides[get_settings] = lambda: test_settings
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_booking_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers():
    return {"Authorization": f"Bearer {ADMIN_SECRET}"}


@pytest.fixture
def file_client(test_settings):
    # Only settings are replaced; store and service come from the app's own dependencies
    app.dependency_overrides[get_settings] = lambda: test_settings
    yield TestClient(app)
    app.dependency_overrides.clear()
