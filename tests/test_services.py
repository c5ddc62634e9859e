from datetime import datetime, timezone

import pytest

from conftest import JANE
from hotel_api.exceptions import NotFoundError, StorageError, ValidationError
from hotel_api.models import BookingStatus
from hotel_api.services import BookingService
from hotel_api.storage import BookingStore, JSONFileBookingStore


def test_create_sets_defaults(service: BookingService):
    booking = service.create(JANE)

    assert booking.status == BookingStatus.PENDING.value
    assert booking.message == ""
    assert booking.createdAt
    assert booking.updatedAt is None
    assert booking.id.isdigit()


def test_create_keeps_message_and_price(service: BookingService):
    booking = service.create({**JANE, "message": "Late arrival", "totalPrice": 550})

    assert booking.message == "Late arrival"
    assert booking.totalPrice == 550


@pytest.mark.parametrize("field", ["fullName", "email", "phone", "checkIn", "checkOut"])
def test_create_requires_field(service: BookingService, store, field):
    data = {**JANE}
    del data[field]

    with pytest.raises(ValidationError, match="Required fields are missing"):
        service.create(data)
    assert store.load_all() == []


def test_create_treats_empty_string_as_missing(service: BookingService, store):
    with pytest.raises(ValidationError):
        service.create({**JANE, "email": ""})
    assert store.load_all() == []


def test_ids_are_unique_within_the_same_millisecond(store):
    moment = datetime(2025, 5, 1, 12, 0, tzinfo=timezone.utc)
    service = BookingService(store, clock=lambda: moment)

    ids = [service.create(JANE).id for _ in range(3)]

    assert len(set(ids)) == 3


def test_get_by_id_returns_created_booking(service: BookingService):
    created = service.create(JANE)

    assert service.get_by_id(created.id) == created


def test_get_by_id_unknown(service: BookingService):
    with pytest.raises(NotFoundError):
        service.get_by_id("missing")


def test_list_all_keeps_creation_order(service: BookingService):
    assert service.list_all() == []

    first = service.create(JANE)
    second = service.create({**JANE, "fullName": "John Roe"})

    assert [b.id for b in service.list_all()] == [first.id, second.id]


def test_list_all_filters(service: BookingService):
    jane = service.create(JANE)
    john = service.create({**JANE, "fullName": "John Roe", "email": "john@y.org", "phone": "5559876543"})
    service.update_status(john.id, "confirmed")

    assert [b.id for b in service.list_all(status="confirmed")] == [john.id]
    assert [b.id for b in service.list_all(status="all")] == [jane.id, john.id]
    assert [b.id for b in service.list_all(search="JANE")] == [jane.id]
    assert [b.id for b in service.list_all(search="y.org")] == [john.id]
    assert [b.id for b in service.list_all(search="98765")] == [john.id]
    assert service.list_all(status="pending", search="john") == []


def test_update_status_changes_only_status_and_updated_at(service: BookingService):
    created = service.create({**JANE, "totalPrice": 550})

    updated = service.update_status(created.id, "confirmed")

    assert updated.status == "confirmed"
    assert updated.updatedAt > created.createdAt
    before = created.to_dict()
    after = updated.to_dict()
    for key in ("status", "updatedAt"):
        before.pop(key, None)
        after.pop(key)
    assert before == after
    assert service.get_by_id(created.id) == updated


def test_update_status_accepts_any_value_and_transition(service: BookingService):
    created = service.create(JANE)

    service.update_status(created.id, "completed")
    service.update_status(created.id, "pending")
    updated = service.update_status(created.id, "on-hold")

    assert updated.status == "on-hold"
    assert service.get_by_id(created.id).status == "on-hold"


def test_update_status_unknown_id_does_not_write(store):
    class CountingStore(BookingStore):
        def __init__(self):
            self.saves = 0

        def ensure_initialized(self):
            pass

        def load_all(self):
            return store.load_all()

        def save_all(self, bookings):
            self.saves += 1
            store.save_all(bookings)

    counting = CountingStore()
    service = BookingService(counting)
    service.create(JANE)

    with pytest.raises(NotFoundError):
        service.update_status("missing", "confirmed")
    assert counting.saves == 1


def test_service_round_trips_through_file(tmp_path):
    path = tmp_path / "data" / "bookings.json"
    service = BookingService(JSONFileBookingStore(path))

    created = service.create(JANE)

    assert path.exists()
    assert BookingService(JSONFileBookingStore(path)).get_by_id(created.id) == created


def test_corrupt_file_surfaces_storage_error(tmp_path):
    path = tmp_path / "bookings.json"
    path.write_text("not json")

    with pytest.raises(StorageError):
        BookingService(JSONFileBookingStore(path)).list_all()
