# hotel_api/services.py
import logging
from datetime import datetime, timezone
from typing import Any, Callable, List, Mapping, Optional

from fastapi import Depends

from hotel_api.exceptions import NotFoundError, ValidationError
from hotel_api.models import Booking, BookingStatus
from hotel_api.storage import BookingStore, get_store

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("fullName", "email", "phone", "checkIn", "checkOut")


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(moment: datetime) -> str:
    # 2025-06-01T10:15:30.123456Z
    return moment.astimezone(timezone.utc).isoformat(timespec="microseconds").replace("+00:00", "Z")


class BookingService:
    """Create, list, fetch and re-status bookings on top of a BookingStore.

    Every call reloads the whole collection and, for writes, saves the whole
    collection back. Status values are stored as given and may move between
    any two values.
    """

    def __init__(self, store: BookingStore, clock: Callable[[], datetime] = utcnow):
        self.store = store
        self.clock = clock

    def create(self, data: Mapping[str, Any]) -> Booking:
        if any(not data.get(field) for field in REQUIRED_FIELDS):
            raise ValidationError("Required fields are missing")

        self.store.ensure_initialized()
        bookings = self.store.load_all()

        now = self.clock()
        booking = Booking(
            id=self._next_id(now, bookings),
            fullName=data["fullName"],
            email=data["email"],
            phone=data["phone"],
            checkIn=data["checkIn"],
            checkOut=data["checkOut"],
            message=data.get("message") or "",
            totalPrice=data.get("totalPrice"),
            status=BookingStatus.PENDING.value,
            createdAt=format_timestamp(now),
        )
        bookings.append(booking)
        self.store.save_all(bookings)

        logger.info("Booking created", extra={"booking_id": booking.id})
        return booking

    def list_all(self, status: Optional[str] = None, search: Optional[str] = None) -> List[Booking]:
        self.store.ensure_initialized()
        bookings = self.store.load_all()

        if status and status != "all":
            bookings = [b for b in bookings if b.status == status]
        if search:
            term = search.lower()
            bookings = [
                b for b in bookings
                if term in b.fullName.lower() or term in b.email.lower() or search in b.phone
            ]
        return bookings

    def get_by_id(self, booking_id: str) -> Booking:
        self.store.ensure_initialized()
        for booking in self.store.load_all():
            if booking.id == booking_id:
                return booking
        raise NotFoundError("Booking not found")

    def update_status(self, booking_id: str, status: Optional[str]) -> Booking:
        self.store.ensure_initialized()
        bookings = self.store.load_all()

        booking = next((b for b in bookings if b.id == booking_id), None)
        if booking is None:
            raise NotFoundError("Booking not found")

        booking.status = status
        booking.updatedAt = format_timestamp(self.clock())
        self.store.save_all(bookings)

        logger.info("Booking status changed to %s", status, extra={"booking_id": booking.id, "status": status})
        return booking

    @staticmethod
    def _next_id(now: datetime, bookings: List[Booking]) -> str:
        # Millisecond timestamp, bumped past any id already taken
        taken = {b.id for b in bookings}
        candidate = int(now.timestamp() * 1000)
        while str(candidate) in taken:
            candidate += 1
        return str(candidate)


def get_booking_service(store: BookingStore = Depends(get_store)) -> BookingService:
    return BookingService(store)
