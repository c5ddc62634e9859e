# hotel_api/exceptions.py


class BookingError(Exception):
    """Base class for errors raised by the booking store, service and guard."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(BookingError):
    """Required creation fields are missing."""


class Unauthorized(BookingError):
    """No Authorization header was sent."""


class Forbidden(BookingError):
    """An Authorization header was sent but the token is wrong."""


class NotFoundError(BookingError):
    """No booking has the requested id."""


class StorageError(BookingError):
    """The bookings file could not be created, read, parsed or written."""
