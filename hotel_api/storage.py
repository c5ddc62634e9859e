# hotel_api/storage.py
import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List

from fastapi import Depends
from pydantic import ValidationError as PydanticValidationError

from hotel_api.config import Settings, get_settings
from hotel_api.exceptions import StorageError
from hotel_api.models import Booking

logger = logging.getLogger(__name__)


class BookingStore(ABC):
    """Persistence for the whole booking collection.

    The collection is the unit of persistence: callers load everything,
    change it in memory and save everything back.
    """

    @abstractmethod
    def ensure_initialized(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def load_all(self) -> List[Booking]:
        raise NotImplementedError

    @abstractmethod
    def save_all(self, bookings: List[Booking]) -> None:
        raise NotImplementedError


class JSONFileBookingStore(BookingStore):
    """Bookings kept as a pretty-printed JSON array in a single file.

    Writes overwrite the file in place, so a crash mid-write can leave it
    truncated. There is no locking; concurrent writers race and the last
    one wins.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def ensure_initialized(self) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            if not self.path.exists():
                self.path.write_text(json.dumps([]), encoding="utf-8")
                logger.info("Created empty bookings file at %s", self.path)
        except OSError as e:
            raise StorageError(f"Could not initialize {self.path}: {e}") from e

    def load_all(self) -> List[Booking]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Could not read {self.path}: {e}") from e

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise StorageError(f"{self.path} is not valid JSON: {e}") from e

        if not isinstance(data, list):
            raise StorageError(f"{self.path} does not hold a JSON array")

        try:
            return [Booking.model_validate(item) for item in data]
        except PydanticValidationError as e:
            raise StorageError(f"{self.path} holds a malformed booking: {e}") from e

    def save_all(self, bookings: List[Booking]) -> None:
        payload = json.dumps([b.to_dict() for b in bookings], indent=2, ensure_ascii=False)
        try:
            self.path.write_text(payload, encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Could not write {self.path}: {e}") from e


class InMemoryBookingStore(BookingStore):
    """Store used in tests; keeps copies so callers can't mutate saved state."""

    def __init__(self) -> None:
        self._bookings: List[Booking] = []

    def ensure_initialized(self) -> None:
        pass

    def load_all(self) -> List[Booking]:
        return [b.model_copy(deep=True) for b in self._bookings]

    def save_all(self, bookings: List[Booking]) -> None:
        self._bookings = [b.model_copy(deep=True) for b in bookings]


def get_store(settings: Settings = Depends(get_settings)) -> BookingStore:
    return JSONFileBookingStore(Path(settings.DATA_DIR) / settings.BOOKINGS_FILE)
