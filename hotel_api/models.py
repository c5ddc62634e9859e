# hotel_api/models.py
from enum import Enum
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, StrictFloat, StrictInt


class BookingStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    COMPLETED = "completed"


class Booking(BaseModel):
    """
    One room-reservation request as persisted in the bookings file.

    Field names are the camelCase keys used on disk and on the wire.
    `status` is a plain string: the admin dashboard only sends
    BookingStatus values, but updates are stored as given.
    """
    model_config = ConfigDict(extra="allow")

    id: str
    fullName: str
    email: str
    phone: str
    checkIn: str  # YYYY-MM-DD
    checkOut: str  # YYYY-MM-DD
    message: str = ""
    totalPrice: Optional[Union[StrictInt, StrictFloat]] = None  # stored exactly as the client sent it
    # Set to "pending" on create. An update without a status leaves the key
    # out, and it stays out when the file is read back.
    status: Optional[str] = None
    createdAt: str
    updatedAt: Optional[str] = None  # absent until the first status change

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)
