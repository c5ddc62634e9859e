# hotel_api/schemas.py
from pydantic import BaseModel, StrictFloat, StrictInt
from typing import Optional, Union

# Required booking fields are checked by the service so that a missing
# field answers 400 "Required fields are missing" rather than a schema error.
class BookingCreate(BaseModel):
    fullName: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    checkIn: Optional[str] = None  # YYYY-MM-DD
    checkOut: Optional[str] = None  # YYYY-MM-DD
    message: Optional[str] = None
    totalPrice: Optional[Union[StrictInt, StrictFloat]] = None  # "550" is a malformed body, not 550

class StatusUpdate(BaseModel):
    status: Optional[str] = None

class AdminLogin(BaseModel):
    password: Optional[str] = None

class RoomType(BaseModel):
    id: int
    name: str
    price: int  # per night
