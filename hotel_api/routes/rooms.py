# hotel_api/routes/rooms.py
from typing import List

from fastapi import APIRouter

from hotel_api import schemas

router = APIRouter(
    prefix="/api/rooms",
    tags=["Rooms"]
)

# Nightly rates the booking form prices a stay with. The client sends the
# resulting totalPrice and the server stores it unchecked.
ROOM_TYPES = [
    schemas.RoomType(id=2, name="Adventure Room", price=275),
    schemas.RoomType(id=3, name="Wellness Room", price=350),
    schemas.RoomType(id=1, name="Athletic Suite", price=500),
]

# Public - List Room Types
@router.get("", response_model=List[schemas.RoomType])
def list_room_types():
    return ROOM_TYPES
