# hotel_api/routes/bookings.py
import logging

from fastapi import APIRouter, Depends, HTTPException, status

from hotel_api import schemas
from hotel_api.config import Settings, get_settings
from hotel_api.exceptions import NotFoundError, StorageError, ValidationError
from hotel_api.services import BookingService, get_booking_service

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/bookings",
    tags=["Bookings"]
)

def public_listing_enabled(settings: Settings = Depends(get_settings)):
    if not settings.ENABLE_PUBLIC_BOOKING_LIST:
        raise HTTPException(status_code=404, detail="Not Found")

# Public - List All Bookings (development/demo only; disable with ENABLE_PUBLIC_BOOKING_LIST=false)
@router.get("", dependencies=[Depends(public_listing_enabled)])
def list_bookings(service: BookingService = Depends(get_booking_service)):
    try:
        bookings = service.list_all()
    except StorageError:
        logger.exception("Error reading bookings")
        raise HTTPException(status_code=500, detail="Error fetching bookings")
    return [booking.to_dict() for booking in bookings]

# Public - Create a Booking Request
@router.post("", status_code=status.HTTP_201_CREATED)
def create_booking(payload: schemas.BookingCreate, service: BookingService = Depends(get_booking_service)):
    try:
        booking = service.create(payload.model_dump())
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except StorageError:
        logger.exception("Error creating booking")
        raise HTTPException(status_code=500, detail="Error saving booking request")

    return {
        "message": "Booking request received successfully",
        "booking": booking.to_dict()
    }

# Public - Get a Booking by ID
@router.get("/{booking_id}")
def get_booking(booking_id: str, service: BookingService = Depends(get_booking_service)):
    try:
        booking = service.get_by_id(booking_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except StorageError:
        logger.exception("Error finding booking %s", booking_id)
        raise HTTPException(status_code=500, detail="Error retrieving booking")
    return booking.to_dict()
