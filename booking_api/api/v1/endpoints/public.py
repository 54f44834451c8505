from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from booking_api.api.deps.state import get_availability_service, get_booking_service
from booking_api.schemas.booking import (
    AvailabilityResponse,
    BookingCreate,
    BookingResponse,
)
from booking_api.services.availability import AvailabilityService
from booking_api.services.booking import BookingService

router = APIRouter()


@router.get("/availability", response_model=AvailabilityResponse)
async def get_availability(
    date: Optional[str] = Query(None, description="Date in YYYY-MM-DD format"),
    availability_service: AvailabilityService = Depends(get_availability_service),
):
    """
    List the open slots for a date.

    Weekends have no slots. Booked slots and slots disabled by an
    administrator are left out.
    """
    available_times = availability_service.resolve_availability(date)
    return AvailabilityResponse(date=date, available_times=available_times)


@router.post(
    "/book", response_model=BookingResponse, status_code=status.HTTP_201_CREATED
)
async def create_booking(
    booking_data: BookingCreate,
    booking_service: BookingService = Depends(get_booking_service),
):
    """Book one slot. Returns 409 if the slot is taken or disabled."""
    booking_service.create_booking(booking_data)
    return BookingResponse(success=True, message="Booking confirmed!")
