import threading
from typing import Any, Dict, List, Union

import structlog

from booking_api.core.exceptions import InvalidInputError, SlotConflictError
from booking_api.models.booking import Booking
from booking_api.schemas.booking import BookingCreate
from booking_api.stores.bookings import BookingStore
from booking_api.stores.overrides import OverrideStore
from booking_api.utils.validation import missing_fields, parse_date_key

logger = structlog.get_logger(__name__)

REQUIRED_BOOKING_FIELDS = ("date", "time", "name", "email", "address")


class BookingService:
    """Creates bookings and exposes the booking ledger to administrators."""

    def __init__(self, bookings: BookingStore, overrides: OverrideStore):
        self.bookings = bookings
        self.overrides = overrides
        # Spans the override check and the reservation so a booking cannot
        # interleave with another for the same slot.
        self._lock = threading.Lock()

    def create_booking(
        self, booking_data: Union[BookingCreate, Dict[str, Any]]
    ) -> Booking:
        """
        Book a slot on a date.

        Args:
            booking_data: Request payload with date, time, name, email,
                address and optional notes

        Returns:
            Booking: The stored booking record

        Raises:
            InvalidInputError: If a required field is missing or the date is
                malformed
            SlotConflictError: If the slot is already booked or disabled
        """
        if isinstance(booking_data, BookingCreate):
            data = booking_data.model_dump()
        else:
            data = dict(booking_data)

        missing = missing_fields(data, REQUIRED_BOOKING_FIELDS)
        if missing:
            logger.warning("Booking rejected, missing fields", missing=missing)
            raise InvalidInputError("Missing required booking information.")

        date_key = data["date"]
        parse_date_key(date_key)

        booking = Booking(
            time=data["time"],
            name=data["name"],
            email=data["email"],
            address=data["address"],
            notes=data.get("notes") or None,
        )

        with self._lock:
            if self.overrides.is_disabled(date_key, booking.time):
                logger.info(
                    "Booking conflict, slot disabled",
                    date=date_key,
                    time=booking.time,
                )
                raise SlotConflictError()
            try:
                self.bookings.reserve(date_key, booking)
            except SlotConflictError:
                logger.info(
                    "Booking conflict, slot already booked",
                    date=date_key,
                    time=booking.time,
                )
                raise

        logger.info(
            "New booking",
            date=date_key,
            time=booking.time,
            name=booking.name,
            email=booking.email,
        )
        return booking

    def list_bookings(self) -> Dict[str, List[Dict[str, Any]]]:
        """Every booking grouped by date key."""
        ledger = {
            date_key: [booking.to_public_dict() for booking in day]
            for date_key, day in self.bookings.all().items()
        }
        logger.info("Bookings listed", dates=len(ledger), total=len(self.bookings))
        return ledger
