from datetime import date, datetime, time, timezone
from typing import List, Optional

import structlog

from booking_api.services.holidays import HolidayCalendar
from booking_api.stores.bookings import BookingStore
from booking_api.stores.overrides import OverrideStore
from booking_api.utils.validation import parse_date_key

logger = structlog.get_logger(__name__)

# Hourly policy, identical for every weekday.
STANDARD_WEEKDAY_SLOTS = (
    "08:00 AM - 09:00 AM",
    "09:00 AM - 10:00 AM",
    "10:00 AM - 11:00 AM",
)

SATURDAY, SUNDAY = 5, 6


def standard_slots(
    day: date, holiday_calendar: Optional[HolidayCalendar] = None
) -> List[str]:
    """Slots offered on a day before bookings and overrides are applied.

    The day of week is taken at UTC midnight, so a date key always maps to the
    same weekday regardless of the server's local timezone.
    """
    weekday = datetime.combine(day, time.min, tzinfo=timezone.utc).weekday()
    if weekday in (SATURDAY, SUNDAY):
        return []
    if holiday_calendar and holiday_calendar.is_holiday(day):
        return []
    return list(STANDARD_WEEKDAY_SLOTS)


class AvailabilityService:
    """Resolves which standard slots are still open for a date."""

    def __init__(
        self,
        bookings: BookingStore,
        overrides: OverrideStore,
        holiday_calendar: Optional[HolidayCalendar] = None,
    ):
        self.bookings = bookings
        self.overrides = overrides
        self.holiday_calendar = holiday_calendar

    def standard_slots(self, date_key: str) -> List[str]:
        return standard_slots(parse_date_key(date_key), self.holiday_calendar)

    def resolve_availability(self, date_key: str) -> List[str]:
        """
        Open slots for a date, in standard order.

        A slot is kept when it is not booked for the date and has not been
        disabled by an override.

        Raises:
            InvalidInputError: If the date key is malformed
        """
        all_slots = self.standard_slots(date_key)
        booked = set(self.bookings.booked_slots(date_key))
        day_overrides = self.overrides.for_date(date_key)

        available = [
            slot
            for slot in all_slots
            if slot not in booked and day_overrides.get(slot) is not False
        ]

        logger.info(
            "Availability checked",
            date=date_key,
            standard_slots=len(all_slots),
            available_slots=len(available),
        )
        return available
