from typing import Optional

import structlog

from booking_api.core.config import Settings
from booking_api.services.auth import AuthProvider, PasscodeAuthProvider
from booking_api.services.availability import AvailabilityService
from booking_api.services.booking import BookingService
from booking_api.services.holidays import HolidayCalendar
from booking_api.services.overrides import OverrideService
from booking_api.stores.bookings import BookingStore
from booking_api.stores.overrides import OverrideStore

logger = structlog.get_logger(__name__)


class AppState:
    """Process-lifetime state owned by one application instance.

    Stores start empty on every startup; nothing is persisted.
    """

    def __init__(
        self,
        auth_provider: AuthProvider,
        holiday_calendar: Optional[HolidayCalendar] = None,
    ):
        self.bookings = BookingStore()
        self.overrides = OverrideStore()
        self.auth_provider = auth_provider

        self.availability_service = AvailabilityService(
            self.bookings, self.overrides, holiday_calendar
        )
        self.booking_service = BookingService(self.bookings, self.overrides)
        self.override_service = OverrideService(self.overrides)

    @classmethod
    def from_settings(cls, settings: Settings) -> "AppState":
        holiday_calendar = None
        if settings.HOLIDAY_COUNTRY:
            holiday_calendar = HolidayCalendar(settings.HOLIDAY_COUNTRY)
            logger.info("Holiday closures enabled", country=holiday_calendar.country)
        return cls(
            auth_provider=PasscodeAuthProvider(settings.ADMIN_PASSCODE),
            holiday_calendar=holiday_calendar,
        )
