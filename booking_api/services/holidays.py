from datetime import date
from functools import lru_cache

import holidays


class HolidayCalendar:
    """Public holidays of one country, used to close otherwise open weekdays.

    Uses the `holidays` library; ``country`` is an ISO 3166 code such as
    "US" or "IL".
    """

    def __init__(self, country: str):
        self.country = country.upper()
        # Fail at startup on an unknown country code rather than per request
        holidays.country_holidays(self.country)

    @staticmethod
    @lru_cache(maxsize=32)
    def _country_holidays(country: str, year: int) -> holidays.HolidayBase:
        return holidays.country_holidays(country, years=year)

    def is_holiday(self, day: date) -> bool:
        return day in self._country_holidays(self.country, day.year)
