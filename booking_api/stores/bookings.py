import threading
from typing import Dict, List

from booking_api.core.exceptions import SlotConflictError
from booking_api.models.booking import Booking


class BookingStore:
    """In-memory bookings keyed by date.

    Holds at most one booking per (date, slot label). All access goes through
    a lock because sync endpoints run on FastAPI's worker threads.
    """

    def __init__(self):
        self._bookings: Dict[str, List[Booking]] = {}
        self._lock = threading.Lock()

    def reserve(self, date_key: str, booking: Booking) -> Booking:
        """Append a booking unless its slot is already taken for the date."""
        with self._lock:
            day = self._bookings.get(date_key, [])
            if any(existing.time == booking.time for existing in day):
                raise SlotConflictError()
            self._bookings.setdefault(date_key, []).append(booking)
            return booking

    def is_booked(self, date_key: str, slot: str) -> bool:
        with self._lock:
            return any(b.time == slot for b in self._bookings.get(date_key, ()))

    def booked_slots(self, date_key: str) -> List[str]:
        with self._lock:
            return [b.time for b in self._bookings.get(date_key, ())]

    def for_date(self, date_key: str) -> List[Booking]:
        with self._lock:
            return list(self._bookings.get(date_key, ()))

    def all(self) -> Dict[str, List[Booking]]:
        """Snapshot of every date's bookings, in insertion order."""
        with self._lock:
            return {date_key: list(day) for date_key, day in self._bookings.items()}

    def __len__(self) -> int:
        with self._lock:
            return sum(len(day) for day in self._bookings.values())
