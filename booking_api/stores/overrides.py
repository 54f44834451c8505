import threading
from typing import Dict, Mapping


class OverrideStore:
    """Per-date slot overrides set by administrators.

    ``False`` disables a slot for the date; ``True`` or a missing entry
    leaves the slot at its default.
    """

    def __init__(self):
        self._overrides: Dict[str, Dict[str, bool]] = {}
        self._lock = threading.Lock()

    def merge(self, date_key: str, patch: Mapping[str, bool]) -> Dict[str, bool]:
        """Merge a patch into the date's overrides and return the result."""
        with self._lock:
            day = self._overrides.setdefault(date_key, {})
            day.update(patch)
            return dict(day)

    def for_date(self, date_key: str) -> Dict[str, bool]:
        with self._lock:
            return dict(self._overrides.get(date_key, {}))

    def is_disabled(self, date_key: str, slot: str) -> bool:
        with self._lock:
            return self._overrides.get(date_key, {}).get(slot) is False

    def all(self) -> Dict[str, Dict[str, bool]]:
        with self._lock:
            return {date_key: dict(day) for date_key, day in self._overrides.items()}
