from typing import Any, Dict, Mapping, Optional

import structlog

from booking_api.core.exceptions import InvalidInputError
from booking_api.stores.overrides import OverrideStore
from booking_api.utils.validation import validate_date_key

logger = structlog.get_logger(__name__)


class OverrideService:
    """Administrative enable/disable switches for individual slots."""

    def __init__(self, overrides: OverrideStore):
        self.overrides = overrides

    def set_overrides(
        self, date_key: Optional[str], slots: Optional[Mapping[str, Any]]
    ) -> Dict[str, bool]:
        """
        Merge slot overrides for a date.

        Entries in ``slots`` replace existing entries for the same slot label;
        other entries already stored for the date are left alone. Existing
        bookings are not affected.

        Returns:
            The full override mapping for the date after the merge

        Raises:
            InvalidInputError: If the date or slots are missing, the date is
                malformed, or a slot value is not a boolean
        """
        if not date_key or not isinstance(slots, Mapping) or not slots:
            raise InvalidInputError("Date and slots object are required.")
        if not validate_date_key(date_key):
            raise InvalidInputError("A valid date in YYYY-MM-DD format is required.")
        if not all(isinstance(value, bool) for value in slots.values()):
            raise InvalidInputError("Slot overrides must be true or false.")

        merged = self.overrides.merge(date_key, dict(slots))
        logger.info(
            "Availability overrides updated",
            date=date_key,
            disabled=sorted(slot for slot, enabled in merged.items() if not enabled),
        )
        return merged

    def list_overrides(self) -> Dict[str, Dict[str, bool]]:
        overrides = self.overrides.all()
        logger.info("Availability overrides listed", dates=len(overrides))
        return overrides
