from datetime import date, datetime
from typing import Any, Dict, Iterable, List
import re

from booking_api.core.exceptions import InvalidInputError

DATE_KEY_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")
DATE_KEY_MESSAGE = "A valid date in YYYY-MM-DD format is required."


def validate_date_key(value: Any) -> bool:
    """Validate a YYYY-MM-DD date key that names a real calendar day."""
    if not isinstance(value, str) or not DATE_KEY_PATTERN.match(value):
        return False
    try:
        datetime.strptime(value, "%Y-%m-%d")
    except ValueError:
        return False
    return True


def parse_date_key(value: Any) -> date:
    """Return the calendar date for a date key or raise InvalidInputError."""
    if not validate_date_key(value):
        raise InvalidInputError(DATE_KEY_MESSAGE)
    return datetime.strptime(value, "%Y-%m-%d").date()


def missing_fields(data: Dict[str, Any], required: Iterable[str]) -> List[str]:
    """Names of required fields that are absent, None or blank."""
    missing = []
    for field in required:
        value = data.get(field)
        if value is None or (isinstance(value, str) and not value.strip()):
            missing.append(field)
    return missing
