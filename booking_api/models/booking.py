from typing import Optional

from pydantic import BaseModel, ConfigDict


class Booking(BaseModel):
    """A confirmed booking for one slot on one date.

    Records are immutable once stored; there is no cancellation path.
    """

    model_config = ConfigDict(frozen=True)

    time: str
    name: str
    email: str
    address: str
    notes: Optional[str] = None

    def to_public_dict(self) -> dict:
        """Serialise for admin listings, omitting notes when none were given."""
        return self.model_dump(exclude_none=True)
