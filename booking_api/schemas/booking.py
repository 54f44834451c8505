from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class BookingCreate(BaseModel):
    """Public booking request.

    Required fields are declared optional here so that a missing field is
    reported by the booking service as a 400 with a single message, the same
    way an empty string is.
    """

    date: Optional[str] = Field(None, description="Date key in YYYY-MM-DD form")
    time: Optional[str] = Field(None, description="Slot label, e.g. '09:00 AM - 10:00 AM'")
    name: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    notes: Optional[str] = None


class BookingResponse(BaseModel):
    success: bool = True
    message: str


class AvailabilityResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    date: str
    available_times: List[str] = Field(default_factory=list, alias="availableTimes")
