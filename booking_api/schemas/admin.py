from typing import Dict, Optional

from pydantic import BaseModel, Field, StrictBool


class LoginRequest(BaseModel):
    passcode: Optional[str] = None


class LoginResponse(BaseModel):
    success: bool = True
    token: str


class OverrideUpdate(BaseModel):
    """Patch of per-slot overrides for a single date.

    ``False`` disables a slot for the date; ``True`` restores the default.
    """

    date: Optional[str] = Field(None, description="Date key in YYYY-MM-DD form")
    slots: Optional[Dict[str, StrictBool]] = Field(
        None, description="Mapping of slot label to enabled flag"
    )


class MessageResponse(BaseModel):
    success: bool = True
    message: str
