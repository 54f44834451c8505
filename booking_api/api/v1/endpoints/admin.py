from typing import Dict, List

from fastapi import APIRouter, Depends

from booking_api.api.deps.auth import require_admin
from booking_api.api.deps.state import (
    get_auth_provider,
    get_booking_service,
    get_override_service,
)
from booking_api.schemas.admin import (
    LoginRequest,
    LoginResponse,
    MessageResponse,
    OverrideUpdate,
)
from booking_api.services.auth import AuthProvider
from booking_api.services.booking import BookingService
from booking_api.services.overrides import OverrideService

# Login is the only admin route reachable without a token
router = APIRouter()

protected_router = APIRouter(dependencies=[Depends(require_admin)])


@router.post("/login", response_model=LoginResponse)
async def login(
    credentials: LoginRequest,
    auth_provider: AuthProvider = Depends(get_auth_provider),
):
    """Exchange the admin passcode for a bearer token."""
    token = auth_provider.issue_token(credentials.passcode)
    return LoginResponse(success=True, token=token)


@protected_router.get("/bookings")
async def list_bookings(
    booking_service: BookingService = Depends(get_booking_service),
) -> Dict[str, List[dict]]:
    """All bookings grouped by date."""
    return booking_service.list_bookings()


@protected_router.get("/availability")
async def list_overrides(
    override_service: OverrideService = Depends(get_override_service),
) -> Dict[str, Dict[str, bool]]:
    """All availability overrides grouped by date."""
    return override_service.list_overrides()


@protected_router.post("/availability", response_model=MessageResponse)
async def update_overrides(
    override_data: OverrideUpdate,
    override_service: OverrideService = Depends(get_override_service),
):
    """
    Enable or disable slots for a date.

    The slots object is merged into what is already stored for the date;
    ``false`` disables a slot and ``true`` restores it.
    """
    override_service.set_overrides(override_data.date, override_data.slots)
    return MessageResponse(
        success=True, message=f"Availability for {override_data.date} updated."
    )
