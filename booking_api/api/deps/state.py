from fastapi import Depends, Request

from booking_api.core.state import AppState
from booking_api.services.auth import AuthProvider
from booking_api.services.availability import AvailabilityService
from booking_api.services.booking import BookingService
from booking_api.services.overrides import OverrideService


def get_app_state(request: Request) -> AppState:
    """State object attached to the running application by the app factory."""
    return request.app.state.booking


def get_availability_service(
    state: AppState = Depends(get_app_state),
) -> AvailabilityService:
    return state.availability_service


def get_booking_service(state: AppState = Depends(get_app_state)) -> BookingService:
    return state.booking_service


def get_override_service(state: AppState = Depends(get_app_state)) -> OverrideService:
    return state.override_service


def get_auth_provider(state: AppState = Depends(get_app_state)) -> AuthProvider:
    return state.auth_provider
