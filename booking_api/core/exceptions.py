from fastapi import status


class BookingAPIError(Exception):
    """Base class for errors surfaced to API callers as ``{"message": ...}``."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error."

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInputError(BookingAPIError):
    """Malformed or missing request fields."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request."


class SlotConflictError(BookingAPIError):
    """The requested slot is booked or administratively disabled."""

    status_code = status.HTTP_409_CONFLICT
    default_message = "This time slot is no longer available."


class UnauthorizedError(BookingAPIError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Authorization token is required."


class ForbiddenError(BookingAPIError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Invalid or expired token."
