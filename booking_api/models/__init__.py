from . import booking
from .booking import Booking

__all__ = [
    "booking",
    "Booking",
]
