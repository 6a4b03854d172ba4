"""ORM models; importing this package registers every table on Base.metadata."""

from .booking import Booking, BookingStatus
from .field import Field
from .user import User

__all__ = ["Booking", "BookingStatus", "Field", "User"]
