"""Data access layer."""

from .base_repository import BaseRepository
from .booking_repository import BookingRepository
from .factory import RepositoryFactory
from .field_repository import FieldRepository
from .user_repository import UserRepository

__all__ = [
    "BaseRepository",
    "BookingRepository",
    "FieldRepository",
    "RepositoryFactory",
    "UserRepository",
]
