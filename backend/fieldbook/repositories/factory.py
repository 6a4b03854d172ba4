# backend/fieldbook/repositories/factory.py
"""
Repository Factory for the field booking API.

Centralizes creation of repository instances so services can be handed
substitutes in tests.
"""

from typing import TYPE_CHECKING

from sqlalchemy.orm import Session

if TYPE_CHECKING:
    from .booking_repository import BookingRepository
    from .field_repository import FieldRepository
    from .user_repository import UserRepository


class RepositoryFactory:
    """Factory class for creating repository instances."""

    @staticmethod
    def create_user_repository(db: Session) -> "UserRepository":
        from .user_repository import UserRepository

        return UserRepository(db)

    @staticmethod
    def create_field_repository(db: Session) -> "FieldRepository":
        from .field_repository import FieldRepository

        return FieldRepository(db)

    @staticmethod
    def create_booking_repository(db: Session) -> "BookingRepository":
        from .booking_repository import BookingRepository

        return BookingRepository(db)
