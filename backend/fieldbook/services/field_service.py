# backend/fieldbook/services/field_service.py
"""
Field Service for the field booking API.

CRUD over bookable fields plus the price lookup used by the booking core.
"""

import logging
from typing import List, Optional, Tuple

from sqlalchemy.orm import Session

from ..core.exceptions import ConflictException, NotFoundException, ValidationException
from ..models.field import Field
from ..repositories.booking_repository import BookingRepository
from ..repositories.factory import RepositoryFactory
from ..repositories.field_repository import FieldRepository
from .base import BaseService

logger = logging.getLogger(__name__)


class FieldService(BaseService):
    """Service for managing sports fields."""

    def __init__(
        self,
        db: Session,
        field_repository: Optional[FieldRepository] = None,
        booking_repository: Optional[BookingRepository] = None,
    ) -> None:
        super().__init__(db)
        self.logger = logging.getLogger(__name__)
        self.field_repository = field_repository or RepositoryFactory.create_field_repository(db)
        self.booking_repository = (
            booking_repository or RepositoryFactory.create_booking_repository(db)
        )

    @staticmethod
    def _validate_field_data(name: str, price_per_hour: int, location: str) -> None:
        if not name or not name.strip():
            raise ValidationException("Field name is required")
        if price_per_hour <= 0:
            raise ValidationException("Price per hour must be greater than 0")
        if not location or not location.strip():
            raise ValidationException("Location is required")

    @BaseService.measure_operation("list_fields")
    def list_fields(self) -> List[Field]:
        return self.field_repository.get_all()

    @BaseService.measure_operation("get_field")
    def get_field(self, field_id: int) -> Field:
        field = self.field_repository.get_by_id(field_id)
        if field is None:
            raise NotFoundException("Field not found")
        return field

    def get_price_and_existence(
        self, field_id: int, for_update: bool = False
    ) -> Tuple[int, str, str]:
        """
        Look up a field's hourly price, name and location.

        Args:
            field_id: Field to look up
            for_update: Hold a row lock on the field until the caller's
                transaction ends

        Raises:
            NotFoundException: If no field has this id
        """
        if for_update:
            field = self.field_repository.get_by_id_for_update(field_id)
        else:
            field = self.field_repository.get_by_id(field_id)
        if field is None:
            raise NotFoundException("Field not found")
        return field.price_per_hour, field.name, field.location

    @BaseService.measure_operation("create_field")
    def create_field(self, name: str, price_per_hour: int, location: str) -> Field:
        self.log_operation("create_field", field_name=name, price_per_hour=price_per_hour)
        self._validate_field_data(name, price_per_hour, location)

        with self.transaction():
            field = self.field_repository.create(
                name=name,
                price_per_hour=price_per_hour,
                location=location,
            )
        self.logger.info(f"Created field {field.id} ({name})")
        return field

    @BaseService.measure_operation("update_field")
    def update_field(self, field_id: int, name: str, price_per_hour: int, location: str) -> Field:
        """Replace all editable attributes of a field."""
        self.log_operation("update_field", field_id=field_id)
        self._validate_field_data(name, price_per_hour, location)

        with self.transaction():
            field = self.field_repository.update(
                field_id,
                name=name,
                price_per_hour=price_per_hour,
                location=location,
            )
            if field is None:
                raise NotFoundException("Field not found")
        return field

    @BaseService.measure_operation("delete_field")
    def delete_field(self, field_id: int) -> None:
        """
        Delete a field.

        Raises:
            NotFoundException: If no field has this id
            ConflictException: If bookings still reference the field
        """
        self.log_operation("delete_field", field_id=field_id)

        with self.transaction():
            if self.field_repository.get_by_id(field_id) is None:
                raise NotFoundException("Field not found")
            if self.booking_repository.has_bookings_for_field(field_id):
                self.logger.warning(f"Refusing to delete field {field_id} with bookings")
                raise ConflictException("Field has existing bookings")
            self.field_repository.delete(field_id)
        self.logger.info(f"Deleted field {field_id}")
