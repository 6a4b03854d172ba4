# backend/fieldbook/services/payment_service.py
"""
Payment Service for the field booking API.

Moves a booking from an unpaid status to paid. No payment provider is
involved; the transition only records that payment happened.
"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from ..core.exceptions import (
    NotFoundException,
    RepositoryException,
    ServiceException,
    ValidationException,
)
from ..models.booking import Booking, BookingStatus
from ..repositories.booking_repository import BookingRepository
from ..repositories.factory import RepositoryFactory
from .base import BaseService

logger = logging.getLogger(__name__)


class PaymentService(BaseService):
    """Service for the booking payment transition."""

    def __init__(
        self,
        db: Session,
        booking_repository: Optional[BookingRepository] = None,
    ) -> None:
        super().__init__(db)
        self.logger = logging.getLogger(__name__)
        self.booking_repository = (
            booking_repository or RepositoryFactory.create_booking_repository(db)
        )

    @BaseService.measure_operation("mark_paid")
    def mark_paid(self, booking_id: int) -> Booking:
        """
        Mark a pending (or confirmed) booking as paid.

        The booking row stays locked from the status check until commit, so
        two concurrent payments of the same booking resolve to one success.

        Raises:
            ValidationException: If the id is not positive or the booking
                is not in a payable status
            NotFoundException: If the booking does not exist
            ServiceException: If persistence fails
        """
        self.log_operation("mark_paid", booking_id=booking_id)

        if isinstance(booking_id, bool) or not isinstance(booking_id, int) or booking_id <= 0:
            raise ValidationException("Invalid booking ID")

        try:
            with self.transaction():
                booking = self.booking_repository.get_for_update_with_field(booking_id)
                if booking is None:
                    raise NotFoundException("Booking not found")

                if not booking.is_payable():
                    raise ValidationException(
                        f"Cannot update payment for booking with status: {booking.status}. "
                        "Only 'confirmed' or 'pending' bookings can be paid."
                    )

                booking.status = BookingStatus.PAID.value
        except RepositoryException as exc:
            raise ServiceException(f"Failed to update payment: {str(exc)}") from exc

        self.logger.info(f"Booking {booking_id} marked as paid")
        return booking
