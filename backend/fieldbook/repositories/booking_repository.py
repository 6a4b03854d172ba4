# backend/fieldbook/repositories/booking_repository.py
"""
Booking Repository for the field booking API.

Holds the slot-overlap query used by the booking core and the joined
lookup used by the payment transition.
"""

from datetime import date, time
import logging
from typing import List, Optional, cast

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from ..core.exceptions import RepositoryException
from ..models.booking import ACTIVE_STATUSES, Booking
from .base_repository import BaseRepository

logger = logging.getLogger(__name__)


class BookingRepository(BaseRepository[Booking]):
    """Repository for Booking data access."""

    def __init__(self, db: Session):
        super().__init__(db, Booking)
        self.logger = logging.getLogger(__name__)

    def get_overlapping_bookings(
        self,
        field_id: int,
        booking_date: date,
        start_time: time,
        end_time: time,
    ) -> List[Booking]:
        """
        Active bookings on field_id/booking_date whose slot intersects [start_time, end_time).

        Two half-open intervals overlap iff new.start < existing.end and
        new.end > existing.start, so back-to-back slots do not conflict.
        """
        try:
            return cast(
                List[Booking],
                self.db.query(Booking)
                .filter(
                    Booking.field_id == field_id,
                    Booking.booking_date == booking_date,
                    Booking.status.in_(ACTIVE_STATUSES),
                    Booking.start_time < end_time,
                    Booking.end_time > start_time,
                )
                .order_by(Booking.start_time)
                .all(),
            )
        except SQLAlchemyError as e:
            self.logger.error(f"Error getting overlapping bookings: {str(e)}")
            raise RepositoryException(f"Failed to check availability: {str(e)}")

    def get_for_update_with_field(self, booking_id: int) -> Optional[Booking]:
        """Load a booking under a row lock with its field eagerly joined."""
        try:
            return cast(
                Optional[Booking],
                self.db.query(Booking)
                .options(joinedload(Booking.field))
                .filter(Booking.id == booking_id)
                .with_for_update(of=Booking)
                .first(),
            )
        except SQLAlchemyError as e:
            self.logger.error(f"Error getting booking {booking_id}: {str(e)}")
            raise RepositoryException(f"Failed to check booking: {str(e)}")

    def has_bookings_for_field(self, field_id: int) -> bool:
        return self.exists(field_id=field_id)
