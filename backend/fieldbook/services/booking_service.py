# backend/fieldbook/services/booking_service.py
"""
Booking Service for the field booking API.

Creates bookings for a field slot on a given date. The availability check
and the insert run in one transaction while the field row is locked, so
two concurrent requests for overlapping slots cannot both succeed. On
PostgreSQL the bookings_no_overlap_per_field exclusion constraint backs
this up and its violation surfaces as the same conflict.
"""

from datetime import date, datetime, time
import logging
import re
from typing import Callable, Optional, Tuple, Union

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..core.exceptions import (
    BookingConflictException,
    RepositoryException,
    ServiceException,
    ValidationException,
)
from ..models.booking import NO_OVERLAP_CONSTRAINT, Booking, BookingStatus
from ..repositories.booking_repository import BookingRepository
from ..repositories.factory import RepositoryFactory
from ..repositories.field_repository import FieldRepository
from .base import BaseService
from .field_service import FieldService

logger = logging.getLogger(__name__)

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M"
DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
TIME_PATTERN = re.compile(r"[0-9]{2}:[0-9]{2}")

GENERIC_CONFLICT_MESSAGE = "Field is already booked at the selected time"


def duration_hours(start_time: time, end_time: time) -> float:
    """Length of a same-day slot in fractional hours."""
    start = datetime.combine(date.min, start_time)
    end = datetime.combine(date.min, end_time)
    return (end - start).total_seconds() / 3600


def format_duration(hours: float) -> str:
    return f"{hours:.1f} hours"


def calculate_total_price(start_time: time, end_time: time, price_per_hour: int) -> int:
    """Hours times hourly price, truncated toward zero to whole currency units."""
    return int(duration_hours(start_time, end_time) * price_per_hour)


class BookingService(BaseService):
    """
    Service layer for booking creation.

    The clock is injectable so "now" can be pinned in tests; it must
    return a naive datetime in server local time.
    """

    def __init__(
        self,
        db: Session,
        clock: Callable[[], datetime] = datetime.now,
        booking_repository: Optional[BookingRepository] = None,
        field_repository: Optional[FieldRepository] = None,
        field_service: Optional[FieldService] = None,
    ) -> None:
        super().__init__(db)
        self.logger = logging.getLogger(__name__)
        self.clock = clock
        self.repository = booking_repository or RepositoryFactory.create_booking_repository(db)
        self.field_service = field_service or FieldService(db, field_repository=field_repository)

    def _parse_request(
        self,
        field_id: int,
        booking_date: str,
        start_time: str,
        end_time: str,
    ) -> Tuple[date, time, time]:
        """Validate the raw request values in order and return the parsed slot."""
        if isinstance(field_id, bool) or not isinstance(field_id, int) or field_id <= 0:
            raise ValidationException("Invalid field ID")

        try:
            parsed_date = self._parse_fixed(booking_date, DATE_PATTERN, DATE_FORMAT).date()
        except ValueError:
            raise ValidationException("Invalid booking date format. Use YYYY-MM-DD")

        try:
            parsed_start = self._parse_fixed(start_time, TIME_PATTERN, TIME_FORMAT).time()
        except ValueError:
            raise ValidationException("Invalid start time format. Use HH:MM")

        try:
            parsed_end = self._parse_fixed(end_time, TIME_PATTERN, TIME_FORMAT).time()
        except ValueError:
            raise ValidationException("Invalid end time format. Use HH:MM")

        if parsed_end <= parsed_start:
            raise ValidationException("End time must be after start time")

        # Only the start instant matters; a slot already under way is still "past".
        if datetime.combine(parsed_date, parsed_start) < self.clock():
            raise ValidationException("Cannot book in the past")

        return parsed_date, parsed_start, parsed_end

    @staticmethod
    def _parse_fixed(value: str, pattern: "re.Pattern[str]", fmt: str) -> datetime:
        """strptime that also rejects unpadded fields such as 2025-6-2 or 9:00."""
        if not isinstance(value, str) or not pattern.fullmatch(value):
            raise ValueError(f"{value!r} does not match {fmt}")
        return datetime.strptime(value, fmt)

    @staticmethod
    def _resolve_integrity_conflict(integrity_error: IntegrityError) -> bool:
        """Whether an IntegrityError comes from the per-field overlap constraint."""
        constraint_name: str = ""
        orig = getattr(integrity_error, "orig", None)
        diag = getattr(orig, "diag", None)

        if diag is not None:
            constraint_name = getattr(diag, "constraint_name", "") or ""

        if not constraint_name and orig is not None:
            if NO_OVERLAP_CONSTRAINT in str(orig):
                constraint_name = NO_OVERLAP_CONSTRAINT

        return constraint_name == NO_OVERLAP_CONSTRAINT

    def _raise_from_persistence_error(
        self, exc: Union[RepositoryException, ServiceException], field_id: int
    ) -> None:
        """
        Translate overlap-constraint violations into booking conflicts and
        surface anything else as a 500 carrying the raw database message.
        """
        cause = exc.__cause__
        if isinstance(cause, IntegrityError) and self._resolve_integrity_conflict(cause):
            self.logger.warning(f"Overlap constraint rejected booking on field {field_id}")
            raise BookingConflictException(
                message=GENERIC_CONFLICT_MESSAGE,
                details={"field_id": field_id},
            ) from exc
        if isinstance(exc, ServiceException):
            raise exc
        raise ServiceException(f"Failed to create booking: {str(exc)}") from exc

    @BaseService.measure_operation("create_booking")
    def create_booking(
        self,
        user_id: int,
        field_id: int,
        booking_date: str,
        start_time: str,
        end_time: str,
    ) -> Booking:
        """
        Create a pending booking for a free slot.

        Args:
            user_id: Authenticated caller
            field_id: Field to book
            booking_date: Date as YYYY-MM-DD
            start_time: Start as 24h HH:MM
            end_time: End as 24h HH:MM, same day, after start_time

        Returns:
            The persisted booking; its field loads from the session identity map

        Raises:
            ValidationException: If any input is malformed or in the past
            NotFoundException: If the field does not exist
            BookingConflictException: If an active booking overlaps the slot
            ServiceException: If persistence fails
        """
        self.log_operation(
            "create_booking",
            user_id=user_id,
            field_id=field_id,
            date=booking_date,
        )

        slot_date, slot_start, slot_end = self._parse_request(
            field_id, booking_date, start_time, end_time
        )

        try:
            with self.transaction():
                # Serializes concurrent bookings of the same field until commit.
                price_per_hour, _, _ = self.field_service.get_price_and_existence(
                    field_id, for_update=True
                )

                overlapping = self.repository.get_overlapping_bookings(
                    field_id, slot_date, slot_start, slot_end
                )
                if overlapping:
                    self.logger.info(
                        f"Slot {slot_date} {slot_start}-{slot_end} on field {field_id} "
                        f"overlaps booking {overlapping[0].id}"
                    )
                    raise BookingConflictException(
                        message=GENERIC_CONFLICT_MESSAGE,
                        details={"field_id": field_id},
                    )

                booking = self.repository.create(
                    user_id=user_id,
                    field_id=field_id,
                    booking_date=slot_date,
                    start_time=slot_start,
                    end_time=slot_end,
                    total_price=calculate_total_price(slot_start, slot_end, price_per_hour),
                    status=BookingStatus.PENDING.value,
                )
        except (RepositoryException, ServiceException) as exc:
            self._raise_from_persistence_error(exc, field_id)

        self.logger.info(f"Created booking {booking.id} for user {user_id}")
        return booking
