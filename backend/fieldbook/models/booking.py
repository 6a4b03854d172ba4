# backend/fieldbook/models/booking.py
"""
Booking model for the field booking API.

A booking reserves the half-open interval [start_time, end_time) on one
field for one date. Bookings in an active status (pending, paid) never
overlap on the same field and date; PostgreSQL deployments enforce this
with the bookings_no_overlap_per_field exclusion constraint created by
the initial migration.
"""

from enum import Enum

from sqlalchemy import (
    CheckConstraint,
    Column,
    Date,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Time,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ..database import Base


class BookingStatus(str, Enum):
    """Booking lifecycle statuses."""

    PENDING = "pending"  # Default on creation
    # Accepted by the payment precondition but never assigned anywhere.
    CONFIRMED = "confirmed"
    PAID = "paid"


ACTIVE_STATUSES = (BookingStatus.PENDING.value, BookingStatus.PAID.value)
PAYABLE_STATUSES = (BookingStatus.PENDING.value, BookingStatus.CONFIRMED.value)

NO_OVERLAP_CONSTRAINT = "bookings_no_overlap_per_field"


class Booking(Base):
    """Reservation of a field time slot by a user."""

    __tablename__ = "bookings"

    id = Column("booking_id", Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.user_id"), nullable=False, index=True)
    field_id = Column(Integer, ForeignKey("fields.field_id"), nullable=False)

    booking_date = Column(Date, nullable=False)
    start_time = Column(Time, nullable=False)
    end_time = Column(Time, nullable=False)

    total_price = Column(Integer, nullable=False)
    status = Column(String(20), nullable=False, default=BookingStatus.PENDING.value)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    user = relationship("User", back_populates="bookings")
    field = relationship("Field", back_populates="bookings")

    __table_args__ = (
        CheckConstraint("end_time > start_time", name="ck_bookings_time_order"),
        CheckConstraint("total_price >= 0", name="ck_bookings_price_non_negative"),
        CheckConstraint(
            "status IN ('pending', 'confirmed', 'paid')",
            name="ck_bookings_status",
        ),
        Index("ix_bookings_field_date", "field_id", "booking_date"),
    )

    def is_payable(self) -> bool:
        return self.status in PAYABLE_STATUSES

    def __repr__(self) -> str:
        return (
            f"<Booking {self.id} field={self.field_id} {self.booking_date} "
            f"{self.start_time}-{self.end_time} {self.status}>"
        )
