"""Schemas for booking creation."""

from datetime import time

from pydantic import StrictInt

from ..models.booking import Booking
from ..services.booking_service import duration_hours, format_duration
from ._strict_base import RequestModel, StrictModel


def format_time(value: time) -> str:
    return value.strftime("%H:%M")


class BookingCreate(RequestModel):
    """
    Booking request.

    Date and times stay strings here so BookingService can report which
    one is malformed.
    """

    field_id: StrictInt
    booking_date: str
    start_time: str
    end_time: str


class BookingResponse(StrictModel):
    booking_id: int
    field_id: int
    field_name: str
    location: str
    booking_date: str
    start_time: str
    end_time: str
    duration: str
    total_price: int
    status: str

    @classmethod
    def from_booking(cls, booking: Booking) -> "BookingResponse":
        return cls(
            booking_id=booking.id,
            field_id=booking.field_id,
            field_name=booking.field.name,
            location=booking.field.location,
            booking_date=booking.booking_date.isoformat(),
            start_time=format_time(booking.start_time),
            end_time=format_time(booking.end_time),
            duration=format_duration(duration_hours(booking.start_time, booking.end_time)),
            total_price=booking.total_price,
            status=booking.status,
        )


class BookingCreatedResponse(StrictModel):
    message: str
    booking: BookingResponse
