"""Schemas for the payment transition."""

from pydantic import StrictInt

from ..models.booking import Booking
from ._strict_base import RequestModel, StrictModel
from .booking import format_time


class PaymentRequest(RequestModel):
    booking_id: StrictInt


class PaymentDetail(StrictModel):
    booking_id: int
    user_id: int
    field_id: int
    field_name: str
    booking_date: str
    start_time: str
    end_time: str
    total_price: int
    status: str

    @classmethod
    def from_booking(cls, booking: Booking) -> "PaymentDetail":
        return cls(
            booking_id=booking.id,
            user_id=booking.user_id,
            field_id=booking.field_id,
            field_name=booking.field.name,
            booking_date=booking.booking_date.isoformat(),
            start_time=format_time(booking.start_time),
            end_time=format_time(booking.end_time),
            total_price=booking.total_price,
            status=booking.status,
        )


class PaymentResponse(StrictModel):
    message: str
    payment: PaymentDetail
