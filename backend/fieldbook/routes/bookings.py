# backend/fieldbook/routes/bookings.py
"""
Booking routes.

Endpoints:
    POST /bookings                       → Book a field slot (user or admin)
"""

import logging

from fastapi import APIRouter, Depends, status

from ..api.dependencies.auth import require_user
from ..api.dependencies.services import get_booking_service
from ..auth import UserPrincipal
from ..core.exceptions import DomainException
from ..errors import handle_domain_exception
from ..schemas.booking import BookingCreate, BookingCreatedResponse, BookingResponse
from ..services.booking_service import BookingService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/bookings", tags=["bookings"])


@router.post(
    "",
    response_model=BookingCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"description": "Malformed or past slot"},
        404: {"description": "Field not found"},
        409: {"description": "Slot overlaps an existing booking"},
    },
)
def create_booking(
    payload: BookingCreate,
    principal: UserPrincipal = Depends(require_user),
    booking_service: BookingService = Depends(get_booking_service),
) -> BookingCreatedResponse:
    """
    Create a pending booking for the caller.

    Price is the slot length in hours times the field's hourly price,
    truncated to a whole amount.
    """
    try:
        booking = booking_service.create_booking(
            user_id=principal.user_id,
            field_id=payload.field_id,
            booking_date=payload.booking_date,
            start_time=payload.start_time,
            end_time=payload.end_time,
        )
    except DomainException as e:
        handle_domain_exception(e)
    return BookingCreatedResponse(
        message="Booking created successfully",
        booking=BookingResponse.from_booking(booking),
    )
