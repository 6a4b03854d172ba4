# backend/fieldbook/routes/payments.py
"""
Payment routes.

Endpoints:
    POST /payments                       → Mark a booking as paid
"""

import logging

from fastapi import APIRouter, Depends

from ..api.dependencies.auth import require_user
from ..api.dependencies.services import get_payment_service
from ..auth import UserPrincipal
from ..core.exceptions import DomainException
from ..errors import handle_domain_exception
from ..schemas.payment import PaymentDetail, PaymentRequest, PaymentResponse
from ..services.payment_service import PaymentService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/payments", tags=["payments"])


@router.post("", response_model=PaymentResponse)
def pay_booking(
    payload: PaymentRequest,
    principal: UserPrincipal = Depends(require_user),
    payment_service: PaymentService = Depends(get_payment_service),
) -> PaymentResponse:
    # Any authenticated user may pay any booking; ownership is not checked.
    try:
        booking = payment_service.mark_paid(payload.booking_id)
    except DomainException as e:
        handle_domain_exception(e)
    logger.info(f"User {principal.user_id} paid booking {booking.id}")
    return PaymentResponse(
        message="Payment completed successfully",
        payment=PaymentDetail.from_booking(booking),
    )
