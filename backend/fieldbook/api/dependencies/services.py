# backend/fieldbook/api/dependencies/services.py
"""
Service layer dependencies for dependency injection.

This module provides factory functions that create service instances
with their required dependencies properly injected.
"""

from datetime import datetime
import logging
from typing import Callable

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from ...auth import TokenService
from ...services.auth_service import AuthService
from ...services.booking_service import BookingService
from ...services.field_service import FieldService
from ...services.payment_service import PaymentService
from .auth import get_token_service
from .database import get_db

logger = logging.getLogger(__name__)


def get_clock(request: Request) -> Callable[[], datetime]:
    """Clock used for "now" comparisons; tests may pin it on app.state."""
    clock: Callable[[], datetime] = getattr(request.app.state, "clock", datetime.now)
    return clock


def get_auth_service(
    db: Session = Depends(get_db),
    token_service: TokenService = Depends(get_token_service),
) -> AuthService:
    """Get AuthService instance with proper dependencies."""
    return AuthService(db, token_service)


def get_field_service(db: Session = Depends(get_db)) -> FieldService:
    return FieldService(db)


def get_booking_service(
    db: Session = Depends(get_db),
    clock: Callable[[], datetime] = Depends(get_clock),
) -> BookingService:
    """
    Get BookingService instance.

    Usage in routes:
        booking_service: BookingService = Depends(get_booking_service)
    """
    return BookingService(db, clock=clock)


def get_payment_service(db: Session = Depends(get_db)) -> PaymentService:
    return PaymentService(db)
