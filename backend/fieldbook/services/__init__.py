"""Service layer: business rules between routes and repositories."""

from .auth_service import AuthResult, AuthService
from .base import BaseService
from .booking_service import BookingService
from .field_service import FieldService
from .payment_service import PaymentService

__all__ = [
    "AuthResult",
    "AuthService",
    "BaseService",
    "BookingService",
    "FieldService",
    "PaymentService",
]
