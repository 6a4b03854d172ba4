"""Pydantic request and response schemas."""

from ._strict_base import MessageResponse
from .booking import BookingCreate, BookingCreatedResponse, BookingResponse
from .field import FieldEnvelope, FieldListResponse, FieldRequest, FieldResponse
from .payment import PaymentDetail, PaymentRequest, PaymentResponse
from .user import AuthResponse, AuthUserPayload, LoginRequest, RegisterRequest

__all__ = [
    "AuthResponse",
    "AuthUserPayload",
    "BookingCreate",
    "BookingCreatedResponse",
    "BookingResponse",
    "FieldEnvelope",
    "FieldListResponse",
    "FieldRequest",
    "FieldResponse",
    "LoginRequest",
    "MessageResponse",
    "PaymentDetail",
    "PaymentRequest",
    "PaymentResponse",
    "RegisterRequest",
]
