# backend/fieldbook/api/dependencies/__init__.py
"""
Central export point for all dependencies.

This module re-exports all dependencies from submodules
for convenient access throughout the application.
"""

from .auth import get_current_principal, get_token_service, require_admin, require_user
from .database import get_db
from .services import (
    get_auth_service,
    get_booking_service,
    get_clock,
    get_field_service,
    get_payment_service,
)

__all__ = [
    # Auth
    "get_current_principal",
    "get_token_service",
    "require_admin",
    "require_user",
    # Database
    "get_db",
    # Services
    "get_auth_service",
    "get_booking_service",
    "get_clock",
    "get_field_service",
    "get_payment_service",
]
