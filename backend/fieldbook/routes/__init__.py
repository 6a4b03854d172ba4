"""HTTP routers mounted by fieldbook.main."""

from . import auth, bookings, fields, health, payments

__all__ = ["auth", "bookings", "fields", "health", "payments"]
