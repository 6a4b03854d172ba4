# backend/fieldbook/core/enums.py
"""
Core enums for the field booking API.
"""

from enum import Enum


class RoleName(str, Enum):
    """
    Role tags carried in access tokens.

    Roles are coarse: any route that requires USER also admits ADMIN.
    """

    USER = "user"
    ADMIN = "admin"
