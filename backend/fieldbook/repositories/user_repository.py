# backend/fieldbook/repositories/user_repository.py
"""
User Repository for the field booking API.

Lookups used by registration and login.
"""

import logging
from typing import Optional, cast

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..core.exceptions import RepositoryException
from ..models.user import User
from .base_repository import BaseRepository

logger = logging.getLogger(__name__)


class UserRepository(BaseRepository[User]):
    """Repository for User data access."""

    def __init__(self, db: Session):
        super().__init__(db, User)
        self.logger = logging.getLogger(__name__)

    def get_by_email(self, email: str) -> Optional[User]:
        try:
            return cast(
                Optional[User],
                self.db.query(User).filter(User.email == email).first(),
            )
        except SQLAlchemyError as e:
            self.logger.error(f"Error getting user by email {email}: {str(e)}")
            raise RepositoryException(f"Failed to look up user: {str(e)}")

    def email_exists(self, email: str) -> bool:
        return self.exists(email=email)
