# backend/fieldbook/services/auth_service.py
"""
Authentication Service for the field booking API.

Handles user registration and credential checks. Routes never touch
password hashes or tokens directly; they receive an AuthResult.
"""

from dataclasses import dataclass
import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..auth import (
    DUMMY_HASH_FOR_TIMING_ATTACK,
    TokenService,
    get_password_hash,
    verify_password,
)
from ..core.enums import RoleName
from ..core.exceptions import (
    ConflictException,
    RepositoryException,
    UnauthorizedException,
    ValidationException,
)
from ..models.user import User
from ..repositories.factory import RepositoryFactory
from ..repositories.user_repository import UserRepository
from .base import BaseService

logger = logging.getLogger(__name__)

MIN_USERNAME_LENGTH = 3
MIN_PASSWORD_LENGTH = 6


@dataclass(frozen=True)
class AuthResult:
    """A user together with a freshly issued access token."""

    user: User
    token: str


class AuthService(BaseService):
    """Service for handling authentication operations."""

    def __init__(
        self,
        db: Session,
        token_service: TokenService,
        user_repository: Optional[UserRepository] = None,
    ) -> None:
        super().__init__(db)
        self.logger = logging.getLogger(__name__)
        self.token_service = token_service
        self.user_repository = user_repository or RepositoryFactory.create_user_repository(db)

    @BaseService.measure_operation("register_user")
    def register_user(
        self,
        username: str,
        email: str,
        password: str,
        role: RoleName = RoleName.USER,
    ) -> AuthResult:
        """
        Register a new user and issue a token.

        Args:
            username: Display name, at least 3 characters
            email: Unique email address
            password: Plain text password (will be hashed)
            role: Role stored on the account

        Raises:
            ValidationException: If username or password is too short
            ConflictException: If the email is already registered
        """
        self.log_operation("register_user", email=email, role=role.value)

        if len(username) < MIN_USERNAME_LENGTH:
            raise ValidationException(
                f"Username must be at least {MIN_USERNAME_LENGTH} characters"
            )
        if len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationException(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
            )

        if self.user_repository.email_exists(email):
            self.logger.warning(f"Registration failed - email already exists: {email}")
            raise ConflictException("Email already registered")

        hashed_password = get_password_hash(password)

        try:
            with self.transaction():
                user = self.user_repository.create(
                    username=username,
                    email=email,
                    hashed_password=hashed_password,
                    role=role.value,
                )
        except RepositoryException as exc:
            # A concurrent registration can win the race past email_exists.
            if isinstance(exc.__cause__, IntegrityError):
                raise ConflictException("Email already registered") from exc
            raise

        self.logger.info(f"Registered {role.value} account {user.id} for {email}")
        return AuthResult(user=user, token=self._issue_token(user))

    @BaseService.measure_operation("authenticate")
    def authenticate(self, email: str, password: str) -> AuthResult:
        """
        Verify credentials and issue a token.

        Unknown email and wrong password raise the same error, and both
        paths run one bcrypt verification.

        Raises:
            UnauthorizedException: If the credentials do not match
        """
        self.logger.info(f"Authentication attempt for user: {email}")

        user = self.user_repository.get_by_email(email)
        if user is None:
            verify_password(password, DUMMY_HASH_FOR_TIMING_ATTACK)
            self.logger.warning(f"Authentication failed - user not found: {email}")
            raise UnauthorizedException("Invalid email or password")

        if not verify_password(password, user.hashed_password):
            self.logger.warning(f"Authentication failed - incorrect password: {email}")
            raise UnauthorizedException("Invalid email or password")

        self.logger.info(f"Successful authentication for user: {email}")
        return AuthResult(user=user, token=self._issue_token(user))

    def _issue_token(self, user: User) -> str:
        return self.token_service.create_access_token(
            user_id=user.id,
            email=user.email,
            role=user.role,
        )
