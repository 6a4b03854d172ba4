from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
import logging
from typing import Any, Dict, Optional, cast

import jwt
from jwt import PyJWTError
from passlib.context import CryptContext

from .core.config import Settings

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# Pre-computed bcrypt hash for timing attack prevention.
# Verified against when the email is unknown so both login failure paths cost one bcrypt round.
DUMMY_HASH_FOR_TIMING_ATTACK = "$2b$12$LQv3c1yqBWVHxkd0LHAkCOYz6TtxMQJqhN8/X4.V4ferVKnNaOuJi"

_HMAC_ALGORITHMS = {"HS256", "HS384", "HS512"}


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hashed password.

    Args:
        plain_password: The plain text password
        hashed_password: The hashed password to compare against

    Returns:
        bool: True if password matches, False otherwise
    """
    try:
        return bool(pwd_context.verify(plain_password, hashed_password))
    except Exception as e:
        logger.error(f"Error verifying password: {str(e)}")
        return False


def get_password_hash(password: str) -> str:
    """Hash a password using bcrypt."""
    hashed = pwd_context.hash(password)
    return str(hashed)


@dataclass(frozen=True)
class UserPrincipal:
    """Identity resolved from a verified access token."""

    user_id: int
    email: str
    role: str


class InvalidTokenError(Exception):
    """Raised when a token cannot be decoded or lacks required claims."""


class MissingUserIdError(InvalidTokenError):
    """Raised when a verified token carries no integer user_id claim."""


class TokenService:
    """
    Issues and verifies signed, time-limited access tokens.

    Payload claims: user_id, email, role, iat, exp.
    """

    def __init__(self, secret: str, algorithm: str = "HS256", expire_hours: int = 24) -> None:
        if algorithm not in _HMAC_ALGORITHMS:
            raise ValueError(f"Unsupported token algorithm: {algorithm}")
        self._secret = secret
        self.algorithm = algorithm
        self.expire_delta = timedelta(hours=expire_hours)

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenService":
        return cls(
            secret=settings.jwt_secret.get_secret_value(),
            algorithm=settings.jwt_algorithm,
            expire_hours=settings.access_token_expire_hours,
        )

    def create_access_token(
        self,
        user_id: int,
        email: str,
        role: str,
        expires_delta: Optional[timedelta] = None,
    ) -> str:
        now = datetime.now(timezone.utc)
        to_encode: Dict[str, Any] = {
            "user_id": user_id,
            "email": email,
            "role": role,
            "iat": now,
            "exp": now + (expires_delta or self.expire_delta),
        }
        return jwt.encode(to_encode, self._secret, algorithm=self.algorithm)

    def decode_access_token(self, token: str) -> UserPrincipal:
        """
        Verify signature and expiry and resolve the caller's identity.

        Raises:
            InvalidTokenError: If the token is malformed, expired, signed with
                another key or algorithm, or carries no integer user_id
        """
        try:
            payload = cast(
                Dict[str, Any],
                jwt.decode(
                    token,
                    self._secret,
                    algorithms=[self.algorithm],
                    options={"require": ["exp", "iat"]},
                ),
            )
        except PyJWTError as exc:
            raise InvalidTokenError(str(exc)) from exc

        user_id = payload.get("user_id")
        if isinstance(user_id, bool) or not isinstance(user_id, int):
            raise MissingUserIdError("user_id not found in token")

        email = payload.get("email")
        role = payload.get("role")
        return UserPrincipal(
            user_id=user_id,
            email=email if isinstance(email, str) else "",
            role=role if isinstance(role, str) else "",
        )
