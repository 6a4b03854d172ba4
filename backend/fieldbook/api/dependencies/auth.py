# backend/fieldbook/api/dependencies/auth.py
"""
Authentication and authorization dependencies.

The caller's identity comes from the bearer token's claims alone; no
user row is loaded. Roles are coarse: require_user admits admins too.
"""

import logging
from typing import Awaitable, Callable, Optional

from fastapi import Depends, Request

from ...auth import InvalidTokenError, MissingUserIdError, TokenService, UserPrincipal
from ...core.enums import RoleName
from ...core.exceptions import ForbiddenException, UnauthorizedException

logger = logging.getLogger(__name__)

PrincipalDependency = Callable[..., Awaitable[UserPrincipal]]


def get_token_service(request: Request) -> TokenService:
    """Token service configured on the application at startup."""
    token_service: TokenService = request.app.state.token_service
    return token_service


def _extract_bearer_token(authorization: Optional[str]) -> str:
    if not authorization:
        raise UnauthorizedException("unauthorized")

    parts = authorization.split(" ")
    if len(parts) != 2 or parts[0] != "Bearer" or not parts[1]:
        raise UnauthorizedException("invalid token")
    return parts[1]


async def get_current_principal(
    request: Request,
    token_service: TokenService = Depends(get_token_service),
) -> UserPrincipal:
    """
    Resolve the authenticated caller from the Authorization header.

    Raises:
        UnauthorizedException: Missing header, malformed header, bad
            signature, expired token, or no integer user_id claim
    """
    token = _extract_bearer_token(request.headers.get("Authorization"))
    try:
        return token_service.decode_access_token(token)
    except MissingUserIdError as exc:
        raise UnauthorizedException(str(exc)) from exc
    except InvalidTokenError as exc:
        logger.debug(f"Rejected access token: {exc}")
        raise UnauthorizedException("invalid or expired token") from exc


def require_roles(*roles: RoleName, message: str) -> PrincipalDependency:
    """Ensure the caller's token carries one of the provided roles."""

    allowed = {role.value for role in roles}

    async def checker(
        principal: UserPrincipal = Depends(get_current_principal),
    ) -> UserPrincipal:
        if principal.role not in allowed:
            logger.info(f"User {principal.user_id} with role {principal.role!r} denied")
            raise ForbiddenException(message)
        return principal

    return checker


require_user = require_roles(
    RoleName.USER,
    RoleName.ADMIN,
    message="access forbidden - user role required",
)

require_admin = require_roles(
    RoleName.ADMIN,
    message="access forbidden - admin role required",
)
