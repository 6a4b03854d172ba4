# backend/fieldbook/routes/auth.py
"""
Authentication routes.

Endpoints:
    POST /auth/register                  → User registration
    GET, POST /auth/login                → Email/password login
    POST /admin/auth/register            → Admin registration
"""

import logging

from fastapi import APIRouter, Depends, status

from ..api.dependencies.services import get_auth_service
from ..core.enums import RoleName
from ..core.exceptions import DomainException
from ..errors import handle_domain_exception
from ..schemas.user import AuthResponse, AuthUserPayload, LoginRequest, RegisterRequest
from ..services.auth_service import AuthResult, AuthService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


def _auth_response(message: str, result: AuthResult) -> AuthResponse:
    return AuthResponse(
        message=message,
        user=AuthUserPayload(email=result.user.email, token=result.token),
    )


def _register(payload: RegisterRequest, role: RoleName, auth_service: AuthService) -> AuthResponse:
    try:
        result = auth_service.register_user(
            username=payload.username,
            email=str(payload.email),
            password=payload.password,
            role=role,
        )
    except DomainException as e:
        handle_domain_exception(e)
    return _auth_response("User registered successfully", result)


@router.post(
    "/auth/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
)
def register(
    payload: RegisterRequest,
    auth_service: AuthService = Depends(get_auth_service),
) -> AuthResponse:
    """Register a regular user and return a token."""
    return _register(payload, RoleName.USER, auth_service)


@router.post(
    "/admin/auth/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
)
def register_admin(
    payload: RegisterRequest,
    auth_service: AuthService = Depends(get_auth_service),
) -> AuthResponse:
    """
    Register an administrator.

    Open like /auth/register; the role is forced to admin.
    """
    return _register(payload, RoleName.ADMIN, auth_service)


# GET with a JSON body is kept for existing clients; POST is the conventional form.
@router.api_route("/auth/login", methods=["GET", "POST"], response_model=AuthResponse)
def login(
    payload: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
) -> AuthResponse:
    try:
        result = auth_service.authenticate(payload.email, payload.password)
    except DomainException as e:
        handle_domain_exception(e)
    return _auth_response("Login successful", result)
