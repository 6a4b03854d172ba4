"""Request and response schemas for registration and login."""

from pydantic import EmailStr

from ._strict_base import RequestModel, StrictModel


class RegisterRequest(RequestModel):
    username: str
    email: EmailStr
    password: str


class LoginRequest(RequestModel):
    # Not EmailStr: any unknown address must fail as bad credentials, not bad input.
    email: str
    password: str


class AuthUserPayload(StrictModel):
    email: str
    token: str


class AuthResponse(StrictModel):
    """Envelope returned by register and login."""

    message: str
    user: AuthUserPayload
