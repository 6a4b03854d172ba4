# backend/fieldbook/errors.py
"""
Conversion of exceptions into JSON error bodies.

Every non-2xx response has the shape {"error": "<message>"}.
"""

import logging
from typing import Any, Dict, NoReturn, Optional

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .core.exceptions import DomainException, UnauthorizedException

logger = logging.getLogger(__name__)


def _message_from_detail(detail: Any) -> str:
    if isinstance(detail, str):
        return detail
    if isinstance(detail, dict):
        message = detail.get("error") or detail.get("message") or detail.get("detail")
        if isinstance(message, str):
            return message
    if detail is None:
        return ""
    return str(detail)


def _error_response(
    message: str,
    status_code: int,
    headers: Optional[Dict[str, str]] = None,
) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code, headers=headers)


def _format_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()) if item != "body")
        message = error.get("msg", "invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts)


def handle_domain_exception(exc: DomainException) -> NoReturn:
    """Convert domain exceptions to HTTP exceptions, logging server-side failures."""
    if exc.status_code >= 500:
        logger.error(f"{exc.__class__.__name__}: {exc.message}")
    if hasattr(exc, "to_http_exception"):
        raise exc.to_http_exception()
    raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc))


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(DomainException)
    async def domain_exception_handler(request: Request, exc: DomainException) -> JSONResponse:
        headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, UnauthorizedException) else None
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
        return _error_response(exc.message, exc.status_code, headers)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return _error_response(
            _message_from_detail(exc.detail),
            exc.status_code,
            getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return _error_response(
            f"Invalid request body: {_format_validation_errors(exc)}",
            status.HTTP_400_BAD_REQUEST,
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
        return _error_response(
            "Internal server error",
            status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
