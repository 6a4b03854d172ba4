# backend/fieldbook/main.py
"""
Application factory and server entry point.

Nothing is constructed at import time: create_app() receives (or builds)
its settings and session factory and stores them on app.state, where
the request dependencies read them.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
import logging
import sys
from typing import AsyncGenerator, Optional

from fastapi import FastAPI
from pydantic import ValidationError
from sqlalchemy.orm import sessionmaker
import uvicorn

from . import __version__
from .auth import TokenService
from .core.config import Settings, get_settings
from .database import build_engine, create_session_factory
from .errors import register_error_handlers
from .middleware.timing import TimingMiddleware
from .routes import auth as auth_routes
from .routes import bookings as booking_routes
from .routes import fields as field_routes
from .routes import health as health_routes
from .routes import payments as payment_routes

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)


@asynccontextmanager
async def app_lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup/shutdown without deprecated events."""
    logger.info("Field booking API starting up...")
    yield
    engine = getattr(app.state, "engine", None)
    if engine is not None:
        engine.dispose()
        logger.info("Database engine disposed")
    logger.info("Field booking API shut down")


def create_app(
    settings: Optional[Settings] = None,
    session_factory: Optional[sessionmaker] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Process configuration; loaded from the environment if omitted
        session_factory: Session factory for request-scoped sessions; an
            engine is built from settings.database_url if omitted
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Field Booking API",
        description="Book sports fields by the hour",
        version=__version__,
        lifespan=app_lifespan,
    )

    app.state.settings = settings
    app.state.token_service = TokenService.from_settings(settings)
    if session_factory is None:
        engine = build_engine(settings.database_url)
        app.state.engine = engine
        session_factory = create_session_factory(engine)
    app.state.session_factory = session_factory

    register_error_handlers(app)
    app.add_middleware(TimingMiddleware)

    app.include_router(health_routes.router)
    app.include_router(auth_routes.router)
    app.include_router(field_routes.router)
    app.include_router(booking_routes.router)
    app.include_router(payment_routes.router)

    return app


def run() -> None:
    """Console entry point: validate configuration, then serve."""
    configure_logging()
    try:
        settings = get_settings()
    except ValidationError as exc:
        logger.error(f"Failed to load configuration: {exc}")
        sys.exit(1)

    logging.getLogger().setLevel(settings.log_level)
    logger.info(f"Server running on port {settings.app_port}")
    uvicorn.run(
        create_app(settings),
        host=settings.app_host,
        port=settings.app_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
