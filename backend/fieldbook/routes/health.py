# backend/fieldbook/routes/health.py
"""
Service banner and health check endpoints.
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .. import __version__
from ..api.dependencies.database import get_db

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])

SERVICE_NAME = "Field Booking API"


class BannerResponse(BaseModel):
    message: str
    version: str


class HealthResponse(BaseModel):
    status: str
    database: str


@router.get("/", response_model=BannerResponse)
def root() -> BannerResponse:
    return BannerResponse(message=SERVICE_NAME, version=__version__)


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"description": "Database unavailable"}},
)
def health_check(db: Session = Depends(get_db)):
    """
    Health check endpoint.

    Pings the database with a trivial query; 503 when it is unreachable.
    """
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.error(f"Health check database ping failed: {exc}")
        return JSONResponse({"error": "Database unavailable"}, status_code=503)
    return HealthResponse(status="healthy", database="connected")
