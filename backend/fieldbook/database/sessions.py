"""Session factory and request-scoped session dependency."""

from __future__ import annotations

from typing import Generator

from fastapi import Request
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker


def create_session_factory(engine: Engine) -> sessionmaker:
    """Build the sessionmaker the application hands out per request."""
    return sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)


def get_db(request: Request) -> Generator[Session, None, None]:
    """FastAPI dependency - one session per request from the app's factory."""
    session_factory: sessionmaker = request.app.state.session_factory
    db = session_factory()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
