"""
Database engine, session factory, and metadata shared across the application.
"""

from sqlalchemy.orm import DeclarativeMeta, declarative_base

from .engines import build_engine
from .sessions import create_session_factory, get_db

Base: DeclarativeMeta = declarative_base()

__all__ = [
    "Base",
    "build_engine",
    "create_session_factory",
    "get_db",
]
