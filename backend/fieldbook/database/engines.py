"""Database engine factory."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

_POSTGRES_CONNECT_ARGS: dict[str, Any] = {
    "keepalives": 1,
    "keepalives_idle": 15,
    "keepalives_interval": 5,
    "keepalives_count": 3,
    "connect_timeout": 5,
    "application_name": "fieldbook",
}


def _add_pool_events(engine: Engine) -> None:
    @event.listens_for(engine, "connect")
    def _on_connect(_dbapi_connection: Any, _connection_record: Any) -> None:
        logger.debug("Database connection established")

    @event.listens_for(engine, "invalidate")
    def _on_invalidate(_dbapi_connection: Any, _connection_record: Any, exception: Any) -> None:
        logger.warning(
            "Database connection invalidated: %s",
            str(exception) if exception else "unknown",
        )


def build_engine(db_url: str, *, echo: bool = False) -> Engine:
    """
    Create an engine for db_url.

    PostgreSQL gets keepalive connect args and pre-ping; SQLite (local runs
    and tests) is made usable across FastAPI's worker threads.
    """
    url = make_url(db_url)
    if url.get_backend_name() == "sqlite":
        kwargs: dict[str, Any] = {"connect_args": {"check_same_thread": False}}
        if url.database in (None, "", ":memory:"):
            kwargs["poolclass"] = StaticPool
        engine = create_engine(url, echo=echo, future=True, **kwargs)
    else:
        engine = create_engine(
            url,
            echo=echo,
            future=True,
            pool_pre_ping=True,
            connect_args=dict(_POSTGRES_CONNECT_ARGS),
        )
    _add_pool_events(engine)
    logger.info("Database engine created for %s", url.render_as_string(hide_password=True))
    return engine
