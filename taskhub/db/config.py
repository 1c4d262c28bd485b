"""Database engine configuration."""
from typing import Any, Dict
import logging

from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import create_engine

logger = logging.getLogger(__name__)


def is_in_memory(database_url: str) -> bool:
    return database_url in ("sqlite://", "sqlite:///:memory:") or "mode=memory" in database_url


def create_db_engine(database_url: str = "sqlite://") -> Engine:
    """
    Create the SQLModel engine

    An in-memory SQLite database lives inside a single connection, so it is
    pinned with StaticPool; every session then sees the same data.
    """
    kwargs: Dict[str, Any] = {"echo": False}

    if database_url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if is_in_memory(database_url):
            kwargs["poolclass"] = StaticPool
            logger.info("Using in-memory SQLite database")
        else:
            logger.info(f"Using SQLite database: {database_url}")
    else:
        logger.info("Using external database")

    engine = create_engine(database_url, **kwargs)

    if database_url.startswith("sqlite") and not is_in_memory(database_url):
        @event.listens_for(engine, "connect")
        def set_sqlite_pragma(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA journal_mode=WAL")
            cursor.close()

    return engine
