"""Database session management."""

from __future__ import annotations

import ssl
from collections.abc import Iterator
from contextlib import contextmanager
from functools import lru_cache
from typing import TYPE_CHECKING

from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel

from trustguard_db.errors import StorageError
from trustguard_utils import get_logger, get_settings

if TYPE_CHECKING:
    from sqlalchemy import Engine

log = get_logger("trustguard_db.client")


def _create_ssl_context() -> ssl.SSLContext | None:
    """Create SSL context from DATABASE_CA_PATH, if configured."""
    settings = get_settings()
    ca_path = settings.database_ca_path

    if ca_path is None:
        return None
    if not ca_path.exists():
        log.warning("database_ca_not_found", path=str(ca_path))
        return None

    ssl_context = ssl.create_default_context(cafile=str(ca_path))
    ssl_context.verify_mode = ssl.CERT_REQUIRED
    return ssl_context


@lru_cache(maxsize=1)
def get_engine() -> Engine:
    """Get cached SQLAlchemy engine.

    SQLite URLs share a single connection so in-memory databases survive
    across sessions; anything else gets a pooled engine.
    """
    settings = get_settings()
    if settings.database_url is None:
        raise StorageError.database_url_missing()

    database_url = settings.database_url.get_secret_value()

    if database_url.startswith("sqlite"):
        log.debug("database_engine_sqlite")
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

    connect_args: dict[str, ssl.SSLContext] = {}
    ssl_context = _create_ssl_context()
    if ssl_context:
        connect_args["ssl"] = ssl_context
        log.info("database_ssl_enabled")
    else:
        log.warning("database_ssl_disabled")

    return create_engine(
        database_url,
        pool_size=5,
        max_overflow=10,
        pool_timeout=30,
        pool_pre_ping=True,
        connect_args=connect_args,
    )


def init_db() -> None:
    """Create missing tables. Migrations own the schema in production."""
    SQLModel.metadata.create_all(get_engine())


@contextmanager
def get_session() -> Iterator[Session]:
    """Get database session with automatic cleanup.

    Usage:
        with get_session() as session:
            profile = session.get(UserProfile, user_id)
    """
    engine = get_engine()
    with Session(engine) as session:
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
