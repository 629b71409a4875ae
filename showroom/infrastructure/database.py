"""Database configuration and session management.

Provides the process-wide async SQLAlchemy engine and session factory.
Both are created on first use and reused for the life of the process.
"""

import threading

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import declarative_base

from showroom.infrastructure.config import settings

# Base class for models
Base = declarative_base()

_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None
_init_lock = threading.Lock()


def enable_sqlite_foreign_keys(engine: AsyncEngine) -> None:
    """Turn on foreign key enforcement for every SQLite connection."""

    @event.listens_for(engine.sync_engine, "connect")
    def _set_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def get_engine(database_url: str | None = None) -> AsyncEngine:
    """Get the shared async engine, creating it on first call.

    Subsequent calls return the same engine and ignore ``database_url``.

    Args:
        database_url: Override for ``settings.database_url`` on first call.

    Returns:
        The process-wide AsyncEngine.
    """
    global _engine, _session_factory
    if _engine is not None:
        return _engine

    with _init_lock:
        if _engine is None:
            url = database_url or settings.database_url
            options: dict = {"echo": settings.debug}
            if not url.startswith("sqlite"):
                options["pool_pre_ping"] = True
            _engine = create_async_engine(url, **options)
            if url.startswith("sqlite"):
                enable_sqlite_foreign_keys(_engine)
            _session_factory = async_sessionmaker(
                _engine,
                class_=AsyncSession,
                expire_on_commit=False,
            )
    return _engine


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Get the session factory bound to the shared engine."""
    get_engine()
    assert _session_factory is not None
    return _session_factory


async def create_tables() -> None:
    """Create database tables if they don't exist."""
    # Register table metadata before create_all.
    from showroom.infrastructure import models  # noqa: F401

    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def dispose_engine() -> None:
    """Close pooled connections and forget the shared engine."""
    global _engine, _session_factory
    with _init_lock:
        engine = _engine
        _engine = None
        _session_factory = None
    if engine is not None:
        await engine.dispose()
