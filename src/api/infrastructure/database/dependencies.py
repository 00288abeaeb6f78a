"""Database engine and session factory management.

Provides lazily created, process-wide engines and session factories for
read and write operations.
"""

from __future__ import annotations

import threading

from sqlalchemy import Engine
from sqlalchemy.orm import Session, sessionmaker

from infrastructure.database.engines import (
    create_read_engine,
    create_write_engine,
    is_in_memory,
)
from infrastructure.observability import DefaultConnectionProbe
from infrastructure.settings import get_database_settings

# Module-level probe for observability
_probe = DefaultConnectionProbe()

# Module-level engine instances (created on first use)
_write_engine: Engine | None = None
_read_engine: Engine | None = None

# Module-level sessionmaker instances (created with engines)
_write_sessionmaker: sessionmaker[Session] | None = None
_read_sessionmaker: sessionmaker[Session] | None = None

# Thread lock for safe engine initialization
_engine_lock = threading.Lock()


def get_write_engine() -> Engine:
    """Get the write database engine (singleton).

    Creates engine on first call and caches for subsequent calls.
    Uses double-check locking for thread-safe initialization.
    Also creates and caches the sessionmaker for efficient session creation.

    Returns:
        Configured engine for write operations
    """
    global _write_engine, _write_sessionmaker
    if _write_engine is None:
        with _engine_lock:
            if _write_engine is None:
                settings = get_database_settings()
                _write_engine = create_write_engine(settings)
                _write_sessionmaker = sessionmaker(
                    _write_engine,
                    expire_on_commit=False,
                    class_=Session,
                )
                _probe.engine_created(
                    role="write", database=settings.connection_string
                )
    return _write_engine


def get_read_engine() -> Engine:
    """Get the read database engine (singleton).

    An in-memory SQLite database exists only inside one connection, so
    there the write engine is reused for reads.

    Returns:
        Configured engine for read operations
    """
    global _read_engine, _read_sessionmaker
    if _read_engine is None:
        settings = get_database_settings()
        shared = get_write_engine() if is_in_memory(settings) else None
        with _engine_lock:
            if _read_engine is None:
                _read_engine = shared or create_read_engine(settings)
                _read_sessionmaker = sessionmaker(
                    _read_engine,
                    expire_on_commit=False,
                    class_=Session,
                )
                _probe.engine_created(role="read", database=settings.connection_string)
    return _read_engine


def get_write_sessionmaker() -> sessionmaker[Session]:
    """Get the session factory bound to the write engine.

    Sessions are NOT auto-committing. Callers must explicitly manage
    transactions using ``with session.begin()``.
    """
    get_write_engine()
    assert _write_sessionmaker is not None
    return _write_sessionmaker


def get_read_sessionmaker() -> sessionmaker[Session]:
    """Get the session factory bound to the read engine.

    While not enforced at the database level (requires database role
    permissions), application code should use these sessions only for reads.
    """
    get_read_engine()
    assert _read_sessionmaker is not None
    return _read_sessionmaker


def close_database_connections() -> None:
    """Dispose of all engines.

    Should be called on shutdown to properly cleanup connections.
    Also resets sessionmakers to allow reinitialization.
    """
    global _write_engine, _read_engine, _write_sessionmaker, _read_sessionmaker

    with _engine_lock:
        if _write_engine is not None:
            _write_engine.dispose()
            _probe.engine_disposed(role="write")
            _write_engine = None
            _write_sessionmaker = None

        if _read_engine is not None:
            _read_engine.dispose()
            _probe.engine_disposed(role="read")
            _read_engine = None
            _read_sessionmaker = None
