"""SQLAlchemy engine, session factory and transactional scope.

This is the single point of database connection configuration.  Any
SQLAlchemy URL works; SQLite (file or in-memory) is the default.

Every CLI command runs inside one ``session_scope()``: it commits when
the block finishes and rolls back when anything raises, so each use
case is all-or-nothing.
"""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import Generator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from ims.infrastructure.persistence.orm import Base
from ims.logging_config import get_logger

logger = get_logger("infrastructure.database")

_engine: Engine | None = None
_SessionFactory: sessionmaker[Session] | None = None


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def init_engine_from_url(database_url: str, echo: bool = False) -> Engine:
    """Initialize the module-level engine and session factory.

    Calling it again replaces the previous engine.
    """
    global _engine, _SessionFactory

    url = make_url(database_url)
    kwargs: dict = {"echo": echo}

    if url.get_backend_name() == "sqlite":
        kwargs["connect_args"] = {"check_same_thread": False}
        if url.database in (None, "", ":memory:"):
            # one shared connection, otherwise each session sees an empty database
            kwargs["poolclass"] = StaticPool
        else:
            Path(url.database).parent.mkdir(parents=True, exist_ok=True)
    else:
        kwargs["pool_pre_ping"] = True

    if _engine is not None:
        _engine.dispose()

    _engine = create_engine(url, **kwargs)
    if url.get_backend_name() == "sqlite":
        event.listen(_engine, "connect", _enable_sqlite_foreign_keys)

    _SessionFactory = sessionmaker(bind=_engine, expire_on_commit=False)

    logger.info(
        "engine_initialized",
        extra={"dialect": url.get_backend_name(), "echo": echo},
    )
    return _engine


def get_engine() -> Engine:
    if _engine is None:
        raise RuntimeError("Engine not initialized. Call init_engine_from_url() first.")
    return _engine


def get_session() -> Session:
    if _SessionFactory is None:
        raise RuntimeError("Engine not initialized. Call init_engine_from_url() first.")
    return _SessionFactory()


@contextmanager
def session_scope() -> Generator[Session, None, None]:
    """Provide a transactional scope around a series of operations.

    Usage:
        with session_scope() as session:
            repo = SqlProductRepository(session)
            ...
    """
    session = get_session()
    logger.debug("transaction_started")
    try:
        yield session
        session.commit()
        logger.debug("transaction_committed")
    except Exception as exc:
        session.rollback()
        logger.warning(
            "transaction_rolled_back",
            extra={"exc_type": type(exc).__name__, "exc_message": str(exc)},
        )
        raise
    finally:
        session.close()


def create_tables() -> None:
    """Create every table that does not exist yet."""
    Base.metadata.create_all(get_engine())
    logger.info("tables_created", extra={"tables": sorted(Base.metadata.tables)})


def reset_engine() -> None:
    """Dispose of the engine. FOR TESTING ONLY."""
    global _engine, _SessionFactory
    if _engine is not None:
        _engine.dispose()
    _engine = None
    _SessionFactory = None
