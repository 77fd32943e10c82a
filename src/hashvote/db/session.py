"""Database session configuration."""

from __future__ import annotations

import logging
from collections.abc import Generator, Iterator
from contextlib import contextmanager
from typing import Any

from sqlalchemy import create_engine, event
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from hashvote.core.errors import StorageFailureError
from hashvote.core.settings import settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Declarative base shared by all ORM models."""


# Ensure model modules are imported so that metadata is populated when create_all runs.
import hashvote.models  # noqa: E402,F401


def enable_sqlite_foreign_keys(engine: Engine) -> None:
    """Turn on foreign key enforcement (and cascades) for SQLite connections."""
    if engine.dialect.name != "sqlite":
        return

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_connection: Any, _record: Any) -> None:
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def build_engine(url: str) -> Engine:
    """Create an engine configured the way the application expects."""
    options: dict[str, Any] = {"pool_pre_ping": True, "echo": settings.sql_debug}
    if settings.db_isolation_level:
        options["isolation_level"] = settings.db_isolation_level
    if url.startswith("sqlite"):
        options["connect_args"] = {"check_same_thread": False}
    engine = create_engine(url, **options)
    enable_sqlite_foreign_keys(engine)
    return engine


engine = build_engine(settings.sqlalchemy_database_url)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    """Yield a database session for dependency injection."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def atomic(session: Session) -> Iterator[Session]:
    """Run a block as a single transaction.

    Commits when the block completes and rolls back on any exception, so no
    partial write is ever visible. Storage errors are re-raised as
    ``StorageFailureError``; everything else propagates unchanged.
    """
    try:
        yield session
        session.commit()
    except SQLAlchemyError as exc:
        session.rollback()
        logger.warning("Transaction rolled back: %s", exc, exc_info=True)
        raise StorageFailureError("Storage transaction failed; nothing was applied") from exc
    except BaseException:
        session.rollback()
        raise


def dialect_insert(session: Session, entity: Any) -> Any:
    """Return an ``INSERT`` construct for the session's dialect.

    The returned construct supports ``on_conflict_do_nothing`` and
    ``on_conflict_do_update``.
    """
    dialect = session.get_bind().dialect.name
    if dialect == "postgresql":
        return postgresql.insert(entity)
    if dialect == "sqlite":
        return sqlite.insert(entity)
    raise NotImplementedError(f"Upserts are not supported on {dialect!r}")
