"""Database Session Manager — async engine, per-request sessions, error translation.

Invariants:
    - Every session auto-rolls-back on exception (no partial commits leak)
    - All SQLAlchemy exceptions surface as StorageError (core/errors.py)
    - SQLite connections enforce foreign keys and start transactions with an
      explicit BEGIN, so DDL is part of the transaction and rolls back with it

Design Decisions:
    - The manager is constructed by the lifespan hook and kept on app.state;
      get_db() reads it from the request, so tests can install their own
    - expire_on_commit=False: prevents lazy-load issues in async context
"""

import functools
import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy import event, text
from sqlalchemy.engine import Engine
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)

from techgear.core.errors import StorageError
from techgear.db.base import Base

logger = logging.getLogger(__name__)


def to_storage_error(exc: SQLAlchemyError, operation: str) -> StorageError:
    """Map a SQLAlchemy exception onto the StorageError taxonomy."""
    if isinstance(exc, IntegrityError):
        logger.error(f"DB integrity error during {operation}: {exc}")
        return StorageError("Integrity constraint violated", operation)
    if isinstance(exc, OperationalError):
        logger.error(f"DB operational error during {operation}: {exc}")
        return StorageError("Connection or operational error", operation)
    if isinstance(exc, DBAPIError):
        logger.error(f"DB driver error during {operation}: {exc}")
        return StorageError("Database driver error", operation)
    logger.error(f"SQLAlchemy error during {operation}: {exc}")
    return StorageError("Database operation failed", operation)


def storage_operation(operation: str):
    """Decorate a repository coroutine: roll back and raise StorageError on failure.

    The decorated method's instance must expose the session as ``self.db``.
    """
    def decorator(fn):
        @functools.wraps(fn)
        async def wrapper(self, *args, **kwargs):
            try:
                return await fn(self, *args, **kwargs)
            except SQLAlchemyError as e:
                await self.db.rollback()
                raise to_storage_error(e, operation) from e
        return wrapper
    return decorator


def configure_sqlite(engine: Engine) -> None:
    """Enable foreign keys and transactional DDL on every SQLite connection."""

    @event.listens_for(engine, "connect")
    def _on_connect(dbapi_connection, connection_record):
        # Disable the driver's implicit transaction handling; BEGIN is emitted below.
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine, "begin")
    def _on_begin(conn):
        conn.exec_driver_sql("BEGIN")


class DatabaseSessionManager:
    """Owns the async engine and hands out sessions with rollback-on-error."""

    def __init__(
        self,
        database_url: str,
        echo: bool = False,
        pool_size: int = 5,
        max_overflow: int = 10,
    ):
        engine_kwargs: dict = {"echo": echo}
        is_sqlite = database_url.startswith("sqlite")
        if not is_sqlite:
            engine_kwargs.update(
                pool_size=pool_size,
                max_overflow=max_overflow,
                pool_pre_ping=True,
                pool_recycle=3600,
            )
        self.engine = create_async_engine(database_url, **engine_kwargs)
        if is_sqlite:
            configure_sqlite(self.engine.sync_engine)
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            yield session
        except SQLAlchemyError as e:
            await session.rollback()
            raise to_storage_error(e, "session") from e
        finally:
            await session.close()

    async def create_schema(self) -> None:
        """Create all tables known to Base.metadata (development and tests)."""
        # Registers every model on Base.metadata.
        import techgear.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database schema ready")

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except StorageError as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def dispose(self) -> None:
        await self.engine.dispose()


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    db_manager: DatabaseSessionManager | None = getattr(
        request.app.state, "db_manager", None,
    )
    if not db_manager:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session
