"""Database Session Manager — async connection pool with automatic rollback and health checks.

Invariants:
    - Every session rolls back on exception (no partial commits leak)
    - The pool is bounded (pool_size + max_overflow) and shared by all stores
    - SQLite connections always run with foreign keys enforced
    - is_foreign_key_violation() is the only code that knows engine error codes
    - STORAGE_ERRORS is everything a store catches and translates
    - Timestamps leave the database layer timezone-aware (UTC)

Design Decisions:
    - One manager constructed in the FastAPI lifespan and passed to each store
      at construction; there is no module-level singleton to look up
    - Sessions re-raise SQLAlchemy errors untouched: each store translates them
      into its own StoreError so the translation sits next to the statement
    - expire_on_commit=False: prevents lazy-load issues in async context
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import AsyncGenerator

from sqlalchemy import event, text
from sqlalchemy.exc import DBAPIError, SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)

from qanda.db.base import Base
import qanda.models  # noqa: F401  (populates Base.metadata)

logger = logging.getLogger(__name__)

# PostgreSQL SQLSTATE for foreign_key_violation
POSTGRES_FOREIGN_KEY_VIOLATION = "23503"
SQLITE_FOREIGN_KEY_VIOLATION = "SQLITE_CONSTRAINT_FOREIGNKEY"

# Connect and timeout failures reach the caller unwrapped by SQLAlchemy
# (asyncpg raises ConnectionRefusedError, an OSError)
STORAGE_ERRORS = (SQLAlchemyError, OSError, asyncio.TimeoutError)


def is_foreign_key_violation(exc: DBAPIError) -> bool:
    """True when the driver error behind `exc` signals a foreign key violation."""
    orig = exc.orig
    sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if sqlstate == POSTGRES_FOREIGN_KEY_VIOLATION:
        return True
    if getattr(orig, "sqlite_errorname", None) == SQLITE_FOREIGN_KEY_VIOLATION:
        return True
    # sqlite3 before 3.11 exposes no error name
    return "FOREIGN KEY constraint failed" in str(orig)


def format_timestamp(value: datetime) -> str:
    """ISO-8601 with an explicit offset. SQLite hands back naive UTC datetimes."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat()


def _enable_sqlite_foreign_keys(dbapi_connection, _connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class DatabaseSessionManager:
    """Manages async database sessions with pooling, rollback, and health checks."""

    def __init__(
        self, database_url: str, pool_size: int = 5, max_overflow: int = 0,
    ):
        engine_options: dict = {}
        if not database_url.startswith("sqlite"):
            engine_options = {
                "pool_size": pool_size,
                "max_overflow": max_overflow,
                "pool_pre_ping": True,
                "pool_recycle": 3600,
            }
        self.engine = create_async_engine(database_url, **engine_options)
        if self.engine.dialect.name == "sqlite":
            event.listen(
                self.engine.sync_engine, "connect", _enable_sqlite_foreign_keys,
            )
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
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def create_schema(self) -> None:
        """Create the questions and answers tables if they do not exist."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database schema ensured")

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def dispose(self) -> None:
        """Close every pooled connection."""
        await self.engine.dispose()
