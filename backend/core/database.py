from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from models.base import Base

logger = logging.getLogger(__name__)


def _is_memory_sqlite(url: str) -> bool:
    return url.startswith("sqlite") and ":memory:" in url


class DatabaseManager:
    """Async database manager with a single engine and session factory."""

    def __init__(self, database_url: str) -> None:
        self._database_url = database_url
        self._engine: Optional[AsyncEngine] = None
        self._sessionmaker: Optional[async_sessionmaker[AsyncSession]] = None

    async def init(self) -> None:
        """Initialize the async engine and sessionmaker if not already initialized."""
        if self._engine is not None:
            return

        logger.info("Initializing async database engine")
        engine_kwargs = {"echo": False, "future": True}
        if _is_memory_sqlite(self._database_url):
            # Every session must see the same in-memory database.
            engine_kwargs["poolclass"] = StaticPool
            engine_kwargs["connect_args"] = {"check_same_thread": False}
        self._engine = create_async_engine(self._database_url, **engine_kwargs)

        # SQLite does not enforce foreign keys (and so ON DELETE actions) unless asked.
        if self._database_url.startswith("sqlite+aiosqlite"):

            @event.listens_for(self._engine.sync_engine, "connect")
            def _set_sqlite_pragma(dbapi_connection, connection_record) -> None:  # type: ignore[override]  # pragma: no cover
                cursor = dbapi_connection.cursor()
                cursor.execute("PRAGMA foreign_keys=ON")
                try:
                    cursor.execute("PRAGMA journal_mode=WAL")
                except Exception:
                    # journal_mode may not be supported in all environments; ignore failures
                    logger.debug("SQLite WAL journal_mode not applied")
                finally:
                    cursor.close()

        self._sessionmaker = async_sessionmaker(
            self._engine,
            expire_on_commit=False,
            class_=AsyncSession,
        )
        logger.info("Async database engine and sessionmaker initialized")

    async def create_all(self) -> None:
        """Create every table registered on ``Base.metadata`` that does not exist yet."""
        if self._engine is None:
            raise RuntimeError("DatabaseManager is not initialized. Call init() first.")
        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        """Dispose of the engine and clear the sessionmaker."""
        if self._engine is not None:
            logger.info("Disposing async database engine")
            await self._engine.dispose()
            self._engine = None
            self._sessionmaker = None

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Async context manager yielding an AsyncSession.

        Rolls back on errors. Commits are owned by the persistence context, so
        anything still pending on a clean exit is committed here as well.
        """
        if self._sessionmaker is None:
            raise RuntimeError("DatabaseManager is not initialized. Call init() first.")

        session: AsyncSession = self._sessionmaker()
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    @property
    def engine(self) -> Optional[AsyncEngine]:
        return self._engine


_db_manager: Optional[DatabaseManager] = None


async def init_database(database_url: str) -> None:
    """Create and initialize the process-wide DatabaseManager used by the API."""
    global _db_manager

    if _db_manager is None:
        _db_manager = DatabaseManager(database_url)
    await _db_manager.init()


async def dispose_database() -> None:
    """Dispose the process-wide DatabaseManager."""
    global _db_manager

    if _db_manager is not None:
        await _db_manager.dispose()
        _db_manager = None


def get_database_manager() -> DatabaseManager:
    """Return the initialized DatabaseManager instance."""
    if _db_manager is None:
        raise RuntimeError("DatabaseManager is not initialized.")
    return _db_manager
