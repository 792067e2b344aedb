import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

from fastapi import Depends, Request
from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from app.core.config import Settings

logger = logging.getLogger(__name__)

Base = declarative_base()


class Database:
    """Owns the async engine and session factory for the lifetime of the process."""

    def __init__(self, settings: Settings):
        self.settings = settings

        engine_kwargs: dict[str, Any] = {"echo": settings.SQL_ECHO}
        if "postgresql" in settings.DATABASE_URL:
            engine_kwargs["pool_pre_ping"] = True

        self.engine = create_async_engine(settings.DATABASE_URL, **engine_kwargs)

        # SQLite ships with foreign keys disabled
        if "sqlite" in settings.DATABASE_URL:
            self._enable_sqlite_foreign_keys()

        self.SessionLocal = async_sessionmaker(self.engine, class_=AsyncSession, expire_on_commit=False)

    def _enable_sqlite_foreign_keys(self) -> None:
        @event.listens_for(self.engine.sync_engine, "connect")
        def set_sqlite_pragma(dbapi_conn, _connection_record):
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Transactional scope: commit when the block succeeds, roll back otherwise."""
        async with self.SessionLocal() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def ping(self) -> bool:
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        return True

    async def create_all(self) -> None:
        """Create every table registered on Base.metadata (models must be imported first)."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        logger.info("Disposing database engine")
        await self.engine.dispose()


def get_database(request: Request) -> Database:
    """Dependency returning the Database handle acquired at application startup."""
    return request.app.state.database


async def get_db(database: Database = Depends(get_database)) -> AsyncIterator[AsyncSession]:
    """
    Dependency that provides a database session.
    Session is committed after the request and rolled back on error.

    Usage:
        @router.get("/items")
        async def read_items(db: AsyncSession = Depends(get_db)):
            result = await db.execute(select(Item))
            return result.scalars().all()
    """
    async with database.session() as session:
        yield session
