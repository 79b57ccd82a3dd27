"""Database client for SQLite/PostgreSQL connections."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from legal_case_service.config import Settings
from .models import Base

logger = logging.getLogger(__name__)


class DatabaseClient:
    """Async database client for SQLAlchemy."""

    def __init__(self, settings: Settings):
        """Initialize database engine and session factory."""
        self.database_url = settings.database_url

        # For SQLite, use NullPool to avoid connection issues
        # For PostgreSQL, use default pool
        engine_kwargs = {"echo": settings.log_level.upper() == "DEBUG"}
        if "sqlite" in self.database_url:
            engine_kwargs["poolclass"] = NullPool

        self.engine = create_async_engine(self.database_url, **engine_kwargs)

        self.async_session_maker = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

        logger.info(f"Database client initialized with URL: {self.database_url}")

    async def verify_connection(self):
        """Verify the database answers a trivial query."""
        async with self.engine.begin() as conn:
            await conn.execute(text("SELECT 1"))
        logger.info("Database connection verified")

    async def create_tables(self):
        """Create all database tables."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables created")

    @asynccontextmanager
    async def session_scope(self) -> AsyncIterator[AsyncSession]:
        """Open a session that is rolled back on error and always closed."""
        async with self.async_session_maker() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise
            finally:
                await session.close()

    async def close(self):
        """Close database engine."""
        await self.engine.dispose()
        logger.info("Database client closed")
