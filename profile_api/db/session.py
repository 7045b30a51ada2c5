"""
SQLAlchemy database configuration and session management.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any, AsyncGenerator, AsyncIterator, Dict

from fastapi import Request
from sqlalchemy import MetaData
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool

from profile_api.core.config import Settings

logger = logging.getLogger(__name__)

# Naming convention for constraints and indexes
convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s"
}

metadata = MetaData(naming_convention=convention)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""
    metadata = metadata


def is_in_memory_sqlite(url: str) -> bool:
    return url.startswith("sqlite") and (url.endswith("://") or ":memory:" in url)


def engine_options(settings: Settings) -> Dict[str, Any]:
    """Build create_async_engine keyword arguments for the configured URL."""
    url = settings.database_url
    options: Dict[str, Any] = {
        "echo": settings.debug,
    }

    if url.startswith("sqlite"):
        options["connect_args"] = {"check_same_thread": False}
        # In-memory databases live on a single connection shared by every
        # session, so a rollback in one session undoes the others' writes
        if is_in_memory_sqlite(url):
            options["poolclass"] = StaticPool
        return options

    options.update({
        "pool_pre_ping": True,
        "pool_recycle": 300,
        "pool_size": 5,
        "max_overflow": 10,
        "pool_timeout": 30,
    })
    if "mysql" in url:
        options["connect_args"] = {
            "charset": "utf8mb4",
            "connect_timeout": 10,
        }
    return options


class Database:
    """Owns the async engine and session factory for one application."""

    def __init__(self, settings: Settings, engine: AsyncEngine | None = None):
        if not settings.database_url:
            raise RuntimeError("Database is not configured. Please set DATABASE_URL environment variable.")
        if is_in_memory_sqlite(settings.database_url) and not settings.is_testing:
            raise RuntimeError("In-memory SQLite is single-writer and only supported when APP_ENV=test")

        self.engine = engine or create_async_engine(settings.database_url, **engine_options(settings))
        self.session_maker = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    async def create_all(self) -> None:
        """Create any missing tables."""
        # Import models so they are registered on the metadata
        import profile_api.db.base  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables ensured")

    async def dispose(self) -> None:
        await self.engine.dispose()

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Open a session, rolling back on error and always closing it."""
        async with self.session_maker() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise
            finally:
                await session.close()


def get_database(request: Request) -> Database:
    """Dependency returning the Database attached to the running app."""
    return request.app.state.database


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency to get a database session.

    Yields:
        AsyncSession: Database session
    """
    database = get_database(request)
    async with database.session() as session:
        yield session


def utcnow() -> datetime:
    """Timezone-aware current time used for model defaults."""
    return datetime.now(timezone.utc)
