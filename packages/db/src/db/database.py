# This project was developed with assistance from AI tools.
"""Async engine, connection pool and session factory.

The engine (and the pool it owns) is process-wide. It is created once by
``get_db_service()`` and handed to consumers explicitly; nothing below
opens a connection until a session is used.
"""

import logging

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import declarative_base

from .config import DatabaseSettings, db_settings

logger = logging.getLogger(__name__)

Base = declarative_base()


class DatabaseService:
    """Owns the async engine and the session factory bound to it."""

    def __init__(self, settings: DatabaseSettings):
        engine_kwargs = {"echo": settings.SQL_ECHO, "pool_pre_ping": True}
        if not settings.DATABASE_URL.startswith("sqlite"):
            engine_kwargs["pool_size"] = settings.DB_POOL_SIZE
            engine_kwargs["max_overflow"] = settings.DB_MAX_OVERFLOW
        self._engine: AsyncEngine = create_async_engine(settings.DATABASE_URL, **engine_kwargs)
        self._session_factory = async_sessionmaker(
            self._engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    @property
    def session_factory(self) -> async_sessionmaker[AsyncSession]:
        return self._session_factory

    async def health_check(self) -> tuple[bool, str]:
        """Run ``SELECT 1`` and report (healthy, message)."""
        try:
            async with self._engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except Exception as exc:
            logger.warning("Database health check failed: %s", exc)
            return False, "Database unreachable"
        return True, f"Connected ({self._engine.dialect.name})"

    async def dispose(self) -> None:
        """Close every pooled connection."""
        await self._engine.dispose()


_service: DatabaseService | None = None


def get_db_service() -> DatabaseService:
    """Return the process-wide DatabaseService, creating it on first use."""
    global _service  # noqa: PLW0603
    if _service is None:
        _service = DatabaseService(db_settings)
    return _service
