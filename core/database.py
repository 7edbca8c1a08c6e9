"""
SQLAlchemy async database client.

The engine is created lazily on first use and disposed by the application
lifespan. Connections are handed out per unit of work.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine, create_async_engine

from .config import get_database_url, is_sql_echo
from .tables import metadata  # noqa: F401 - exported for schema tooling

# Module-level engine (created on first use)
_engine: AsyncEngine | None = None


def _get_async_database_url() -> str:
    """
    Build the async driver URL from DATABASE_URL.

    postgresql://... becomes postgresql+asyncpg://...; URLs that already name a
    driver (e.g. sqlite+aiosqlite://) are used as-is.
    """
    database_url = get_database_url()
    if not database_url:
        raise ValueError("DATABASE_URL environment variable must be set")

    if database_url.startswith("postgresql://"):
        return database_url.replace("postgresql://", "postgresql+asyncpg://", 1)

    return database_url


def get_engine() -> AsyncEngine:
    """Get or create the async SQLAlchemy engine."""
    global _engine
    if _engine is None:
        database_url = _get_async_database_url()
        options = {"echo": is_sql_echo()}
        if database_url.startswith("postgresql"):
            options.update(
                pool_size=5,
                max_overflow=10,
                pool_timeout=30,
                pool_recycle=1800,  # Recycle connections every 30 minutes
            )
        _engine = create_async_engine(database_url, **options)
    return _engine


@asynccontextmanager
async def get_connection() -> AsyncGenerator[AsyncConnection, None]:
    """
    Get an async database connection from the pool.

    Usage:
        async with get_connection() as conn:
            teachers = await get_teachers_with_availability(conn, course_id)
    """
    engine = get_engine()
    async with engine.connect() as conn:
        yield conn


async def close_engine() -> None:
    """Close the engine and all connections. Call on shutdown."""
    global _engine
    if _engine is not None:
        await _engine.dispose()
        _engine = None


def is_configured() -> bool:
    """Check if database credentials are configured."""
    return bool(get_database_url())
