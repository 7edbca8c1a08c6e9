"""Pytest fixtures for core query tests."""

import pytest_asyncio
from sqlalchemy.ext.asyncio import create_async_engine

from core.tables import metadata

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def db_conn():
    """
    Provide a connection to a fresh in-memory database with the schema.

    Everything runs inside one transaction that is rolled back afterwards.
    """
    engine = create_async_engine(TEST_DATABASE_URL)

    async with engine.connect() as conn:
        txn = await conn.begin()
        try:
            await conn.run_sync(metadata.create_all)
            yield conn
        finally:
            await txn.rollback()

    await engine.dispose()
