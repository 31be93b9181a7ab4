"""Async database engine factory and declarative base."""

from __future__ import annotations

import os

from sqlalchemy import MetaData
from sqlalchemy.ext.asyncio import AsyncAttrs, AsyncEngine, create_async_engine
from sqlalchemy.orm import DeclarativeBase

DEFAULT_DATABASE_URL = "sqlite+aiosqlite:///./bookshelf.db"

# Naming convention for constraints
convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(AsyncAttrs, DeclarativeBase):
    """Base class for all ORM models."""

    metadata = MetaData(naming_convention=convention)


def database_url(override: str | None = None) -> str:
    """Return the configured database URL (``BOOKSHELF_DATABASE_URL``)."""
    return override or os.environ.get("BOOKSHELF_DATABASE_URL", DEFAULT_DATABASE_URL)


def create_engine(url: str | None = None) -> AsyncEngine:
    """Create a pooled async engine for *url*.

    SQLite gets the driver's default pool; server databases get a bounded
    pool with pre-ping so stale connections are replaced transparently.
    """
    url = database_url(url)
    if url.startswith("sqlite"):
        return create_async_engine(url)
    return create_async_engine(
        url,
        pool_pre_ping=True,
        pool_size=10,
        max_overflow=20,
        pool_recycle=1800,
    )


async def create_schema(engine: AsyncEngine) -> None:
    """Create missing tables. Idempotent; existing tables are left alone."""
    # models must be imported so their tables register on Base.metadata
    import bookshelf.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
