"""Dependency injection — storage backend, session, and service singletons."""

from __future__ import annotations

import os
from collections.abc import AsyncGenerator

import structlog
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from bookshelf.core.database import create_engine
from bookshelf.dao.book_dao import BookDAO
from bookshelf.dao.memory_book_dao import InMemoryBookDAO
from bookshelf.services.book_service import BookService

log = structlog.get_logger("bookshelf.api")

STORAGE_BACKENDS = ("sql", "memory")

# ---------------------------------------------------------------------------
# Service singleton (rebound by init_storage)
# ---------------------------------------------------------------------------
_book_service = BookService(BookDAO())

# ---------------------------------------------------------------------------
# Engine / session factory (initialised by app lifespan)
# ---------------------------------------------------------------------------
_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None
_in_memory = False


def storage_backend() -> str:
    """Return the configured backend name (``BOOKSHELF_STORAGE``)."""
    return os.environ.get("BOOKSHELF_STORAGE", "sql").strip().lower()


def init_storage(
    backend: str | None = None, database_url: str | None = None
) -> AsyncEngine | None:
    """Select the storage backend and build its service. Called once at startup.

    Returns the engine for the SQL backend, ``None`` for the in-memory one.
    """
    global _engine, _session_factory, _book_service, _in_memory  # noqa: PLW0603
    backend = backend or storage_backend()
    if backend not in STORAGE_BACKENDS:
        raise ValueError(f"unknown storage backend {backend!r}, expected one of {STORAGE_BACKENDS}")

    if backend == "memory":
        _engine = None
        _session_factory = None
        _in_memory = True
        _book_service = BookService(InMemoryBookDAO())
    else:
        _engine = create_engine(database_url)
        _session_factory = async_sessionmaker(_engine, expire_on_commit=False)
        _in_memory = False
        _book_service = BookService(BookDAO())
    log.info("storage initialised", backend=backend)
    return _engine


async def dispose_engine() -> None:
    """Dispose the async engine, closing all pooled connections."""
    global _engine  # noqa: PLW0603
    if _engine is not None:
        await _engine.dispose()
        _engine = None


def set_session_factory(factory: async_sessionmaker[AsyncSession]) -> None:
    """Override session factory (for testing)."""
    global _session_factory, _in_memory  # noqa: PLW0603
    _session_factory = factory
    _in_memory = False


async def get_session() -> AsyncGenerator[AsyncSession | None, None]:
    """Yield a per-request session.

    DAO writes commit themselves; anything left uncommitted is rolled back
    when the session closes. The in-memory backend needs no session and
    gets ``None``.
    """
    if _in_memory:
        yield None
        return
    if _session_factory is None:
        raise RuntimeError("call init_storage() before handling requests")
    async with _session_factory() as session:
        yield session


def get_book_service() -> BookService:
    return _book_service
