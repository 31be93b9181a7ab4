"""Generic base DAO — statement execution with uniform failure reporting."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

import structlog
from sqlalchemy import Executable, Result
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from bookshelf.core.database import Base

ModelT = TypeVar("ModelT", bound=Base)

log = structlog.get_logger("bookshelf.dao")


class StorageError(Exception):
    """Raised when the backing store cannot complete an operation.

    Wraps driver and SQLAlchemy errors so callers above the DAO layer
    never depend on SQLAlchemy's exception hierarchy.
    """


# sqlite3 raises OverflowError for integers wider than 64 bits.
_STORAGE_FAILURES = (SQLAlchemyError, OverflowError)


class BaseDAO(Generic[ModelT]):
    """Base data-access object. Subclasses set ``model`` class attribute."""

    model: type[ModelT]

    def _failed(self, operation: str, exc: Exception) -> StorageError:
        log.error(
            "storage operation failed",
            table=self.model.__tablename__,
            operation=operation,
            error=str(exc),
        )
        return StorageError(f"{operation} on {self.model.__tablename__} failed")

    async def _execute(
        self, session: AsyncSession, stmt: Executable, *, operation: str
    ) -> Result[Any]:
        """Execute *stmt*, translating data-access failures into StorageError."""
        try:
            return await session.execute(stmt)
        except _STORAGE_FAILURES as exc:
            raise self._failed(operation, exc) from exc

    async def _commit(self, session: AsyncSession, *, operation: str) -> None:
        """Commit the session's transaction as the last step of a write."""
        try:
            await session.commit()
        except SQLAlchemyError as exc:
            raise self._failed(operation, exc) from exc
