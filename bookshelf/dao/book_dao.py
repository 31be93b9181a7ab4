"""BookDAO — books table operations (SQLAlchemy Core)."""

from __future__ import annotations

from sqlalchemy import Row, delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from bookshelf.dao.base import BaseDAO, StorageError
from bookshelf.models.book import Book

_books = Book.__table__


def _to_book(row: Row) -> Book:
    """Map a ``books`` row to a detached Book record."""
    return Book(
        id=row.id,
        title=row.title,
        year=row.publication_year,
        number_of_pages=row.pages,
    )


def _column_values(book: Book) -> dict:
    """Mutable column values of *book*, keyed by table column name."""
    return {
        "title": book.title,
        "publication_year": book.year,
        "pages": book.number_of_pages,
    }


class BookDAO(BaseDAO[Book]):
    """SQL-backed book storage.

    Every method issues a single parameterized statement through the
    caller's session and returns plain, session-independent records.
    No validation happens here.
    """

    model = Book

    # ── read ──────────────────────────────────────────────────────────────

    async def list_all(self, session: AsyncSession) -> list[Book]:
        """Return every book in id order; empty list if the table is empty."""
        stmt = select(_books).order_by(_books.c.id)
        result = await self._execute(session, stmt, operation="list_all")
        return [_to_book(row) for row in result]

    async def find_by_id(self, session: AsyncSession, book_id: int) -> Book | None:
        stmt = select(_books).where(_books.c.id == book_id)
        result = await self._execute(session, stmt, operation="find_by_id")
        row = result.first()
        return _to_book(row) if row is not None else None

    # ── write ─────────────────────────────────────────────────────────────
    #
    # Writes commit before returning.

    async def insert(self, session: AsyncSession, book: Book) -> int:
        """Insert *book* and return the id assigned by the store.

        ``book.id`` is ignored. Raises :class:`StorageError` when the
        store reports no generated id.
        """
        stmt = insert(_books).values(**_column_values(book)).returning(_books.c.id)
        result = await self._execute(session, stmt, operation="insert")
        new_id = result.scalar_one_or_none()
        if new_id is None:
            raise StorageError("insert failed, no id obtained")
        await self._commit(session, operation="insert")
        return new_id

    async def update_by_id(self, session: AsyncSession, book_id: int, book: Book) -> int:
        """Replace title, year and page count of row *book_id*.

        Returns the affected row count (0 when no such id).
        """
        stmt = update(_books).where(_books.c.id == book_id).values(**_column_values(book))
        result = await self._execute(session, stmt, operation="update_by_id")
        count = result.rowcount
        await self._commit(session, operation="update_by_id")
        return count

    async def delete_by_id(self, session: AsyncSession, book_id: int) -> int:
        """Delete row *book_id*; returns the affected row count."""
        stmt = delete(_books).where(_books.c.id == book_id)
        result = await self._execute(session, stmt, operation="delete_by_id")
        count = result.rowcount
        await self._commit(session, operation="delete_by_id")
        return count
