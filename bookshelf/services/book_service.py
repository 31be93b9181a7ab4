"""BookService — validation and orchestration on top of the book DAO."""

from __future__ import annotations

from typing import Protocol

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from bookshelf.models.book import Book
from bookshelf.services import ValidationError

log = structlog.get_logger("bookshelf.services.book")


class BookStore(Protocol):
    """Storage contract shared by BookDAO and InMemoryBookDAO."""

    async def list_all(self, session: AsyncSession | None) -> list[Book]: ...

    async def find_by_id(self, session: AsyncSession | None, book_id: int) -> Book | None: ...

    async def insert(self, session: AsyncSession | None, book: Book) -> int: ...

    async def update_by_id(
        self, session: AsyncSession | None, book_id: int, book: Book
    ) -> int: ...

    async def delete_by_id(self, session: AsyncSession | None, book_id: int) -> int: ...


def validate_book(book: Book) -> None:
    """Check the business rules for a book about to be written.

    Rules are checked in a fixed order (title, year, page count) and the
    first violation is raised as :class:`ValidationError`.
    """
    if book.title is None or not book.title.strip():
        raise ValidationError("Book title cannot be null/blank.")
    if book.year is None or book.year < 0:
        raise ValidationError("Year cannot be negative.")
    if book.number_of_pages is None or book.number_of_pages < 0:
        raise ValidationError("Number of pages cannot be negative.")


class BookService:
    """Stateless service for book CRUD.

    Storage errors from the DAO propagate unchanged; "not found" is
    reported as ``None`` or ``False``, never raised.
    """

    def __init__(self, book_dao: BookStore) -> None:
        self._book_dao = book_dao

    async def list_all(self, session: AsyncSession | None) -> list[Book]:
        return await self._book_dao.list_all(session)

    async def get_by_id(self, session: AsyncSession | None, book_id: int) -> Book | None:
        return await self._book_dao.find_by_id(session, book_id)

    async def create(self, session: AsyncSession | None, book: Book) -> int:
        """Validate and insert *book*; return the id assigned by storage."""
        validate_book(book)
        book_id = await self._book_dao.insert(session, book)
        log.info("book created", book_id=book_id)
        return book_id

    async def update(self, session: AsyncSession | None, book_id: int, book: Book) -> bool:
        """Validate *book* and replace the stored fields of *book_id*.

        Returns ``False`` when no book has that id.
        """
        validate_book(book)
        updated = await self._book_dao.update_by_id(session, book_id, book) > 0
        log.info("book update", book_id=book_id, updated=updated)
        return updated

    async def delete(self, session: AsyncSession | None, book_id: int) -> bool:
        deleted = await self._book_dao.delete_by_id(session, book_id) > 0
        log.info("book delete", book_id=book_id, deleted=deleted)
        return deleted
