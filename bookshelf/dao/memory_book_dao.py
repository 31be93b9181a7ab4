"""InMemoryBookDAO — process-local book storage with the BookDAO contract.

Used when ``BOOKSHELF_STORAGE=memory`` and in tests that should not need a
database. The ``session`` argument is accepted for signature compatibility
and ignored.
"""

from __future__ import annotations

import asyncio
from typing import Any

from bookshelf.dao.base import BaseDAO
from bookshelf.models.book import Book


class InMemoryBookDAO(BaseDAO[Book]):
    model = Book

    def __init__(self, books: list[Book] | None = None) -> None:
        self._books: list[Book] = []
        self._next_id = 1
        self._lock = asyncio.Lock()
        for book in books or []:
            self._store(book)

    def _store(self, book: Book) -> int:
        record = book.copy()
        record.id = self._next_id
        self._next_id += 1
        self._books.append(record)
        return record.id

    def _index_of(self, book_id: int) -> int | None:
        for i, book in enumerate(self._books):
            if book.id == book_id:
                return i
        return None

    # ── read ──────────────────────────────────────────────────────────────

    async def list_all(self, session: Any) -> list[Book]:
        return [book.copy() for book in self._books]

    async def find_by_id(self, session: Any, book_id: int) -> Book | None:
        i = self._index_of(book_id)
        return self._books[i].copy() if i is not None else None

    # ── write ─────────────────────────────────────────────────────────────

    async def insert(self, session: Any, book: Book) -> int:
        async with self._lock:
            return self._store(book)

    async def update_by_id(self, session: Any, book_id: int, book: Book) -> int:
        async with self._lock:
            i = self._index_of(book_id)
            if i is None:
                return 0
            record = book.copy()
            record.id = book_id
            self._books[i] = record
            return 1

    async def delete_by_id(self, session: Any, book_id: int) -> int:
        async with self._lock:
            i = self._index_of(book_id)
            if i is None:
                return 0
            del self._books[i]
            return 1
