"""SQLAlchemy ORM models — one file per table."""

from bookshelf.models.book import Book

__all__ = ["Book"]
