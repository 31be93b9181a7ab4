"""Book request/response schemas."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from bookshelf.models.book import Book

# Integer range accepted for ids and numeric fields (32-bit signed).
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


class BookIn(BaseModel):
    """Request body for create and update.

    ``id`` is accepted but never used: storage assigns ids on create and
    the path id wins on update. ``title`` may be null here; the service
    rejects it with a readable message.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: int | None = None
    title: str | None = None
    year: int = Field(0, ge=INT_MIN, le=INT_MAX)
    number_of_pages: int = Field(0, alias="numberOfPages", ge=INT_MIN, le=INT_MAX)

    def to_model(self) -> Book:
        return Book(title=self.title, year=self.year, number_of_pages=self.number_of_pages)


class BookOut(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    title: str
    year: int
    number_of_pages: int = Field(alias="numberOfPages")
