"""books table."""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from bookshelf.core.database import Base


class Book(Base):
    __tablename__ = "books"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(Text)
    year: Mapped[int] = mapped_column("publication_year", Integer)
    number_of_pages: Mapped[int] = mapped_column("pages", Integer)

    def __repr__(self) -> str:
        return (
            f"Book(id={self.id!r}, title={self.title!r}, year={self.year!r}, "
            f"number_of_pages={self.number_of_pages!r})"
        )

    def copy(self) -> "Book":
        """Return a detached copy carrying the same column values."""
        return Book(
            id=self.id,
            title=self.title,
            year=self.year,
            number_of_pages=self.number_of_pages,
        )
