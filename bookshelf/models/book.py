from __future__ import annotations

from typing import Callable, Optional

from sqlalchemy import Boolean, Float, Integer, Select, String, select
from sqlalchemy.orm import Mapped, mapped_column

from bookshelf.models.base import Base


class Book(Base):
    """SQLAlchemy model representing a book.

    ``id`` stays ``None`` until the first flush assigns it.
    """

    __tablename__ = "books"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    price: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    description: Mapped[Optional[str]] = mapped_column(String(2000), nullable=True)
    isbn: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)
    nb_of_page: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    illustrations: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)

    @classmethod
    def find_all(cls) -> Select[tuple[Book]]:
        """The ``findAllBooks`` named query."""
        return select(cls).order_by(cls.id)

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"Book(id={self.id!r}, title={self.title!r}, isbn={self.isbn!r})"


NAMED_QUERIES: dict[str, Callable[[], Select[tuple[Book]]]] = {
    "findAllBooks": Book.find_all,
}


def named_query(name: str) -> Select[tuple[Book]]:
    """Build the statement registered under ``name``."""
    try:
        factory = NAMED_QUERIES[name]
    except KeyError:
        raise KeyError(f"Unknown named query: {name!r}") from None
    return factory()
