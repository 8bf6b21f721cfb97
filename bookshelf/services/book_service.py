from __future__ import annotations

import logging
from typing import Optional

from fastapi import Depends
from sqlalchemy import inspect
from sqlalchemy.orm import Session

from bookshelf.core.errors import BookAlreadyPersistedError, BookNotFoundError
from bookshelf.db.session import get_session, unit_of_work
from bookshelf.models.book import Book, named_query

logger = logging.getLogger(__name__)


class BookService:
    """CRUD access to books over an injected SQLAlchemy session.

    Each public method runs in its own unit of work: it either commits as a
    whole or rolls back and re-raises. Storage errors are not handled here.
    """

    def __init__(self, db: Session):
        self.db = db

    def _require_stored(self, book: Book) -> Book:
        stored = self.db.get(Book, book.id) if book.id is not None else None
        if stored is None:
            logger.warning("Book %s not found", book.id)
            raise BookNotFoundError(book.id)
        return stored

    def _reconcile(self, book: Book) -> Book:
        """Copy every column of ``book`` onto the stored record it identifies.

        Columns the caller never set are copied as ``None``.
        """
        stored = self._require_stored(book)
        if stored is book:
            return stored
        for column in inspect(Book).column_attrs:
            if column.key == "id":
                continue
            setattr(stored, column.key, getattr(book, column.key))
        return stored

    def find_books(self) -> list[Book]:
        with unit_of_work(self.db):
            return list(self.db.scalars(named_query("findAllBooks")).all())

    def find_book_by_id(self, book_id: int) -> Optional[Book]:
        with unit_of_work(self.db):
            return self.db.get(Book, book_id)

    def create_book(self, book: Book) -> Book:
        if book.id is not None:
            raise BookAlreadyPersistedError(book.id)

        with unit_of_work(self.db):
            self.db.add(book)
            self.db.flush()
        logger.info("Created book %s (%r)", book.id, book.title)
        return book

    def delete_book(self, book: Book) -> None:
        with unit_of_work(self.db):
            self.db.delete(self._require_stored(book))
        logger.info("Deleted book %s", book.id)

    def update_book(self, book: Book) -> Book:
        with unit_of_work(self.db):
            attached = self._reconcile(book)
            self.db.flush()
        logger.info("Updated book %s", attached.id)
        return attached


def get_book_service(db: Session = Depends(get_session)) -> BookService:
    return BookService(db)
