from __future__ import annotations

from typing import Optional


class BookServiceError(Exception):
    """Base class for errors raised by the book service and its clients."""

    code = "book_service_error"

    def __init__(self, message: str, *, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def as_detail(self) -> dict[str, str]:
        return {"code": self.code, "message": self.message}


class BookNotFoundError(BookServiceError, LookupError):
    """The given identity does not resolve to a stored book."""

    code = "book_not_found"

    def __init__(self, book_id: Optional[int]) -> None:
        if book_id is None:
            message = "Book has no identity; it was never persisted."
        else:
            message = f"Book {book_id} not found."
        super().__init__(message, status_code=404)
        self.book_id = book_id


class BookAlreadyPersistedError(BookServiceError, ValueError):
    """``create_book`` was called with a book that already carries an identity."""

    code = "book_already_persisted"

    def __init__(self, book_id: int) -> None:
        super().__init__(
            f"Book already has identity {book_id}; use update_book instead.",
            status_code=409,
        )
        self.book_id = book_id
