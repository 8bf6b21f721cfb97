"""HTTP client exposing the book operations to out-of-process callers."""

from __future__ import annotations

import logging
from typing import Optional, Union

import httpx

from bookshelf.core.errors import (
    BookAlreadyPersistedError,
    BookNotFoundError,
    BookServiceError,
)
from bookshelf.schemas.book import BookCreate, BookOut, BookUpdate

logger = logging.getLogger(__name__)

BookSnapshot = Union[BookCreate, BookOut]


class BookServiceClient:
    """Remote counterpart of ``BookService`` speaking to the ``/books`` API.

    Records are exchanged as pydantic snapshots: ``create_book`` takes a
    ``BookCreate`` (or an unsaved snapshot) and every call returns ``BookOut``.
    The ``http_client`` must carry the service's base URL.
    """

    def __init__(self, http_client: httpx.Client) -> None:
        self._http = http_client

    def _raise_for_status(self, response: httpx.Response) -> None:
        if response.is_success:
            return
        try:
            body = response.json()
        except ValueError:
            body = response.text
        detail = body.get("detail", body) if isinstance(body, dict) else body
        message = detail.get("message", detail) if isinstance(detail, dict) else detail
        raise BookServiceError(
            f"{response.request.method} {response.request.url.path} failed: {message}",
            status_code=response.status_code,
        )

    def find_books(self) -> list[BookOut]:
        response = self._http.get("/books/")
        self._raise_for_status(response)
        return [BookOut.model_validate(item) for item in response.json()]

    def find_book_by_id(self, book_id: int) -> Optional[BookOut]:
        response = self._http.get(f"/books/{book_id}")
        if response.status_code == 404:
            return None
        self._raise_for_status(response)
        return BookOut.model_validate(response.json())

    def create_book(self, book: BookSnapshot) -> BookOut:
        if isinstance(book, BookOut):
            raise BookAlreadyPersistedError(book.id)

        response = self._http.post("/books/", json=book.model_dump(mode="json", by_alias=True))
        self._raise_for_status(response)
        return BookOut.model_validate(response.json())

    def delete_book(self, book: BookSnapshot) -> None:
        book_id = getattr(book, "id", None)
        if book_id is None:
            raise BookNotFoundError(None)

        response = self._http.delete(f"/books/{book_id}")
        if response.status_code == 404:
            raise BookNotFoundError(book_id)
        self._raise_for_status(response)

    def update_book(self, book: BookSnapshot) -> BookOut:
        book_id = getattr(book, "id", None)
        if book_id is None:
            raise BookNotFoundError(None)

        payload = BookUpdate.model_validate(book.model_dump(exclude={"id"}))
        response = self._http.put(
            f"/books/{book_id}",
            json=payload.model_dump(mode="json", by_alias=True),
        )
        if response.status_code == 404:
            raise BookNotFoundError(book_id)
        self._raise_for_status(response)
        logger.debug("Updated remote book %s", book_id)
        return BookOut.model_validate(response.json())
