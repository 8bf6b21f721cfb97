from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from bookshelf.core.errors import BookNotFoundError
from bookshelf.models.book import Book
from bookshelf.schemas.book import BookCreate, BookOut, BookUpdate
from bookshelf.services.book_service import BookService, get_book_service

router = APIRouter(prefix="/books", tags=["books"])


@router.get(
    "/",
    response_model=list[BookOut],
)
def list_books(
    service: BookService = Depends(get_book_service),
) -> list[BookOut]:
    """Return every stored book."""
    return [BookOut.model_validate(book) for book in service.find_books()]


@router.get(
    "/{book_id}",
    response_model=BookOut,
)
def get_book(
    book_id: int,
    service: BookService = Depends(get_book_service),
) -> BookOut:
    """Retrieve a single book by identifier."""
    book = service.find_book_by_id(book_id)
    if book is None:
        raise BookNotFoundError(book_id)
    return BookOut.model_validate(book)


@router.post(
    "/",
    status_code=status.HTTP_201_CREATED,
    response_model=BookOut,
)
def create_book(
    payload: BookCreate,
    service: BookService = Depends(get_book_service),
) -> BookOut:
    """Insert a new book; the identity is assigned by the store."""
    book = service.create_book(Book(**payload.model_dump()))
    return BookOut.model_validate(book)


@router.put(
    "/{book_id}",
    response_model=BookOut,
)
def update_book(
    book_id: int,
    payload: BookUpdate,
    service: BookService = Depends(get_book_service),
) -> BookOut:
    """Overwrite a stored book with the supplied copy."""
    book = service.update_book(Book(id=book_id, **payload.model_dump()))
    return BookOut.model_validate(book)


@router.delete(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
def delete_book(
    book_id: int,
    service: BookService = Depends(get_book_service),
) -> Response:
    """Remove a stored book."""
    service.delete_book(Book(id=book_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
