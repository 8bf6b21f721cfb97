from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence, runtime_checkable


@runtime_checkable
class BookCatalog(Protocol):
    """The five book operations, independent of how they are reached.

    ``BookService`` implements them in-process over a SQLAlchemy session;
    ``BookServiceClient`` implements them over HTTP. Records passed in and
    returned are detached snapshots for remote callers.
    """

    def find_books(self) -> Sequence[Any]: ...

    def find_book_by_id(self, book_id: int) -> Optional[Any]: ...

    def create_book(self, book: Any) -> Any: ...

    def delete_book(self, book: Any) -> None: ...

    def update_book(self, book: Any) -> Any: ...
