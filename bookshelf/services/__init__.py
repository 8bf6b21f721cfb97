from .book_service import BookService, get_book_service
from .contract import BookCatalog

__all__ = ["BookCatalog", "BookService", "get_book_service"]
