from .book import BookBase, BookCreate, BookOut, BookUpdate

__all__ = ["BookBase", "BookCreate", "BookOut", "BookUpdate"]
