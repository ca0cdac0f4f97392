"""In-memory book catalogue with a read-through / write-through cache."""

from .errors import BookAlreadyExistsError, BookNotFoundError, CatalogError
from .models import Book
from .storage import CatalogStore
from .catalog.cache import CacheRegion, CatalogCache

__all__ = [
    "Book",
    "BookAlreadyExistsError",
    "BookNotFoundError",
    "CacheRegion",
    "CatalogCache",
    "CatalogError",
    "CatalogStore",
]
