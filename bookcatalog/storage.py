# bookcatalog/storage.py
import logging
import threading
from typing import Dict, Iterable, List, NoReturn, Optional

from .errors import BookAlreadyExistsError, BookNotFoundError
from .models import Book


logger = logging.getLogger(__name__)


class CatalogStore:
    """In-memory source of truth: ISBN -> Book.

    Volatile and single-process. Each instance owns its own map, so tests
    and apps can build isolated stores.
    """

    def __init__(self, books: Optional[Iterable[Book]] = None) -> None:
        self._books: Dict[str, Book] = {}
        self._lock = threading.RLock()
        for book in books or ():
            self.add_book(book)

    def __len__(self) -> int:
        return len(self._books)

    def __contains__(self, isbn: object) -> bool:
        return isbn in self._books

    def list_books(self) -> List[Book]:
        with self._lock:
            books = list(self._books.values())
        logger.debug("Retrieved %s books from the catalog", len(books))
        return books

    def get_book(self, isbn: str) -> Book:
        logger.debug("Retrieving book details for ISBN: %s", isbn)
        with self._lock:
            book = self._books.get(isbn)
        if book is None:
            _not_found(isbn)
        return book

    def add_book(self, book: Book) -> Book:
        logger.debug("Adding book to catalog: %s", book.isbn)
        with self._lock:
            if book.isbn in self._books:
                logger.error("Book with ISBN %s already exists in the catalog", book.isbn)
                raise BookAlreadyExistsError(book.isbn)
            self._books[book.isbn] = book
        return book

    def edit_book(self, isbn: str, patch: Book) -> Book:
        """Replace the mutable fields of ``isbn`` with those of ``patch``.

        Identity, audit fields and version are kept from the stored record;
        the ISBN carried by ``patch`` is ignored.
        """
        logger.debug("Updating book details for ISBN: %s", isbn)
        with self._lock:
            existing = self._books.get(isbn)
            if existing is None:
                _not_found(isbn)
            updated = existing.model_copy(
                update={
                    "title": patch.title,
                    "author": patch.author,
                    "price": patch.price,
                    "publisher": patch.publisher,
                }
            )
            self._books[isbn] = updated
        return updated

    def remove_book(self, isbn: str) -> None:
        logger.debug("Removing book from catalog: %s", isbn)
        with self._lock:
            removed = self._books.pop(isbn, None)
        if removed is None:
            _not_found(isbn)


def _not_found(isbn: str) -> NoReturn:
    logger.error("Book with ISBN %s not found in the catalog", isbn)
    raise BookNotFoundError(isbn)
