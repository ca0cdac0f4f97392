"""
Domain errors raised by the catalogue store.

Only two failure kinds exist. Both are terminal for the operation that
raised them and travel unchanged through the cache layer; the HTTP
router is the only place that turns them into responses.
"""


class CatalogError(Exception):
    """Base class for catalogue failures tied to one ISBN."""

    def __init__(self, isbn: str, message: str):
        self.isbn = isbn
        self.message = message
        super().__init__(message)


class BookNotFoundError(CatalogError):
    def __init__(self, isbn: str):
        super().__init__(isbn, f"The book with ISBN {isbn} was not found.")


class BookAlreadyExistsError(CatalogError):
    def __init__(self, isbn: str):
        super().__init__(isbn, f"A book with ISBN {isbn} already exists.")
