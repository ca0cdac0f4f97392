# bookcatalog/models.py
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Book(BaseModel):
    """A single catalogue record, keyed by its ISBN.

    Instances are frozen: the store replaces records instead of mutating
    them, so a snapshot held by the cache can never change underneath it.
    The audit fields (``created_*``, ``last_modified_*``) and ``version``
    are carried as given; nothing in the catalogue rewrites them yet.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: Optional[int] = None
    isbn: str
    title: Optional[str] = None
    author: Optional[str] = None
    price: Optional[float] = None
    publisher: Optional[str] = None
    created_date: Optional[datetime] = None
    last_modified_date: Optional[datetime] = None
    created_by: Optional[str] = None
    last_modified_by: Optional[str] = None
    version: int = 0

    @classmethod
    def of(
        cls,
        isbn: str,
        title: str,
        author: str,
        price: float,
        publisher: Optional[str] = None,
    ) -> "Book":
        """Build a book with only the mandatory fields set."""
        return cls(isbn=isbn, title=title, author=author, price=price, publisher=publisher)
