"""
Pydantic schema definitions for the catalog HTTP layer.

``BookRequest`` is the body accepted by ``POST /books`` and
``PUT /books/{isbn}``. It only carries the fields a client may set;
identity, audit fields and version stay with the stored record. Field
constraints here are the whole of input validation: the store and the
cache never check shapes themselves.
"""

from typing import Dict, Optional

from pydantic import BaseModel, Field, field_validator

from ..models import Book


class BookRequest(BaseModel):
    """Client-supplied book fields.

    ``isbn``, ``title`` and ``author`` must be non-blank and ``price``
    strictly positive. ``publisher`` is optional.
    """

    isbn: str = Field(description="The book ISBN must be defined.")
    title: str = Field(description="The book title must be defined.")
    author: str = Field(description="The book author must be defined.")
    price: float = Field(gt=0, description="The book price must be greater than zero.")
    publisher: Optional[str] = None

    @field_validator("isbn", "title", "author")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    def to_book(self) -> Book:
        return Book.of(
            isbn=self.isbn,
            title=self.title,
            author=self.author,
            price=self.price,
            publisher=self.publisher,
        )


class ValidationErrors(BaseModel):
    """Per-field messages returned with a 400 response."""

    errors: Dict[str, str]
