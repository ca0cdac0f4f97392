"""
Route definitions for the catalogue API.

Endpoints:
- GET    /books          : list every book
- GET    /books/{isbn}   : get one book
- POST   /books          : add a book (201)
- PUT    /books/{isbn}   : replace the mutable fields of a book
- DELETE /books/{isbn}   : remove a book (204)
- GET    /debug/cache    : hit/miss counters of the cache regions

Every route goes through the ``CatalogCache`` stored on
``app.state.catalog``; none of them touch the store directly.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, HTTPException, Request, Response
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..errors import BookAlreadyExistsError, BookNotFoundError
from ..models import Book
from .cache import CatalogCache
from .schemas import BookRequest, ValidationErrors


logger = logging.getLogger(__name__)

router = APIRouter(tags=["catalog"])


def get_catalog(request: Request) -> CatalogCache:
    return request.app.state.catalog


@router.get("/books", response_model=List[Book])
def list_books(catalog: CatalogCache = Depends(get_catalog)) -> List[Book]:
    logger.debug("Retrieving all books from the catalog")
    return catalog.list_books()


@router.get("/books/{isbn}", response_model=Book)
def get_book(isbn: str, catalog: CatalogCache = Depends(get_catalog)) -> Book:
    logger.debug("Retrieving book details for ISBN: %s", isbn)
    try:
        return catalog.get_book(isbn)
    except BookNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)


@router.post("/books", response_model=Book, status_code=201)
def add_book(req: BookRequest, catalog: CatalogCache = Depends(get_catalog)) -> Book:
    logger.debug("Adding book to catalog: %s", req.isbn)
    try:
        return catalog.add_book(req.to_book())
    except BookAlreadyExistsError as e:
        raise HTTPException(status_code=422, detail=e.message)


@router.put("/books/{isbn}", response_model=Book)
def edit_book(
    isbn: str,
    req: BookRequest,
    catalog: CatalogCache = Depends(get_catalog),
) -> Book:
    logger.debug("Updating book details for ISBN: %s", isbn)
    try:
        return catalog.edit_book(isbn, req.to_book())
    except BookNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)


@router.delete("/books/{isbn}", status_code=204)
def remove_book(isbn: str, catalog: CatalogCache = Depends(get_catalog)) -> Response:
    logger.debug("Removing book from catalog: %s", isbn)
    try:
        catalog.remove_book(isbn)
    except BookNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    return Response(status_code=204)


@router.get("/debug/cache")
def debug_cache(catalog: CatalogCache = Depends(get_catalog)) -> Dict[str, Any]:
    """Expose the cache region counters, e.g. to check hit rates by hand."""
    return catalog.stats()


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Answer 400 with one message per invalid field.

    The leading ``body``/``path`` segment is dropped from the error
    location so clients see plain field names.
    """
    errors: Dict[str, str] = {}
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ())]
        field = ".".join(loc[1:]) or (loc[0] if loc else "request")
        errors.setdefault(field, error.get("msg", "invalid value"))
    logger.debug("Rejected request to %s: %s", request.url.path, errors)
    return JSONResponse(
        status_code=400,
        content=jsonable_encoder(ValidationErrors(errors=errors)),
    )
