# bookcatalog/main.py
import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from .catalog import CatalogCache, catalog_router
from .catalog.router import validation_error_handler
from .config import Settings, settings as default_settings
from .storage import CatalogStore


def create_app(
    catalog: Optional[CatalogCache] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """Build the API around ``catalog``, or around a fresh empty one."""
    settings = settings or default_settings
    logging.getLogger("bookcatalog").setLevel(settings.LOG_LEVEL)

    if catalog is None:
        catalog = CatalogCache(CatalogStore(), enabled=settings.CACHE_ENABLED)

    app = FastAPI(
        title=settings.TITLE,
        description=(
            "Book catalogue keyed by ISBN, with a read cache kept "
            "consistent with the store on every write."
        ),
        version="1.0.0",
    )
    app.state.catalog = catalog
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.include_router(catalog_router)

    @app.get("/")
    def health_check():
        return {"status": "ok", "books": len(catalog.store)}

    return app


app = create_app()
