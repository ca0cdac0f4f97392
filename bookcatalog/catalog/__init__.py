"""
Catalog package for the book catalog API.

This package holds the read cache that sits in front of the store
(``cache``), the request schemas (``schemas``) and the route
definitions (``router``). The router only ever talks to a
``CatalogCache``; swapping the store for another backend means handing
a different store to the cache, not touching the routes.
"""

from .cache import CacheRegion, CatalogCache  # noqa: F401
from .router import router as catalog_router  # noqa: F401
