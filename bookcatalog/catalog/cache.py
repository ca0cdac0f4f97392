"""
Read cache layered on top of the catalogue store.

Two named regions sit in front of :class:`~bookcatalog.storage.CatalogStore`:

* ``book``: one entry per ISBN holding the book detail.
* ``bookList``: a single snapshot of the whole collection.

:class:`CatalogCache` exposes the same five operations as the store and
applies a fixed policy around each call. Reads are read-through. Writes
push the new book into the ``book`` region (write-through), and every
mutation drops the ``bookList`` snapshot, since a collection snapshot
has no per-key entries to patch. Cache effects only follow a successful
store call; ``BookNotFoundError`` and ``BookAlreadyExistsError`` leave
both regions as they were and reach the caller untouched.

Store call and cache update happen under one re-entrant lock, so a
read-through population can never interleave with a delete of the same
ISBN.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Dict, Hashable, List, Optional

from ..models import Book
from ..storage import CatalogStore


logger = logging.getLogger(__name__)

BOOK_REGION = "book"
BOOK_LIST_REGION = "bookList"
# The list region holds a single snapshot; this is its only key.
BOOK_LIST_KEY = "all"


class CacheRegion:
    """A named key/value region with hit and miss accounting.

    ``None`` is never stored, so ``get`` returning ``None`` always means
    the key is absent. When ``enabled`` is false the region keeps
    nothing and every lookup is a miss.
    """

    def __init__(self, name: str, enabled: bool = True) -> None:
        self.name = name
        self.enabled = enabled
        self._entries: Dict[Hashable, Any] = {}
        self.hits = 0
        self.misses = 0
        self.puts = 0
        self.evictions = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def get(self, key: Hashable) -> Optional[Any]:
        value = self._entries.get(key)
        if value is None:
            self.misses += 1
            logger.debug("Cache miss: %s[%s]", self.name, key)
        else:
            self.hits += 1
            logger.debug("Cache hit: %s[%s]", self.name, key)
        return value

    def put(self, key: Hashable, value: Any) -> None:
        if value is None:
            raise ValueError(f"cannot cache None in region {self.name!r}")
        if not self.enabled:
            return
        self._entries[key] = value
        self.puts += 1
        logger.debug("Cache put: %s[%s]", self.name, key)

    def evict(self, key: Hashable) -> None:
        if self._entries.pop(key, None) is not None:
            self.evictions += 1
            logger.debug("Cache evict: %s[%s]", self.name, key)

    def clear(self) -> None:
        if self._entries:
            self.evictions += len(self._entries)
            logger.debug("Cache clear: %s (%s entries)", self.name, len(self._entries))
        self._entries.clear()

    def stats(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "enabled": self.enabled,
            "size": len(self._entries),
            "hits": self.hits,
            "misses": self.misses,
            "puts": self.puts,
            "evictions": self.evictions,
        }


class CatalogCache:
    """Cache-coordinated front for a :class:`CatalogStore`.

    Parameters
    ----------
    store : CatalogStore
        The authoritative store. Only this object touches it once wrapped.
    enabled : bool
        When false both regions stay empty and every call goes straight to
        the store. Error semantics are identical either way.
    """

    def __init__(self, store: CatalogStore, enabled: bool = True) -> None:
        self.store = store
        self.book_cache = CacheRegion(BOOK_REGION, enabled)
        self.book_list_cache = CacheRegion(BOOK_LIST_REGION, enabled)
        self._lock = threading.RLock()

    def list_books(self) -> List[Book]:
        """Return all books, served from the ``bookList`` snapshot when present.

        Returns
        -------
        List[Book]
            A new list on every call; mutating it never affects the cache.
        """
        with self._lock:
            snapshot = self.book_list_cache.get(BOOK_LIST_KEY)
            if snapshot is None:
                snapshot = tuple(self.store.list_books())
                self.book_list_cache.put(BOOK_LIST_KEY, snapshot)
            return list(snapshot)

    def get_book(self, isbn: str) -> Book:
        """Return the book for ``isbn``, reading through on a miss.

        A miss for an ISBN the store does not hold raises
        ``BookNotFoundError`` and leaves no entry behind.
        """
        with self._lock:
            book = self.book_cache.get(isbn)
            if book is None:
                book = self.store.get_book(isbn)
                self.book_cache.put(isbn, book)
            return book

    def add_book(self, book: Book) -> Book:
        with self._lock:
            added = self.store.add_book(book)
            self.book_cache.put(added.isbn, added)
            self.book_list_cache.evict(BOOK_LIST_KEY)
            return added

    def edit_book(self, isbn: str, patch: Book) -> Book:
        with self._lock:
            updated = self.store.edit_book(isbn, patch)
            self.book_cache.put(isbn, updated)
            self.book_list_cache.evict(BOOK_LIST_KEY)
            return updated

    def remove_book(self, isbn: str) -> None:
        with self._lock:
            self.store.remove_book(isbn)
            self.book_cache.evict(isbn)
            self.book_list_cache.evict(BOOK_LIST_KEY)

    def clear(self) -> None:
        """Drop every cached entry. The store is left alone."""
        with self._lock:
            self.book_cache.clear()
            self.book_list_cache.clear()

    def stats(self) -> Dict[str, Dict[str, Any]]:
        with self._lock:
            return {
                BOOK_REGION: self.book_cache.stats(),
                BOOK_LIST_REGION: self.book_list_cache.stats(),
            }
