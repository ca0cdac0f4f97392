from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from bookcatalog.catalog.cache import CatalogCache
from bookcatalog.main import create_app
from bookcatalog.models import Book
from bookcatalog.storage import CatalogStore


@pytest.fixture
def store():
    return CatalogStore()


@pytest.fixture
def spy_store(store):
    """The real store wrapped so tests can count calls reaching it."""
    return MagicMock(wraps=store)


@pytest.fixture
def catalog(spy_store):
    return CatalogCache(spy_store)


@pytest.fixture
def client(catalog):
    return TestClient(create_app(catalog=catalog))


@pytest.fixture
def book():
    return Book.of("978-1", "A", "Ann Author", 9.9, "Polar")


@pytest.fixture
def audited_book():
    return Book(
        id=7,
        isbn="978-2",
        title="Old title",
        author="Old author",
        price=12.5,
        publisher="Old publisher",
        created_date=datetime(2024, 1, 1, tzinfo=timezone.utc),
        last_modified_date=datetime(2024, 2, 1, tzinfo=timezone.utc),
        created_by="alice",
        last_modified_by="bob",
        version=3,
    )
