import pytest
from fastapi.testclient import TestClient

from books_api.catalog.store import BookRegistry
from books_api.main import create_app


@pytest.fixture
def registry():
    # Fresh registry seeded with the three default books
    return BookRegistry()


@pytest.fixture
def client(registry):
    app = create_app(registry)
    with TestClient(app) as test_client:
        yield test_client
