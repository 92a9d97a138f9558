"""
Pytest configuration and shared fixtures.
"""

import pytest
from fastapi.testclient import TestClient

from api.main import app as bookstore_app
from api.models import BookCreate
from api.store import BookStore


@pytest.fixture
def app():
    """The Bookstore FastAPI application."""
    return bookstore_app


@pytest.fixture
def client(app):
    """Create test client with a freshly seeded store."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def book_store():
    """Create a seeded store with a fixed clock for predictable ids."""
    return BookStore.with_seed_books(clock=lambda: 1700000000000)


@pytest.fixture
def dune_payload():
    """Sample request body for a new book."""
    return {
        "title": "Dune",
        "author": "Frank Herbert",
        "publishedDate": "1965-08-01",
        "isbn": "9780441172719"
    }


@pytest.fixture
def dune(dune_payload):
    """Sample new book as a request model."""
    return BookCreate(**dune_payload)
