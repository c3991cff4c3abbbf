"""Shared fixtures: an in-memory SQLite store and a TestClient bound to it."""

import os
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

# Must be set before bookish.core.database builds its engine
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["RESET_DB"] = "false"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import delete

from bookish.core.database import SessionLocal, engine
from bookish.models.database import Base, Book
from bookish.models.schemas import SeedBook
from bookish.services.seed_loader import reseed


def make_book(book_id: int, **overrides) -> SeedBook:
    """Build a valid seed book; override any field by keyword."""
    data = {
        "id": book_id,
        "title": f"Book {book_id}",
        "authors": "Anonymous",
        "average_rating": 4.0,
        "isbn": "0000000000",
        "isbn13": 9780000000000,
        "language_code": "eng",
        "num_pages": 300,
        "ratings_count": 10,
        "text_reviews_count": 1,
    }
    data.update(overrides)
    return SeedBook(**data)


@pytest.fixture
def db():
    """Empty books table and a session on it."""
    Base.metadata.create_all(bind=engine)
    with SessionLocal() as session:
        session.execute(delete(Book))
        session.commit()
        yield session


@pytest.fixture
def seed(db):
    """Reseed the store with the given books and return how many were inserted."""

    def _seed(books: list[SeedBook]) -> int:
        return reseed(db, books)

    return _seed


@pytest.fixture
def scenario_books() -> list[SeedBook]:
    """A top rated quick read by Stephen King and a long, lower rated Rowling book."""
    return [
        make_book(1, title="The Shining", authors="Stephen King", average_rating=4.5, num_pages=500),
        make_book(2, title="Order of the Phoenix", authors="J.K. Rowling", average_rating=3.9, num_pages=700),
    ]


@pytest.fixture
def client(db):
    """TestClient with startup run (no reseed)."""
    from main import app

    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
