"""Tests for the book store adapter."""

from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from bookish.core.errors import StoreUnavailable
from bookish.models.database import Book
from bookish.services import book_service
from conftest import make_book


def test_find_books_returns_insertion_order(db, seed):
    seed([make_book(30), make_book(10), make_book(20)])

    books = book_service.find_books(db)

    assert [b.id for b in books] == [30, 10, 20]


def test_find_first_book_returns_first_of_duplicate_ids(db, seed):
    """Ids are not unique: the first inserted record wins."""
    seed([
        make_book(7, title="First"),
        make_book(8, title="Other"),
        make_book(7, title="Second"),
    ])

    book = book_service.find_first_book(db, Book.id == 7)

    assert book is not None
    assert book.title == "First"
    assert len(book_service.find_books(db, Book.id == 7)) == 2


def test_find_first_book_returns_none_when_nothing_matches(db, seed):
    seed([make_book(1)])

    assert book_service.find_first_book(db, Book.id == 999) is None


def test_count_books(db, seed):
    assert book_service.count_books(db) == 0
    seed([make_book(1), make_book(2)])
    assert book_service.count_books(db) == 2


@pytest.mark.parametrize(
    "call",
    [
        lambda db: book_service.find_books(db),
        lambda db: book_service.find_first_book(db, Book.id == 1),
    ],
)
def test_store_failures_surface_as_store_unavailable(call):
    """A backend outage must not look like an empty result."""
    db = MagicMock()
    db.scalars.side_effect = OperationalError("SELECT", {}, Exception("connection refused"))

    with pytest.raises(StoreUnavailable) as exc_info:
        call(db)

    assert exc_info.value.status_code == 500
    assert exc_info.value.reason == "store_unavailable"


def test_delete_failure_surfaces_as_store_unavailable():
    db = MagicMock()
    db.execute.side_effect = OperationalError("DELETE", {}, Exception("timeout"))

    with pytest.raises(StoreUnavailable):
        book_service.delete_all_books(db)
