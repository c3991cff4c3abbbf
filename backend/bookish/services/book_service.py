"""Book service: the only code that reads or writes the books table."""

import logging
from collections.abc import Iterable

from sqlalchemy import ColumnElement, delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from bookish.core.errors import StoreUnavailable
from bookish.models.database import Book
from bookish.models.schemas import SeedBook

logger = logging.getLogger(__name__)


def find_books(db: Session, predicate: ColumnElement[bool] | None = None) -> list[Book]:
    """Retrieve every book matching a predicate.

    Args:
        db: Database session
        predicate: Filter built by ``bookish.services.filters``; None for all books

    Returns:
        Matching Book instances in store order (insertion order)

    Raises:
        StoreUnavailable: If the query fails or times out
    """
    stmt = select(Book).order_by(Book.row_id)
    if predicate is not None:
        stmt = stmt.where(predicate)
    try:
        return list(db.scalars(stmt).all())
    except SQLAlchemyError as e:
        logger.error(f"Book query failed: {e}", exc_info=True)
        raise StoreUnavailable() from e


def find_first_book(db: Session, predicate: ColumnElement[bool]) -> Book | None:
    """Retrieve the first book in store order matching a predicate.

    Args:
        db: Database session
        predicate: Filter built by ``bookish.services.filters``

    Returns:
        Book instance if found, None otherwise

    Raises:
        StoreUnavailable: If the query fails or times out
    """
    stmt = select(Book).where(predicate).order_by(Book.row_id).limit(1)
    try:
        return db.scalars(stmt).first()
    except SQLAlchemyError as e:
        logger.error(f"Book lookup failed: {e}", exc_info=True)
        raise StoreUnavailable() from e


def count_books(db: Session) -> int:
    """Count all books in the store."""
    try:
        return db.scalar(select(func.count()).select_from(Book)) or 0
    except SQLAlchemyError as e:
        logger.error(f"Book count failed: {e}", exc_info=True)
        raise StoreUnavailable() from e


def delete_all_books(db: Session) -> int:
    """Delete every book. Does not commit.

    Returns:
        Number of rows deleted
    """
    try:
        result = db.execute(delete(Book))
    except SQLAlchemyError as e:
        logger.error(f"Deleting books failed: {e}", exc_info=True)
        raise StoreUnavailable() from e
    return result.rowcount


def insert_books(db: Session, books: Iterable[SeedBook]) -> int:
    """Insert validated seed books in the given order. Does not commit.

    Returns:
        Number of books inserted
    """
    rows = [Book(**book.model_dump()) for book in books]
    try:
        db.add_all(rows)
        db.flush()  # Surface constraint errors before commit
    except SQLAlchemyError as e:
        logger.error(f"Inserting books failed: {e}", exc_info=True)
        raise StoreUnavailable() from e
    return len(rows)
