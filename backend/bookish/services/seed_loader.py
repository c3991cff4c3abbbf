"""Reseed the catalog from the fixed dataset.

A reseed deletes every book and inserts the dataset inside one transaction.
Either the whole dataset lands or nothing changes.
"""

import json
import logging
from pathlib import Path

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from bookish.core.database import SessionLocal
from bookish.core.errors import SeedError, StoreUnavailable
from bookish.models.schemas import SeedBook
from bookish.services import book_service

logger = logging.getLogger(__name__)


def load_seed_dataset(path: Path) -> list[SeedBook]:
    """Read and validate the seed dataset.

    Args:
        path: JSON file holding an array of book objects

    Returns:
        Validated books, in file order

    Raises:
        SeedError: If the file is missing, not a JSON array, or any entry is malformed
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise SeedError(f"Could not read seed dataset {path}: {e}") from e

    if not isinstance(data, list):
        raise SeedError(f"Seed dataset {path} must be a JSON array, got {type(data).__name__}")

    books = []
    for idx, entry in enumerate(data):
        try:
            books.append(SeedBook.model_validate(entry))
        except ValidationError as e:
            raise SeedError(f"Invalid seed entry at index {idx}: {e}") from e

    logger.info(f"Loaded {len(books)} books from {path}")
    return books


def reseed(db: Session, books: list[SeedBook]) -> int:
    """Replace the store's contents with ``books``.

    Args:
        db: Database session (committed on success, rolled back on failure)
        books: Validated seed books

    Returns:
        Number of books inserted

    Raises:
        SeedError: If deleting or inserting fails
    """
    try:
        deleted = book_service.delete_all_books(db)
        logger.info(f"Deleted {deleted} existing books")

        inserted = book_service.insert_books(db, books)
        db.commit()
    except (StoreUnavailable, SQLAlchemyError) as e:
        db.rollback()
        raise SeedError(f"Reseed failed, store left unchanged: {e.__cause__ or e}") from e

    logger.info(f"Reseed complete: {inserted} books inserted")
    return inserted


def reseed_from_file(path: Path) -> int:
    """Load the dataset at ``path`` and reseed with a fresh session."""
    books = load_seed_dataset(path)
    with SessionLocal() as db:
        return reseed(db, books)
