"""API routes for browsing the book catalog."""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from bookish.constants import AUTHOR_NOT_FOUND_MESSAGE, BOOK_NOT_FOUND_MESSAGE
from bookish.core.database import get_db
from bookish.core.errors import NotFound
from bookish.models.schemas import BookResponse, ErrorResponse
from bookish.services import book_service
from bookish.services.filters import (
    author_filter,
    book_id_filter,
    select_top_rated,
    top_rated_filter,
)

logger = logging.getLogger(__name__)
router = APIRouter()

STORE_ERROR = {500: {"model": ErrorResponse, "description": "Book store unavailable"}}


@router.get("", response_model=List[BookResponse], responses=STORE_ERROR)
def list_books(db: Session = Depends(get_db)) -> List[BookResponse]:
    """Return every book in the catalog."""
    books = book_service.find_books(db)
    return [BookResponse.model_validate(book) for book in books]


@router.get(
    "/book/{book_id:path}",
    response_model=BookResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Book id is not an integer"},
        404: {"model": ErrorResponse, "description": "No book with that id"},
        **STORE_ERROR,
    },
)
def get_book(book_id: str, db: Session = Depends(get_db)) -> BookResponse:
    """Return a single book by id.

    Ids are not unique in the dataset; the first match in store order wins.

    Args:
        book_id: Raw id from the path, parsed as an integer
        db: Database session

    Returns:
        The first book with that id
    """
    book = book_service.find_first_book(db, book_id_filter(book_id))
    if book is None:
        raise NotFound(BOOK_NOT_FOUND_MESSAGE)
    return BookResponse.model_validate(book)


@router.get(
    "/authors/{author_name:path}",
    response_model=List[BookResponse],
    responses={
        404: {"model": ErrorResponse, "description": "No books by that author"},
        **STORE_ERROR,
    },
)
def get_books_by_author(author_name: str, db: Session = Depends(get_db)) -> List[BookResponse]:
    """Return books whose authors field contains ``author_name``, ignoring case."""
    books = book_service.find_books(db, author_filter(author_name))
    if not books:
        raise NotFound(AUTHOR_NOT_FOUND_MESSAGE)
    return [BookResponse.model_validate(book) for book in books]


@router.get("/top-rated", response_model=List[BookResponse], responses=STORE_ERROR)
def get_top_rated_books(
    quick_read: Optional[str] = Query(
        default=None,
        alias="quickRead",
        description="Present (any non-empty value) to keep only books of 600 pages or fewer",
    ),
    db: Session = Depends(get_db),
) -> List[BookResponse]:
    """Return books rated 4.0 or higher, optionally only quick reads.

    An empty result is a valid answer here, not a 404.
    """
    selection = select_top_rated(quick_read)
    logger.debug(f"Top rated listing selected: {selection.value}")

    books = book_service.find_books(db, top_rated_filter(selection))
    return [BookResponse.model_validate(book) for book in books]
