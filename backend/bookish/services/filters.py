"""Translate request parameters into store predicates.

Everything here is pure: it builds SQLAlchemy expressions and never touches a
session. The only failure is ``InvalidIdentifier`` for book ids that are not
integers.
"""

import enum
import logging
import re

from sqlalchemy import ColumnElement, and_

from bookish.constants import MAX_BOOK_ID, MIN_BOOK_ID, QUICK_READ_MAX_PAGES, TOP_RATED_MIN_RATING
from bookish.core.errors import InvalidIdentifier
from bookish.models.database import Book

logger = logging.getLogger(__name__)

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")

LIKE_ESCAPE_CHAR = "\\"


def parse_book_id(raw: str) -> int:
    """Parse a textual book id.

    Args:
        raw: Path parameter as received

    Returns:
        The id as an integer

    Raises:
        InvalidIdentifier: If ``raw`` is not a plain decimal integer that fits
            in 64 bits
    """
    text = raw.strip()
    if not _INTEGER_PATTERN.fullmatch(text):
        logger.debug(f"Rejected non-integer book id: {raw!r}")
        raise InvalidIdentifier(raw)

    value = int(text)
    if not MIN_BOOK_ID <= value <= MAX_BOOK_ID:
        logger.debug(f"Rejected out-of-range book id: {raw!r}")
        raise InvalidIdentifier(raw)
    return value


def book_id_filter(raw: str) -> ColumnElement[bool]:
    """Predicate matching every record with the given id.

    Ids are not unique, so this may match several records.
    """
    return Book.id == parse_book_id(raw)


def escape_like(text: str) -> str:
    """Escape LIKE metacharacters so ``text`` only ever matches literally."""
    return (
        text.replace(LIKE_ESCAPE_CHAR, LIKE_ESCAPE_CHAR * 2)
        .replace("%", f"{LIKE_ESCAPE_CHAR}%")
        .replace("_", f"{LIKE_ESCAPE_CHAR}_")
    )


def author_filter(name: str) -> ColumnElement[bool]:
    """Case-insensitive substring match over the authors field."""
    pattern = f"%{escape_like(name)}%"
    return Book.authors.ilike(pattern, escape=LIKE_ESCAPE_CHAR)


class TopRatedSelection(enum.Enum):
    """Which top rated listing a request asked for. Exactly one applies."""

    TOP_RATED = "top_rated"
    QUICK_READ = "quick_read"


def select_top_rated(quick_read: str | None) -> TopRatedSelection:
    """Pick the listing from the raw ``quickRead`` query value.

    The flag is presence based: any non-empty value, ``"false"`` included,
    selects the quick read listing.
    """
    if quick_read:
        return TopRatedSelection.QUICK_READ
    return TopRatedSelection.TOP_RATED


def top_rated_filter(selection: TopRatedSelection) -> ColumnElement[bool]:
    """Predicate for the selected top rated listing."""
    top_rated = Book.average_rating >= TOP_RATED_MIN_RATING
    if selection is TopRatedSelection.QUICK_READ:
        return and_(top_rated, Book.num_pages <= QUICK_READ_MAX_PAGES)
    return top_rated
