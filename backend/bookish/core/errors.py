"""Error taxonomy for the catalog.

Services raise these; only the handlers in ``bookish.api.errors`` turn them
into HTTP responses.
"""

from bookish.constants import (
    BOOK_NOT_FOUND_MESSAGE,
    INVALID_BOOK_ID_MESSAGE,
    STORE_UNAVAILABLE_MESSAGE,
)


class CatalogError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code: int = 500
    reason: str = "internal_error"
    default_message: str = ""

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidIdentifier(CatalogError):
    """Client supplied a book id that is not a valid integer."""

    status_code = 400
    reason = "invalid_identifier"
    default_message = INVALID_BOOK_ID_MESSAGE

    def __init__(self, raw_value: str, message: str | None = None):
        self.raw_value = raw_value
        super().__init__(message)


class NotFound(CatalogError):
    """Well-formed query that matched zero records."""

    status_code = 404
    reason = "not_found"
    default_message = BOOK_NOT_FOUND_MESSAGE


class StoreUnavailable(CatalogError):
    """The record store failed or timed out."""

    status_code = 500
    reason = "store_unavailable"
    default_message = STORE_UNAVAILABLE_MESSAGE


class SeedError(Exception):
    """Reseeding could not complete. Fatal at startup."""
