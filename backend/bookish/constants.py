# =============================================================================
# TOP RATED FILTER CONFIGURATION
# =============================================================================

TOP_RATED_MIN_RATING = 4.0
"""
Minimum average rating (0.0-5.0) for a book to count as "top rated".

Books with average_rating >= this value are returned by /books/top-rated.
"""

QUICK_READ_MAX_PAGES = 600
"""
Maximum page count for a top rated book to also count as a "quick read".

Applied on top of TOP_RATED_MIN_RATING when the quickRead query flag is present.

Example:
    Book rated 4.5 with 500 pages → top rated and quick read
    Book rated 4.5 with 700 pages → top rated only
"""


# =============================================================================
# IDENTIFIER CONFIGURATION
# =============================================================================

MAX_BOOK_ID = 2**63 - 1
"""
Largest book id accepted in a lookup.

Ids are stored as 64-bit integers; anything outside that range can never match
and is rejected as an invalid identifier instead of reaching the store.
"""

MIN_BOOK_ID = -(2**63)


# =============================================================================
# RESPONSE MESSAGES
# =============================================================================

GREETING = "Hello world, welcome to the Bookish API, a read-only book catalog!"

INVALID_BOOK_ID_MESSAGE = "Invalid Book ID, double check book id value"
BOOK_NOT_FOUND_MESSAGE = "Sorry, no books found with that ID :("
AUTHOR_NOT_FOUND_MESSAGE = (
    "Sorry, could not find any books by that author, double check author name :("
)
STORE_UNAVAILABLE_MESSAGE = "The book store is currently unavailable, please try again later"
INTERNAL_ERROR_MESSAGE = "Something went wrong, please try again later"
INVALID_REQUEST_MESSAGE = "The request could not be understood, double check its parameters"


# =============================================================================
# VALIDATION
# =============================================================================

def validate_constants():
    """
    Validate that all constants are within acceptable ranges.

    Raises:
        ValueError: If any constant is out of range
    """
    if not 0.0 <= TOP_RATED_MIN_RATING <= 5.0:
        raise ValueError(f"TOP_RATED_MIN_RATING must be 0.0-5.0, got {TOP_RATED_MIN_RATING}")

    if QUICK_READ_MAX_PAGES < 1:
        raise ValueError(f"QUICK_READ_MAX_PAGES must be >= 1, got {QUICK_READ_MAX_PAGES}")

    if MIN_BOOK_ID >= MAX_BOOK_ID:
        raise ValueError("MIN_BOOK_ID must be lower than MAX_BOOK_ID")


# Run validation on import
validate_constants()
