"""Pydantic schemas for request/response validation."""

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


# ============================================================================
# Book Schemas
# ============================================================================


class BookBase(BaseModel):
    """Base book schema with common fields."""

    id: int
    title: str
    authors: str
    average_rating: float = Field(..., ge=0, le=5)
    isbn: str
    isbn13: int
    language_code: str
    num_pages: int = Field(..., ge=0)
    ratings_count: int = Field(..., ge=0)
    text_reviews_count: int = Field(..., ge=0)


class BookResponse(BookBase):
    """Response schema for book data."""

    model_config = ConfigDict(from_attributes=True)


class SeedBook(BookBase):
    """One entry of the seed dataset.

    Accepts the Goodreads export spellings (``bookID``, ``  num_pages``) and
    coerces numeric strings. Anything that still does not fit is rejected.
    """

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    id: int = Field(..., validation_alias=AliasChoices("bookID", "id"))
    num_pages: int = Field(..., ge=0, validation_alias=AliasChoices("num_pages", "  num_pages"))

    @field_validator("isbn", mode="before")
    @classmethod
    def isbn_as_text(cls, value: Any) -> Any:
        # Some exports drop the quotes around all-digit ISBNs
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


# ============================================================================
# Error Schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Body returned for every failed request."""

    reason: str = Field(..., description="invalid_identifier | not_found | store_unavailable | internal_error")
    error: str = Field(..., description="Human-readable message")
