"""SQLAlchemy database models."""

from sqlalchemy import BigInteger, Float, Integer, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all database models."""

    pass


class Book(Base):
    """Catalog book record.

    ``id`` is the source-assigned book id from the seed dataset. It is indexed
    but not unique. ``row_id`` is a surrogate key that is never exposed; it
    fixes the store's native order (insertion order) so lookups by ``id``
    always return the same first match.
    """

    __tablename__ = "books"

    row_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    id: Mapped[int] = mapped_column("book_id", BigInteger, nullable=False, index=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    authors: Mapped[str] = mapped_column(Text, nullable=False)
    average_rating: Mapped[float] = mapped_column(Float, nullable=False)
    isbn: Mapped[str] = mapped_column(String(20), nullable=False)
    isbn13: Mapped[int] = mapped_column(BigInteger, nullable=False)
    language_code: Mapped[str] = mapped_column(String(16), nullable=False)
    num_pages: Mapped[int] = mapped_column(Integer, nullable=False)
    ratings_count: Mapped[int] = mapped_column(Integer, nullable=False)
    text_reviews_count: Mapped[int] = mapped_column(Integer, nullable=False)

    def __repr__(self) -> str:
        return f"<Book(id={self.id}, isbn='{self.isbn}', title='{self.title}')>"
