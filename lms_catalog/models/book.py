"""
Book Model

The central model of the catalog. A book has a title and optionally
references one Author and one Publisher through nullable foreign keys.
"""

from typing import TYPE_CHECKING, Optional

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lms_catalog.database import Base

if TYPE_CHECKING:
    from lms_catalog.models.author import Author
    from lms_catalog.models.publisher import Publisher


class Book(Base):
    """
    Book model representing books in the library.

    Table: books

    Fields:
    - title: Book title (required)
    - author_id: Optional reference to authors.id
    - publisher_id: Optional reference to publishers.id

    Relationships:
    - author: Many-to-One
    - publisher: Many-to-One

    Example:
        book = Book(title="The Hobbit", author=tolkien, publisher=allen_unwin)
    """

    __tablename__ = "books"

    id: Mapped[int] = mapped_column(primary_key=True)

    title: Mapped[str] = mapped_column(
        String(500),
        index=True,
        nullable=False,
        comment="Book title"
    )

    # ondelete="SET NULL" mirrors the ORM behaviour for databases that
    # enforce foreign keys on their own
    author_id: Mapped[int | None] = mapped_column(
        ForeignKey("authors.id", ondelete="SET NULL"),
        index=True,
        nullable=True,
    )

    publisher_id: Mapped[int | None] = mapped_column(
        ForeignKey("publishers.id", ondelete="SET NULL"),
        index=True,
        nullable=True,
    )

    # -------------------------------------------------------------------------
    # Relationships
    # -------------------------------------------------------------------------
    author: Mapped[Optional["Author"]] = relationship(
        "Author",
        back_populates="books",
    )

    publisher: Mapped[Optional["Publisher"]] = relationship(
        "Publisher",
        back_populates="books",
    )

    def __repr__(self) -> str:
        return f"Book(id={self.id}, title='{self.title}')"
