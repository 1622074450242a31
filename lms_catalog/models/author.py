"""
Author Model

Represents an author in the catalog. Authors are referenced (not owned)
by books.
"""

from typing import TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lms_catalog.database import Base

# Prevents circular imports at runtime while enabling type hints
if TYPE_CHECKING:
    from lms_catalog.models.book import Book


class Author(Base):
    """
    Author model representing writers in the catalog.

    Table: authors

    Relationships:
    - books: One-to-Many; books whose author_id points here

    Example:
        author = Author(name="J.R.R. Tolkien")
        db.add(author)
        db.commit()
    """

    __tablename__ = "authors"

    id: Mapped[int] = mapped_column(primary_key=True)

    name: Mapped[str] = mapped_column(
        String(255),
        index=True,
        nullable=False,
        comment="Author's full name"
    )

    # No delete cascade: deleting an author nulls books.author_id on the
    # books that referenced it instead of removing those books.
    books: Mapped[list["Book"]] = relationship(
        "Book",
        back_populates="author",
    )

    def __repr__(self) -> str:
        return f"Author(id={self.id}, name='{self.name}')"
