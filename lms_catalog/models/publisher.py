"""
Publisher Model

Represents a publisher in the catalog, with contact details.
"""

from typing import TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lms_catalog.database import Base

if TYPE_CHECKING:
    from lms_catalog.models.book import Book


class Publisher(Base):
    """
    Publisher model.

    Table: publishers

    address and phone are stored as empty strings rather than NULL when
    not supplied.
    """

    __tablename__ = "publishers"

    id: Mapped[int] = mapped_column(primary_key=True)

    name: Mapped[str] = mapped_column(
        String(255),
        index=True,
        nullable=False,
        comment="Publisher name"
    )

    address: Mapped[str] = mapped_column(
        String(500),
        nullable=False,
        default="",
        server_default="",
        comment="Postal address"
    )

    phone: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        default="",
        server_default="",
        comment="Contact phone number"
    )

    books: Mapped[list["Book"]] = relationship(
        "Book",
        back_populates="publisher",
    )

    def __repr__(self) -> str:
        return f"Publisher(id={self.id}, name='{self.name}')"
