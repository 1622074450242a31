"""
Catalog Service

Persistence operations for Authors, Publishers and Books.

The routers never touch the session directly; they ask this service
for entities (getters return None when nothing matches) and hand
entities back to it for saving or deletion. Every mutating call
commits its own unit of work.

Any SQLAlchemyError is logged, rolled back and re-raised as a
TransactionError so the HTTP layer sees a single internal-error type.

Usage:
    service = CatalogService(db)
    author = service.get_author(1)
    if author is not None:
        author.name = "New name"
        service.update_author(author)
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TypeVar

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from lms_catalog.database import Base
from lms_catalog.exceptions import TransactionError
from lms_catalog.models import Author, Book, Publisher

logger = logging.getLogger(__name__)

EntityT = TypeVar("EntityT", bound=Base)


class CatalogService:
    """Database-backed catalog operations bound to one session."""

    def __init__(self, db: Session) -> None:
        self.db = db

    @contextmanager
    def _transaction(self, action: str) -> Iterator[None]:
        """Wrap database work so failures surface as TransactionError."""
        try:
            yield
        except SQLAlchemyError as exc:
            logger.error(f"Failed to {action}: {exc}")
            self.db.rollback()
            raise TransactionError(f"Failed to {action}") from exc

    def _save(self, entity: EntityT, action: str) -> EntityT:
        with self._transaction(action):
            self.db.add(entity)
            self.db.commit()
            self.db.refresh(entity)
        return entity

    def _remove(self, entity: Base, action: str) -> None:
        with self._transaction(action):
            self.db.delete(entity)
            self.db.commit()

    # =========================================================================
    # Listing
    # =========================================================================
    def get_all_authors(self) -> list[Author]:
        with self._transaction("list authors"):
            stmt = select(Author).order_by(Author.id)
            return list(self.db.execute(stmt).scalars().all())

    def get_all_publishers(self) -> list[Publisher]:
        with self._transaction("list publishers"):
            stmt = select(Publisher).order_by(Publisher.id)
            return list(self.db.execute(stmt).scalars().all())

    def get_all_books(self) -> list[Book]:
        # selectinload avoids one query per book for the nested objects
        with self._transaction("list books"):
            stmt = (
                select(Book)
                .options(selectinload(Book.author), selectinload(Book.publisher))
                .order_by(Book.id)
            )
            return list(self.db.execute(stmt).scalars().all())

    # =========================================================================
    # Lookup by ID
    # =========================================================================
    def get_author(self, author_id: int | None) -> Author | None:
        """Return the author with this ID, or None."""
        if author_id is None:
            return None
        with self._transaction(f"load author {author_id}"):
            return self.db.get(Author, author_id)

    def get_publisher(self, publisher_id: int | None) -> Publisher | None:
        """Return the publisher with this ID, or None."""
        if publisher_id is None:
            return None
        with self._transaction(f"load publisher {publisher_id}"):
            return self.db.get(Publisher, publisher_id)

    def get_book(self, book_id: int | None) -> Book | None:
        """Return the book with this ID, or None."""
        if book_id is None:
            return None
        with self._transaction(f"load book {book_id}"):
            return self.db.get(Book, book_id)

    # =========================================================================
    # Creation
    # =========================================================================
    def create_author(self, name: str) -> Author:
        author = self._save(Author(name=name), "create author")
        logger.info(f"Created author {author.id} ({author.name!r})")
        return author

    def create_publisher(self, name: str, address: str = "", phone: str = "") -> Publisher:
        publisher = self._save(
            Publisher(name=name, address=address, phone=phone),
            "create publisher",
        )
        logger.info(f"Created publisher {publisher.id} ({publisher.name!r})")
        return publisher

    def create_book(
        self,
        title: str,
        author: Author | None = None,
        publisher: Publisher | None = None,
    ) -> Book:
        """
        Persist a new book.

        author and publisher must already be stored entities (or None);
        resolving them is the caller's job.
        """
        book = self._save(
            Book(title=title, author=author, publisher=publisher),
            "create book",
        )
        logger.info(f"Created book {book.id} ({book.title!r})")
        return book

    # =========================================================================
    # Updates
    # =========================================================================
    def update_author(self, author: Author) -> None:
        self._save(author, f"update author {author.id}")
        logger.info(f"Updated author {author.id}")

    def update_publisher(self, publisher: Publisher) -> None:
        self._save(publisher, f"update publisher {publisher.id}")
        logger.info(f"Updated publisher {publisher.id}")

    def update_book(self, book: Book) -> None:
        self._save(book, f"update book {book.id}")
        logger.info(f"Updated book {book.id}")

    # =========================================================================
    # Deletion
    # =========================================================================
    def delete_author(self, author: Author) -> None:
        """Delete an author; books that referenced it keep no author."""
        author_id = author.id
        self._remove(author, f"delete author {author_id}")
        logger.info(f"Deleted author {author_id}")

    def delete_publisher(self, publisher: Publisher) -> None:
        """Delete a publisher; books that referenced it keep no publisher."""
        publisher_id = publisher.id
        self._remove(publisher, f"delete publisher {publisher_id}")
        logger.info(f"Deleted publisher {publisher_id}")

    def delete_book(self, book: Book) -> None:
        book_id = book.id
        self._remove(book, f"delete book {book_id}")
        logger.info(f"Deleted book {book_id}")
