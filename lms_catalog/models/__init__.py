"""
SQLAlchemy Models Package

This package contains all database models for the catalog.

Model Relationships:
- Author -> Book: One-to-Many (a book references at most one author)
- Publisher -> Book: One-to-Many (a book references at most one publisher)

Import all models here so they are available as
`from lms_catalog.models import Author, Book, Publisher` and so
Alembic discovers them for migrations.
"""

# The order matters for SQLAlchemy to resolve relationships
from lms_catalog.models.author import Author
from lms_catalog.models.publisher import Publisher
from lms_catalog.models.book import Book

__all__ = [
    "Author",
    "Publisher",
    "Book",
]
