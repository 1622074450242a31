#!/usr/bin/env python3
"""
Database Seed Script

Populates the database with sample catalog data for development.

USAGE:
    # From the project root with the virtualenv active
    python scripts/seed_data.py

This script:
1. Connects to the database using the application settings
2. Clears existing data (optional)
3. Creates sample authors and publishers
4. Creates books referencing them through CatalogService
"""

import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sqlalchemy import delete
from sqlalchemy.orm import Session

from lms_catalog.database import SessionLocal, create_tables
from lms_catalog.models import Author, Book, Publisher
from lms_catalog.services import CatalogService


def clear_data(db: Session) -> None:
    """Clear all existing data from the database."""
    print("Clearing existing data...")
    db.execute(delete(Book))
    db.execute(delete(Author))
    db.execute(delete(Publisher))
    db.commit()
    print("Data cleared.")


def create_authors(catalog: CatalogService) -> dict[str, Author]:
    """Create sample authors."""
    print("Creating authors...")
    names = [
        "J.R.R. Tolkien",
        "Ursula K. Le Guin",
        "Isaac Asimov",
        "Agatha Christie",
        "Jane Austen",
    ]
    authors = {name: catalog.create_author(name) for name in names}
    print(f"Created {len(authors)} authors.")
    return authors


def create_publishers(catalog: CatalogService) -> dict[str, Publisher]:
    """Create sample publishers."""
    print("Creating publishers...")
    publishers_data = [
        {"name": "Allen & Unwin", "address": "83 Alexander St, Crows Nest NSW", "phone": "+61 2 8425 0100"},
        {"name": "Ace Books", "address": "1745 Broadway, New York, NY", "phone": ""},
        {"name": "Collins Crime Club", "address": "London", "phone": ""},
    ]
    publishers = {
        data["name"]: catalog.create_publisher(**data) for data in publishers_data
    }
    print(f"Created {len(publishers)} publishers.")
    return publishers


def create_books(
    catalog: CatalogService,
    authors: dict[str, Author],
    publishers: dict[str, Publisher],
) -> list[Book]:
    """Create sample books with author and publisher references."""
    print("Creating books...")
    books_data = [
        ("The Hobbit", "J.R.R. Tolkien", "Allen & Unwin"),
        ("The Fellowship of the Ring", "J.R.R. Tolkien", "Allen & Unwin"),
        ("The Left Hand of Darkness", "Ursula K. Le Guin", "Ace Books"),
        ("Foundation", "Isaac Asimov", None),
        ("The Murder of Roger Ackroyd", "Agatha Christie", "Collins Crime Club"),
        ("Pride and Prejudice", "Jane Austen", None),
    ]

    books = []
    for title, author_name, publisher_name in books_data:
        book = catalog.create_book(
            title,
            authors[author_name],
            publishers[publisher_name] if publisher_name else None,
        )
        books.append(book)

    print(f"Created {len(books)} books.")
    return books


def seed_database(clear_existing: bool = True) -> None:
    """
    Main function to seed the database.

    Args:
        clear_existing: If True, clears existing data before seeding.
    """
    print("=" * 60)
    print("Starting database seed...")
    print("=" * 60)

    create_tables()

    db = SessionLocal()
    catalog = CatalogService(db)

    try:
        if clear_existing:
            clear_data(db)

        authors = create_authors(catalog)
        publishers = create_publishers(catalog)
        books = create_books(catalog, authors, publishers)

        print("=" * 60)
        print("Database seeding completed successfully!")
        print("=" * 60)
        print("\nSummary:")
        print(f"  - Authors: {len(authors)}")
        print(f"  - Publishers: {len(publishers)}")
        print(f"  - Books: {len(books)}")
        print("\nYou can now access the API at http://localhost:8001")
        print("API documentation at http://localhost:8001/docs")

    except Exception as e:
        print(f"Error seeding database: {e}")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    seed_database()
