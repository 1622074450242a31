"""
Books Router

CRUD endpoints for books, including how a book's nested author and
publisher are resolved:

- Update (must-exist): a supplied author/publisher must match a stored
  entity by ID, otherwise the request fails with 404. Omitted or null
  references leave the book's current ones alone.
- Create (create-or-reuse): a supplied author/publisher whose ID is
  stored is reused as-is; otherwise a new one is created from the
  supplied fields, which then must include a non-blank name (422 if not).

In both cases only IDs are matched; names and contact details sent
for an existing entity are ignored.
"""

from typing import List

from fastapi import APIRouter, Body, Query, status

from lms_catalog.dependencies import Catalog, require_text
from lms_catalog.exceptions import RetrieveError
from lms_catalog.models import Author, Book, Publisher
from lms_catalog.schemas import (
    AuthorReference,
    BookResponse,
    BookUpdate,
    PublisherReference,
)

router = APIRouter(
    tags=["Books"],
    responses={
        404: {"description": "Book, author or publisher not found"},
    },
)


# =============================================================================
# Helper Functions
# =============================================================================
def get_book_or_404(catalog: Catalog, book_id: int) -> Book:
    """Get a book by ID or raise RetrieveError (404)."""
    book = catalog.get_book(book_id)
    if book is None:
        raise RetrieveError("Book not found")
    return book


def resolve_existing_author(catalog: Catalog, ref: AuthorReference) -> Author:
    """Return the stored author matching ref.id or raise RetrieveError."""
    author = catalog.get_author(ref.id)
    if author is None:
        raise RetrieveError("Author not found")
    return author


def resolve_existing_publisher(catalog: Catalog, ref: PublisherReference) -> Publisher:
    """Return the stored publisher matching ref.id or raise RetrieveError."""
    publisher = catalog.get_publisher(ref.id)
    if publisher is None:
        raise RetrieveError("Publisher not found")
    return publisher


def name_for_new_entity(
    ref: AuthorReference | PublisherReference | None,
    stored: Author | Publisher | None,
    label: str,
) -> str | None:
    """
    Decide whether book creation has to create the referenced entity.

    Args:
        ref: The author/publisher sent by the client, if any
        stored: The entity found for ref.id, if any
        label: Field name for the error message, e.g. "Author name"

    Returns:
        The stripped name to create the entity with, or None when nothing
        was sent or the stored entity is reused

    Raises:
        HTTPException: 422 if the entity must be created but ref.name is blank
    """
    if ref is None or stored is not None:
        return None
    return require_text(ref.name, label)


# =============================================================================
# CRUD Endpoints
# =============================================================================
@router.get(
    "/books",
    response_model=List[BookResponse],
    summary="List all books",
    description="Get every book in the catalog, ordered by ID, with author and publisher.",
)
@router.get("/books/", response_model=List[BookResponse], include_in_schema=False)
def list_books(catalog: Catalog) -> List[BookResponse]:
    """List all books."""
    return [BookResponse.model_validate(book) for book in catalog.get_all_books()]


@router.get(
    "/book/{book_id}",
    response_model=BookResponse,
    summary="Get a book by ID",
)
@router.get("/book/{book_id}/", response_model=BookResponse, include_in_schema=False)
def get_book(book_id: int, catalog: Catalog) -> BookResponse:
    """Get a single book by its ID."""
    book = get_book_or_404(catalog, book_id)
    return BookResponse.model_validate(book)


@router.put(
    "/book/{book_id}",
    response_model=BookResponse,
    summary="Update a book",
    description=(
        "Replace the title and optionally point the book at another existing "
        "author or publisher."
    ),
)
@router.put("/book/{book_id}/", response_model=BookResponse, include_in_schema=False)
def update_book(
    book_id: int,
    book_data: BookUpdate,
    catalog: Catalog,
) -> BookResponse:
    """
    Update an existing book.

    Both references are resolved before the book is touched, so a
    missing author or publisher leaves the book exactly as it was.

    Raises:
        RetrieveError: if the book, or a supplied author/publisher, is not found
    """
    book = get_book_or_404(catalog, book_id)

    author = None
    if book_data.author is not None:
        author = resolve_existing_author(catalog, book_data.author)

    publisher = None
    if book_data.publisher is not None:
        publisher = resolve_existing_publisher(catalog, book_data.publisher)

    if author is not None:
        book.author = author
    if publisher is not None:
        book.publisher = publisher
    book.title = book_data.title
    catalog.update_book(book)

    return BookResponse.model_validate(get_book_or_404(catalog, book_id))


@router.post(
    "/book",
    response_model=BookResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new book",
    description=(
        "Create a book. Author and publisher are reused when their ID exists "
        "and created from the supplied fields otherwise."
    ),
)
@router.post(
    "/book/",
    response_model=BookResponse,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
def create_book(
    catalog: Catalog,
    title: str = Query(..., min_length=1, max_length=500, description="Book title"),
    author: AuthorReference | None = Body(default=None),
    publisher: PublisherReference | None = Body(default=None),
) -> BookResponse:
    """
    Create a new book.

    Example:
        POST /book?title=The%20Hobbit
        {"author": {"id": 5, "name": "Tolkien"}, "publisher": {"name": "Allen & Unwin"}}

    Both references are looked up and every name is checked before
    anything is written, so a 422 never leaves a new author or publisher
    behind.
    """
    title = require_text(title, "Title")

    actual_author = catalog.get_author(author.id) if author is not None else None
    actual_publisher = catalog.get_publisher(publisher.id) if publisher is not None else None

    new_author_name = name_for_new_entity(author, actual_author, "Author name")
    new_publisher_name = name_for_new_entity(publisher, actual_publisher, "Publisher name")

    if new_author_name is not None:
        actual_author = catalog.create_author(new_author_name)
    if new_publisher_name is not None:
        actual_publisher = catalog.create_publisher(
            new_publisher_name, publisher.address, publisher.phone
        )

    book = catalog.create_book(title, actual_author, actual_publisher)
    return BookResponse.model_validate(book)


@router.delete(
    "/book/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a book",
    description="Delete a book. Deleting an unknown ID succeeds without doing anything.",
)
@router.delete(
    "/book/{book_id}/",
    status_code=status.HTTP_204_NO_CONTENT,
    include_in_schema=False,
)
def delete_book(book_id: int, catalog: Catalog) -> None:
    book = catalog.get_book(book_id)
    if book is not None:
        catalog.delete_book(book)
