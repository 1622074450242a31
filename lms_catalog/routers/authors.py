"""
Authors Router

CRUD endpoints for authors.

Collection and item paths differ (/authors vs /author/{id}) and each
path answers with or without a trailing slash; the slash variant is
registered separately and hidden from the OpenAPI schema.
"""

from typing import List

from fastapi import APIRouter, Query, status

from lms_catalog.dependencies import Catalog, require_text
from lms_catalog.exceptions import RetrieveError
from lms_catalog.models import Author
from lms_catalog.schemas import AuthorResponse, AuthorUpdate

router = APIRouter(
    tags=["Authors"],
    responses={
        404: {"description": "Author not found"},
    },
)


def get_author_or_404(catalog: Catalog, author_id: int) -> Author:
    """Get an author by ID or raise RetrieveError (404)."""
    author = catalog.get_author(author_id)
    if author is None:
        raise RetrieveError("Author not found")
    return author


@router.get(
    "/authors",
    response_model=List[AuthorResponse],
    summary="List all authors",
    description="Get every author in the catalog, ordered by ID.",
)
@router.get("/authors/", response_model=List[AuthorResponse], include_in_schema=False)
def list_authors(catalog: Catalog) -> List[AuthorResponse]:
    """List all authors."""
    return [AuthorResponse.model_validate(a) for a in catalog.get_all_authors()]


@router.get(
    "/author/{author_id}",
    response_model=AuthorResponse,
    summary="Get an author by ID",
)
@router.get("/author/{author_id}/", response_model=AuthorResponse, include_in_schema=False)
def get_author(author_id: int, catalog: Catalog) -> AuthorResponse:
    """Get a single author by ID."""
    author = get_author_or_404(catalog, author_id)
    return AuthorResponse.model_validate(author)


@router.put(
    "/author/{author_id}",
    response_model=AuthorResponse,
    summary="Update an author",
    description="Replace the author's name.",
)
@router.put("/author/{author_id}/", response_model=AuthorResponse, include_in_schema=False)
def update_author(
    author_id: int,
    author_data: AuthorUpdate,
    catalog: Catalog,
) -> AuthorResponse:
    """
    Update an existing author.

    Returns the author as re-read from the database after saving.
    """
    author = get_author_or_404(catalog, author_id)
    author.name = author_data.name
    catalog.update_author(author)

    return AuthorResponse.model_validate(get_author_or_404(catalog, author_id))


@router.post(
    "/author",
    response_model=AuthorResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new author",
)
@router.post(
    "/author/",
    response_model=AuthorResponse,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
def create_author(
    catalog: Catalog,
    name: str = Query(..., min_length=1, max_length=255, description="Author's full name"),
) -> AuthorResponse:
    """
    Create a new author.

    Example:
        POST /author?name=Tolkien

    The name is stripped; a blank one is rejected with 422.
    """
    author = catalog.create_author(require_text(name, "Name"))
    return AuthorResponse.model_validate(author)


@router.delete(
    "/author/{author_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete an author",
    description="Delete an author. Deleting an unknown ID succeeds without doing anything.",
)
@router.delete(
    "/author/{author_id}/",
    status_code=status.HTTP_204_NO_CONTENT,
    include_in_schema=False,
)
def delete_author(author_id: int, catalog: Catalog) -> None:
    """Delete an author if it exists."""
    author = catalog.get_author(author_id)
    if author is not None:
        catalog.delete_author(author)
