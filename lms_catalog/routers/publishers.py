"""
Publishers Router

CRUD endpoints for publishers. Same layout as the authors router.
"""

from typing import List

from fastapi import APIRouter, Query, status

from lms_catalog.dependencies import Catalog, require_text
from lms_catalog.exceptions import RetrieveError
from lms_catalog.models import Publisher
from lms_catalog.schemas import PublisherResponse, PublisherUpdate

router = APIRouter(
    tags=["Publishers"],
    responses={
        404: {"description": "Publisher not found"},
    },
)


def get_publisher_or_404(catalog: Catalog, publisher_id: int) -> Publisher:
    """Get a publisher by ID or raise RetrieveError (404)."""
    publisher = catalog.get_publisher(publisher_id)
    if publisher is None:
        raise RetrieveError("Publisher not found")
    return publisher


@router.get(
    "/publishers",
    response_model=List[PublisherResponse],
    summary="List all publishers",
)
@router.get("/publishers/", response_model=List[PublisherResponse], include_in_schema=False)
def list_publishers(catalog: Catalog) -> List[PublisherResponse]:
    return [PublisherResponse.model_validate(p) for p in catalog.get_all_publishers()]


@router.get(
    "/publisher/{publisher_id}",
    response_model=PublisherResponse,
    summary="Get a publisher by ID",
)
@router.get("/publisher/{publisher_id}/", response_model=PublisherResponse, include_in_schema=False)
def get_publisher(publisher_id: int, catalog: Catalog) -> PublisherResponse:
    publisher = get_publisher_or_404(catalog, publisher_id)
    return PublisherResponse.model_validate(publisher)


@router.put(
    "/publisher/{publisher_id}",
    response_model=PublisherResponse,
    summary="Update a publisher",
    description="Replace the publisher's name, address and phone.",
)
@router.put("/publisher/{publisher_id}/", response_model=PublisherResponse, include_in_schema=False)
def update_publisher(
    publisher_id: int,
    publisher_data: PublisherUpdate,
    catalog: Catalog,
) -> PublisherResponse:
    """Update an existing publisher and return the stored result."""
    publisher = get_publisher_or_404(catalog, publisher_id)
    publisher.name = publisher_data.name
    publisher.address = publisher_data.address
    publisher.phone = publisher_data.phone
    catalog.update_publisher(publisher)

    return PublisherResponse.model_validate(get_publisher_or_404(catalog, publisher_id))


@router.post(
    "/publisher",
    response_model=PublisherResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new publisher",
)
@router.post(
    "/publisher/",
    response_model=PublisherResponse,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
def create_publisher(
    catalog: Catalog,
    name: str = Query(..., min_length=1, max_length=255, description="Publisher name"),
    address: str = Query(default="", max_length=500, description="Postal address"),
    phone: str = Query(default="", max_length=50, description="Contact phone number"),
) -> PublisherResponse:
    """
    Create a new publisher.

    address and phone default to empty strings when omitted. The name is
    stripped; a blank one is rejected with 422.
    """
    publisher = catalog.create_publisher(require_text(name, "Name"), address, phone)
    return PublisherResponse.model_validate(publisher)


@router.delete(
    "/publisher/{publisher_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a publisher",
    description="Delete a publisher. Deleting an unknown ID succeeds without doing anything.",
)
@router.delete(
    "/publisher/{publisher_id}/",
    status_code=status.HTTP_204_NO_CONTENT,
    include_in_schema=False,
)
def delete_publisher(publisher_id: int, catalog: Catalog) -> None:
    publisher = catalog.get_publisher(publisher_id)
    if publisher is not None:
        catalog.delete_publisher(publisher)
