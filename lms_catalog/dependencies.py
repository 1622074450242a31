"""
FastAPI Dependencies Module

Dependencies are reusable components injected into route handlers.
FastAPI's Depends() function manages their lifecycle.

Annotated aliases keep route signatures short:

    def get_author(author_id: int, catalog: Catalog): ...

instead of

    def get_author(author_id: int, catalog: CatalogService = Depends(get_catalog_service)): ...
"""

from typing import Annotated

from fastapi import Depends, HTTPException
from sqlalchemy.orm import Session

from lms_catalog.database import get_db
from lms_catalog.schemas.validators import strip_non_blank
from lms_catalog.services.catalog import CatalogService

DbSession = Annotated[Session, Depends(get_db)]


def get_catalog_service(db: DbSession) -> CatalogService:
    """
    Build a CatalogService bound to the request's database session.

    Tests can replace this through app.dependency_overrides to simulate
    persistence failures.
    """
    return CatalogService(db)


Catalog = Annotated[CatalogService, Depends(get_catalog_service)]


def require_text(value: str, label: str) -> str:
    """
    Apply the schemas' name/title rule to a value that did not arrive
    through a request schema (query parameters, nested references).

    Raises:
        HTTPException: 422 if the value is blank after stripping
    """
    try:
        return strip_non_blank(value, label)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
