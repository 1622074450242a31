"""
Pydantic Schemas Package

This package contains Pydantic models for request/response validation.

Schema Naming Convention:
- XxxBase: Shared fields and validation
- XxxUpdate: Request body for PUT (full replace of the mutable fields)
- XxxReference: A nested Author/Publisher inside a Book request
- XxxResponse: Fields returned in API responses
"""

from lms_catalog.schemas.author import (
    AuthorBase,
    AuthorReference,
    AuthorResponse,
    AuthorUpdate,
)
from lms_catalog.schemas.publisher import (
    PublisherBase,
    PublisherReference,
    PublisherResponse,
    PublisherUpdate,
)
from lms_catalog.schemas.book import (
    BookResponse,
    BookUpdate,
)

__all__ = [
    # Author schemas
    "AuthorBase",
    "AuthorUpdate",
    "AuthorReference",
    "AuthorResponse",
    # Publisher schemas
    "PublisherBase",
    "PublisherUpdate",
    "PublisherReference",
    "PublisherResponse",
    # Book schemas
    "BookUpdate",
    "BookResponse",
]
