"""
Book Pydantic Schemas

Books carry nested author/publisher objects rather than bare ids, both
in requests (AuthorReference / PublisherReference) and in responses.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from lms_catalog.schemas.author import AuthorReference, AuthorResponse
from lms_catalog.schemas.publisher import PublisherReference, PublisherResponse
from lms_catalog.schemas.validators import strip_non_blank


class BookUpdate(BaseModel):
    """
    Schema for PUT /book/{id}.

    - title: always replaces the stored title
    - author / publisher: null or omitted leaves the stored reference
      untouched; otherwise the id must resolve to a stored entity

    Example body:
        {"title": "The Hobbit", "author": {"id": 3}, "publisher": null}
    """

    title: str = Field(
        ...,
        min_length=1,
        max_length=500,
        description="Book title",
        examples=["The Hobbit"],
    )

    author: AuthorReference | None = Field(
        default=None,
        description="Existing author to assign",
    )

    publisher: PublisherReference | None = Field(
        default=None,
        description="Existing publisher to assign",
    )

    @field_validator("title")
    @classmethod
    def title_must_not_be_empty(cls, v: str) -> str:
        """Validate and normalize title."""
        return strip_non_blank(v, "Title")


class BookResponse(BaseModel):
    """
    Schema for book responses, with the resolved author and publisher
    embedded (null when the book has none).
    """

    id: int = Field(..., description="Unique identifier")
    title: str = Field(..., description="Book title")
    author: AuthorResponse | None = Field(default=None)
    publisher: PublisherResponse | None = Field(default=None)

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "title": "The Hobbit",
                "author": {"id": 1, "name": "J.R.R. Tolkien"},
                "publisher": {
                    "id": 1,
                    "name": "Allen & Unwin",
                    "address": "London",
                    "phone": "",
                },
            }
        },
    )
