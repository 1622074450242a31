"""
Author Pydantic Schemas

These schemas define the shape of data for Author-related API operations.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from lms_catalog.schemas.validators import strip_non_blank


class AuthorBase(BaseModel):
    """
    Base schema with shared author fields.

    Contains the name validation used by every author request body.
    """

    name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Author's full name",
        examples=["J.R.R. Tolkien", "Ursula K. Le Guin"],
    )

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str) -> str:
        """
        Validate that name is not just whitespace.

        Args:
            v: The value being validated

        Returns:
            The name with surrounding whitespace removed

        Raises:
            ValueError: If the name is blank
        """
        return strip_non_blank(v, "Name")


class AuthorUpdate(AuthorBase):
    """
    Schema for PUT /author/{id}.

    Only the name is mutable. An "id" key in the body is ignored; the
    path parameter identifies the author.
    """
    pass


class AuthorReference(BaseModel):
    """
    An author nested inside a book request.

    On book update the id must match a stored author. On book creation a
    matching id reuses the stored author and anything else creates a new
    author from the name, so at least one of the two is required.
    """

    id: int | None = Field(
        default=None,
        description="ID of an existing author",
        examples=[1],
    )

    name: str = Field(
        default="",
        max_length=255,
        description="Name used when a new author has to be created",
        examples=["Ada Lovelace"],
    )

    @model_validator(mode="after")
    def require_id_or_name(self) -> "AuthorReference":
        self.name = self.name.strip()
        if self.id is None and not self.name:
            raise ValueError("author reference needs an id or a name")
        return self


class AuthorResponse(BaseModel):
    """
    Schema for author responses (what the API returns).

    from_attributes=True allows building it straight from the ORM object:
        AuthorResponse.model_validate(author)
    """

    id: int = Field(
        ...,
        description="Unique identifier",
        examples=[1, 42],
    )

    name: str = Field(
        ...,
        description="Author's full name",
    )

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "name": "J.R.R. Tolkien",
            }
        },
    )
