"""
Publisher Pydantic Schemas
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from lms_catalog.schemas.validators import strip_non_blank


class PublisherBase(BaseModel):
    """
    Shared publisher fields.

    address and phone are plain strings; an empty string means unknown.
    """

    name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Publisher name",
        examples=["Allen & Unwin"],
    )

    address: str = Field(
        ...,
        max_length=500,
        description="Postal address",
        examples=["1 Main St"],
    )

    phone: str = Field(
        ...,
        max_length=50,
        description="Contact phone number",
        examples=["555-1234"],
    )

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str) -> str:
        """Validate and normalize name."""
        return strip_non_blank(v, "Name")


class PublisherUpdate(PublisherBase):
    """
    Schema for PUT /publisher/{id}.

    Name, address and phone are all replaced, so all three are required.
    """
    pass


class PublisherReference(BaseModel):
    """
    A publisher nested inside a book request.

    Same resolution rules as AuthorReference; address and phone are only
    used when a new publisher is created.
    """

    id: int | None = Field(
        default=None,
        description="ID of an existing publisher",
    )
    name: str = Field(default="", max_length=255)
    address: str = Field(default="", max_length=500)
    phone: str = Field(default="", max_length=50)

    @model_validator(mode="after")
    def require_id_or_name(self) -> "PublisherReference":
        self.name = self.name.strip()
        if self.id is None and not self.name:
            raise ValueError("publisher reference needs an id or a name")
        return self


class PublisherResponse(BaseModel):
    """Schema for publisher responses."""

    id: int
    name: str
    address: str
    phone: str

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 7,
                "name": "Acme",
                "address": "1 Main St",
                "phone": "555-1234",
            }
        },
    )
