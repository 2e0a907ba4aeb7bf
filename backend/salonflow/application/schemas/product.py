"""Pydantic DTOs for the Product resource."""

from pydantic import Field, field_validator

from .common import (
    Cents,
    CreateSchema,
    ImageUrl,
    NonEmptyStr,
    RecordResponse,
    ResourceFilters,
    UpdateSchema,
    reject_null,
)


class ProductCreate(CreateSchema):
    """Schema for creating a new product."""

    name: NonEmptyStr
    description: str | None = None
    price: Cents
    quantity: int = Field(..., ge=0)
    image_url: ImageUrl | None = Field(None, examples=["https://cdn.example.com/p.png", ""])


class ProductUpdate(UpdateSchema):
    """Schema for updating an existing product — all fields optional."""

    name: NonEmptyStr | None = None
    description: str | None = None
    price: Cents | None = None
    quantity: int | None = Field(None, ge=0)
    image_url: ImageUrl | None = None

    not_null = field_validator("name", "price", "quantity", mode="before")(reject_null)


class ProductFilters(ResourceFilters):
    """Products are listed unfiltered."""


class ProductResponse(RecordResponse):
    """Schema returned to the client."""

    name: str
    description: str | None = None
    price: int
    quantity: int
    image_url: str | None = None
