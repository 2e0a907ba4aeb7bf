"""Pydantic DTOs for the Service resource."""

from pydantic import Field, field_validator

from .common import (
    Cents,
    CreateSchema,
    HexColor,
    Minutes,
    NonEmptyStr,
    RecordResponse,
    ResourceFilters,
    UpdateSchema,
    reject_null,
)


class ServiceCreate(CreateSchema):
    """Schema for creating a new service."""

    name: NonEmptyStr = Field(..., examples=["Corte"])
    description: str | None = None
    price: Cents = Field(..., examples=[5000])
    duration: Minutes = Field(..., examples=[30])
    color: HexColor | None = Field(None, examples=["#C03232"])


class ServiceUpdate(UpdateSchema):
    """Schema for updating an existing service — all fields optional."""

    name: NonEmptyStr | None = None
    description: str | None = None
    price: Cents | None = None
    duration: Minutes | None = None
    color: HexColor | None = None

    not_null = field_validator("name", "price", "duration", mode="before")(reject_null)


class ServiceFilters(ResourceFilters):
    """Services are listed unfiltered."""


class ServiceResponse(RecordResponse):
    """Schema returned to the client."""

    name: str
    description: str | None = None
    price: int
    duration: int
    color: str | None = None
