"""Pydantic DTOs for the Client (customer) resource."""

from datetime import date
from typing import Literal

from pydantic import field_validator

from .common import (
    CreateSchema,
    Email,
    NonEmptyStr,
    RecordResponse,
    ResourceFilters,
    UpdateSchema,
    reject_null,
)

Gender = Literal["masculino", "feminino", "outro"]


def _not_in_future(value: date | None) -> date | None:
    if value is not None and value > date.today():
        raise ValueError("Birth date cannot be in the future")
    return value


class ClientCreate(CreateSchema):
    """Schema for creating a new client."""

    name: NonEmptyStr
    email: Email | None = None
    phone: str | None = None
    notes: str | None = None
    birth_date: date | None = None
    gender: Gender | None = None
    how_found: str | None = None

    birth_date_in_past = field_validator("birth_date")(_not_in_future)


class ClientUpdate(UpdateSchema):
    """Schema for updating an existing client — all fields optional."""

    name: NonEmptyStr | None = None
    email: Email | None = None
    phone: str | None = None
    notes: str | None = None
    birth_date: date | None = None
    gender: Gender | None = None
    how_found: str | None = None

    not_null = field_validator("name", mode="before")(reject_null)
    birth_date_in_past = field_validator("birth_date")(_not_in_future)


class ClientFilters(ResourceFilters):
    """Equality filters accepted when listing clients."""

    gender: Gender | None = None


class ClientResponse(RecordResponse):
    """Schema returned to the client."""

    name: str
    email: str | None = None
    phone: str | None = None
    notes: str | None = None
    birth_date: date | None = None
    gender: str | None = None
    how_found: str | None = None
