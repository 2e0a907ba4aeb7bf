"""Shared building blocks for the per-resource Pydantic DTOs.

Wire payloads are camelCase; inside the application every field uses its
snake_case name. The alias generator on ``CamelModel`` is the only place
where that translation happens for request and response bodies.
"""

import logging
import re
from datetime import datetime
from typing import Annotated, Any

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    ValidationInfo,
    model_validator,
)
from pydantic.alias_generators import to_camel

logger = logging.getLogger(__name__)

HEX_COLOR_RE = re.compile(r"^#[0-9a-fA-F]{6}$")
# Two-digit hours only: "09:00" is valid, "9:00" is not.
TIME_RE = re.compile(r"^([01][0-9]|2[0-3]):[0-5][0-9]$")
EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
URL_RE = re.compile(r"^https?://[^\s/$.?#].[^\s]*$", re.IGNORECASE)

# Client-supplied spellings of the owner reference that must never reach storage.
OWNER_KEYS = ("ownerId", "owner_id", "userId", "user_id")


def _check_hex_color(value: str) -> str:
    if not HEX_COLOR_RE.match(value):
        raise ValueError("Color must be a hex value like #FFFFFF")
    return value


def _check_time(value: str) -> str:
    if not TIME_RE.match(value):
        raise ValueError("Time must use the HH:MM format")
    return value


def _check_email(value: str) -> str:
    if not EMAIL_RE.match(value):
        raise ValueError("Invalid email address")
    return value


def _check_image_url(value: str) -> str:
    if value and not URL_RE.match(value):
        raise ValueError("Image URL must be an http(s) address")
    return value


NonEmptyStr = Annotated[str, Field(min_length=1, max_length=255)]
Cents = Annotated[int, Field(gt=0, description="Amount in cents")]
Minutes = Annotated[int, Field(gt=0, description="Duration in minutes")]
RecordId = Annotated[str, Field(min_length=1, max_length=36)]
HexColor = Annotated[str, AfterValidator(_check_hex_color)]
ClockTime = Annotated[str, AfterValidator(_check_time)]
Email = Annotated[str, AfterValidator(_check_email)]
ImageUrl = Annotated[str, AfterValidator(_check_image_url)]


def reject_null(value: Any) -> Any:
    """Field validator body for update fields whose column is NOT NULL."""
    if value is None:
        raise ValueError("Field may be omitted but not set to null")
    return value


class CamelModel(BaseModel):
    """Base DTO — camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class FieldRuleViolation(BaseModel):
    """A cross-field business rule that failed after type coercion."""

    field: str
    message: str


class CreateSchema(CamelModel):
    """Base for create payloads. ``id`` and the owner reference are dropped."""

    def rule_violations(self) -> list[FieldRuleViolation]:
        """Cross-field rules checked once every field has its declared type."""
        return []


class UpdateSchema(CamelModel):
    """Base for update payloads — every field optional except ``id``.

    The owner reference is never accepted from the client: any value sent
    is discarded here, and a value that differs from the caller is logged.
    """

    id: RecordId

    @model_validator(mode="before")
    @classmethod
    def _discard_owner_reference(cls, data: Any, info: ValidationInfo) -> Any:
        if not isinstance(data, dict):
            return data
        principal_id = (info.context or {}).get("principal_id")
        cleaned = dict(data)
        for key in OWNER_KEYS:
            if key in cleaned:
                supplied = cleaned.pop(key)
                if supplied != principal_id:
                    logger.warning(
                        "Discarded mismatching owner reference on update "
                        "(schema=%s, record=%s)",
                        cls.__name__,
                        cleaned.get("id"),
                    )
        return cleaned

    def rule_violations(self) -> list[FieldRuleViolation]:
        """Cross-field rules checked once every field has its declared type."""
        return []


class ResourceFilters(CamelModel):
    """Base for list filter params — equality filters only."""


class RecordResponse(CamelModel):
    """Fields every resource response carries."""

    id: str
    owner_id: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class DeleteConfirmation(CamelModel):
    """Minimal payload returned by a successful delete."""

    success: bool = True
    id: str


class FieldErrorSchema(BaseModel):
    """One entry of a 422 response body."""

    field: str
    message: str


class ValidationErrorResponse(BaseModel):
    """422 response body."""

    errors: list[FieldErrorSchema]


class ErrorResponse(BaseModel):
    """404 / 500 response body."""

    error: str
