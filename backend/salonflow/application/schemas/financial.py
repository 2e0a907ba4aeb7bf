"""Pydantic DTOs for the FinancialEntry resource."""

from datetime import date
from typing import Literal

from pydantic import field_validator

from .common import (
    Cents,
    CreateSchema,
    NonEmptyStr,
    RecordId,
    RecordResponse,
    ResourceFilters,
    UpdateSchema,
    reject_null,
)

EntryDirection = Literal["receita", "despesa"]
EntryRecurrence = Literal["pontual", "fixa"]


class FinancialEntryCreate(CreateSchema):
    """Schema for recording an income or expense."""

    description: NonEmptyStr
    amount: Cents
    type: EntryDirection
    entry_type: EntryRecurrence
    entry_date: date
    appointment_id: RecordId | None = None


class FinancialEntryUpdate(UpdateSchema):
    """Schema for updating a financial entry — all fields optional."""

    description: NonEmptyStr | None = None
    amount: Cents | None = None
    type: EntryDirection | None = None
    entry_type: EntryRecurrence | None = None
    entry_date: date | None = None
    appointment_id: RecordId | None = None

    not_null = field_validator(
        "description", "amount", "type", "entry_type", "entry_date", mode="before"
    )(reject_null)


class FinancialEntryFilters(ResourceFilters):
    """Equality filters accepted when listing financial entries."""

    type: EntryDirection | None = None
    entry_type: EntryRecurrence | None = None
    appointment_id: str | None = None


class FinancialEntryResponse(RecordResponse):
    """Schema returned to the client."""

    description: str
    amount: int
    type: str
    entry_type: str
    entry_date: date
    appointment_id: str | None = None
