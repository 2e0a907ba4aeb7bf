"""Pydantic DTOs for the Appointment resource."""

from datetime import datetime, timezone

from pydantic import Field, field_validator

from .common import (
    Cents,
    CreateSchema,
    FieldRuleViolation,
    RecordId,
    RecordResponse,
    ResourceFilters,
    UpdateSchema,
    reject_null,
)


def _as_utc(value: datetime | None) -> datetime | None:
    """Naive datetimes are taken as UTC; aware ones are converted to UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _end_after_start(
    start: datetime | None, end: datetime | None
) -> list[FieldRuleViolation]:
    if start is not None and end is not None and end <= start:
        return [
            FieldRuleViolation(field="endDate", message="End must be after the appointment start")
        ]
    return []


class AppointmentCreate(CreateSchema):
    """Schema for booking a new appointment."""

    client_id: RecordId
    professional_id: RecordId
    service_id: RecordId
    appointment_date: datetime = Field(..., examples=["2025-03-10T14:00:00Z"])
    end_date: datetime = Field(..., examples=["2025-03-10T14:30:00Z"])
    price: Cents
    notes: str | None = None
    attended: bool = False

    utc_dates = field_validator("appointment_date", "end_date")(_as_utc)

    def rule_violations(self) -> list[FieldRuleViolation]:
        return _end_after_start(self.appointment_date, self.end_date)


class AppointmentUpdate(UpdateSchema):
    """Schema for updating an appointment — all fields optional.

    The start/end ordering is only checked when both ends are sent.
    """

    client_id: RecordId | None = None
    professional_id: RecordId | None = None
    service_id: RecordId | None = None
    appointment_date: datetime | None = None
    end_date: datetime | None = None
    price: Cents | None = None
    notes: str | None = None
    attended: bool | None = None

    not_null = field_validator(
        "client_id",
        "professional_id",
        "service_id",
        "appointment_date",
        "end_date",
        "price",
        "attended",
        mode="before",
    )(reject_null)
    utc_dates = field_validator("appointment_date", "end_date")(_as_utc)

    def rule_violations(self) -> list[FieldRuleViolation]:
        return _end_after_start(self.appointment_date, self.end_date)


class AppointmentFilters(ResourceFilters):
    """Equality filters accepted when listing appointments."""

    client_id: str | None = None
    professional_id: str | None = None
    service_id: str | None = None
    attended: bool | None = None


class AppointmentResponse(RecordResponse):
    """Schema returned to the client."""

    client_id: str
    professional_id: str
    service_id: str
    appointment_date: datetime
    end_date: datetime
    price: int
    notes: str | None = None
    attended: bool = False
