"""Pydantic DTOs for the Professional (staff) resource."""

from pydantic import Field, field_validator

from .common import (
    Cents,
    ClockTime,
    CreateSchema,
    Email,
    FieldRuleViolation,
    HexColor,
    NonEmptyStr,
    RecordResponse,
    ResourceFilters,
    UpdateSchema,
    reject_null,
)


def _window_violations(
    model: "ProfessionalCreate | ProfessionalUpdate",
) -> list[FieldRuleViolation]:
    """HH:MM strings compare correctly as text, so ordering is a string check."""
    violations = []
    pairs = (
        ("work_start_time", "work_end_time", "workEndTime"),
        ("lunch_start_time", "lunch_end_time", "lunchEndTime"),
    )
    for start_attr, end_attr, end_field in pairs:
        start = getattr(model, start_attr)
        end = getattr(model, end_attr)
        if start is not None and end is not None and end <= start:
            violations.append(
                FieldRuleViolation(field=end_field, message="End time must be after start time")
            )
    return violations


class ProfessionalCreate(CreateSchema):
    """Schema for creating a new professional."""

    name: NonEmptyStr
    email: Email
    phone: str | None = None
    color: HexColor | None = None
    salary: Cents | None = None
    commission_rate: float | None = Field(None, ge=0, le=100)
    work_start_time: ClockTime | None = None
    work_end_time: ClockTime | None = None
    lunch_start_time: ClockTime | None = None
    lunch_end_time: ClockTime | None = None

    def rule_violations(self) -> list[FieldRuleViolation]:
        return _window_violations(self)


class ProfessionalUpdate(UpdateSchema):
    """Schema for updating an existing professional — all fields optional."""

    name: NonEmptyStr | None = None
    email: Email | None = None
    phone: str | None = None
    color: HexColor | None = None
    salary: Cents | None = None
    commission_rate: float | None = Field(None, ge=0, le=100)
    work_start_time: ClockTime | None = None
    work_end_time: ClockTime | None = None
    lunch_start_time: ClockTime | None = None
    lunch_end_time: ClockTime | None = None

    not_null = field_validator("name", "email", mode="before")(reject_null)

    def rule_violations(self) -> list[FieldRuleViolation]:
        return _window_violations(self)


class ProfessionalFilters(ResourceFilters):
    """Professionals are listed unfiltered."""


class ProfessionalResponse(RecordResponse):
    """Schema returned to the client."""

    name: str
    email: str
    phone: str | None = None
    color: str | None = None
    salary: int | None = None
    commission_rate: float | None = None
    work_start_time: str | None = None
    work_end_time: str | None = None
    lunch_start_time: str | None = None
    lunch_end_time: str | None = None
