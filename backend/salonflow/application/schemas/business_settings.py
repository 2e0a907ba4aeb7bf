"""Pydantic DTOs for the per-owner business settings."""

from datetime import datetime

from .common import ClockTime, CreateSchema, CamelModel, FieldRuleViolation


class BusinessSettingsUpdate(CreateSchema):
    """Full replacement of the opening hours (upsert)."""

    work_start_time: ClockTime | None = None
    work_end_time: ClockTime | None = None
    lunch_start_time: ClockTime | None = None
    lunch_end_time: ClockTime | None = None

    def rule_violations(self) -> list[FieldRuleViolation]:
        violations = []
        if (
            self.work_start_time is not None
            and self.work_end_time is not None
            and self.work_end_time <= self.work_start_time
        ):
            violations.append(
                FieldRuleViolation(field="workEndTime", message="Work must end after it starts")
            )
        if (
            self.lunch_start_time is not None
            and self.lunch_end_time is not None
            and self.lunch_end_time <= self.lunch_start_time
        ):
            violations.append(
                FieldRuleViolation(field="lunchEndTime", message="Lunch must end after it starts")
            )
        return violations


class BusinessSettingsResponse(CamelModel):
    """Schema returned to the client."""

    id: str
    owner_id: str
    work_start_time: str | None = None
    work_end_time: str | None = None
    lunch_start_time: str | None = None
    lunch_end_time: str | None = None
    updated_at: datetime | None = None
