"""Unit tests for the schema validator."""

import logging
from datetime import date, datetime, timedelta, timezone

import pytest

from salonflow.application.schemas import (
    AppointmentCreate,
    ClientCreate,
    ProfessionalCreate,
    ServiceCreate,
    ServiceUpdate,
)
from salonflow.application.validation import ValidatedInput, ValidationFailure, validate
from salonflow.domain.exceptions import MalformedPayloadError


def _fields(result: ValidationFailure) -> set[str]:
    return {e.field for e in result.errors}


def test_create_keeps_exactly_the_declared_fields():
    result = validate(
        {"name": "Corte", "price": 3500, "duration": 30, "ownerId": "u2", "foo": 1},
        ServiceCreate,
    )

    assert isinstance(result, ValidatedInput)
    assert set(result.values) == {"name", "description", "price", "duration", "color"}
    assert result.values["price"] == 3500


def test_create_reports_each_bad_field():
    result = validate({"name": "", "price": -5, "duration": 30}, ServiceCreate)

    assert isinstance(result, ValidationFailure)
    assert _fields(result) == {"name", "price"}


def test_missing_required_fields_are_reported():
    result = validate({}, ServiceCreate)

    assert isinstance(result, ValidationFailure)
    assert {"name", "price", "duration"} <= _fields(result)


def test_numbers_are_coerced_from_strings():
    result = validate({"name": "Barba", "price": "2000", "duration": "20"}, ServiceCreate)

    assert isinstance(result, ValidatedInput)
    assert result.values["price"] == 2000
    assert result.values["duration"] == 20


def test_field_errors_use_wire_names():
    result = validate(
        {"name": "Ana", "email": "ana@example.com", "commissionRate": 150}, ProfessionalCreate
    )

    assert isinstance(result, ValidationFailure)
    assert _fields(result) == {"commissionRate"}


def test_custom_validator_message_is_kept():
    result = validate(
        {"name": "Ana", "email": "ana@example.com", "workStartTime": "9:00"}, ProfessionalCreate
    )

    assert isinstance(result, ValidationFailure)
    assert result.errors[0].field == "workStartTime"
    assert result.errors[0].message == "Time must use the HH:MM format"


def test_cross_field_rule_runs_after_types_are_valid():
    result = validate(
        {
            "name": "Ana",
            "email": "ana@example.com",
            "lunchStartTime": "13:00",
            "lunchEndTime": "12:00",
        },
        ProfessionalCreate,
    )

    assert isinstance(result, ValidationFailure)
    assert _fields(result) == {"lunchEndTime"}


def test_birth_date_in_future_is_rejected():
    tomorrow = (date.today() + timedelta(days=1)).isoformat()
    result = validate({"name": "Bia", "birthDate": tomorrow}, ClientCreate)

    assert isinstance(result, ValidationFailure)
    assert result.errors[0].field == "birthDate"


def test_unknown_enumeration_value_is_rejected():
    result = validate({"name": "Bia", "gender": "unknown"}, ClientCreate)

    assert isinstance(result, ValidationFailure)
    assert _fields(result) == {"gender"}


def test_naive_appointment_dates_are_taken_as_utc():
    result = validate(
        {
            "clientId": "c1",
            "professionalId": "p1",
            "serviceId": "s1",
            "appointmentDate": "2025-03-10T14:00:00",
            "endDate": "2025-03-10T11:30:00-03:00",
            "price": 3500,
        },
        AppointmentCreate,
    )

    assert isinstance(result, ValidatedInput)
    assert result.values["appointment_date"] == datetime(2025, 3, 10, 14, 0, tzinfo=timezone.utc)
    assert result.values["end_date"] == datetime(2025, 3, 10, 14, 30, tzinfo=timezone.utc)
    assert result.values["attended"] is False


def test_appointment_must_end_after_it_starts():
    result = validate(
        {
            "clientId": "c1",
            "professionalId": "p1",
            "serviceId": "s1",
            "appointmentDate": "2025-03-10T14:00:00Z",
            "endDate": "2025-03-10T14:00:00Z",
            "price": 3500,
        },
        AppointmentCreate,
    )

    assert isinstance(result, ValidationFailure)
    assert _fields(result) == {"endDate"}


def test_update_returns_only_the_sent_fields():
    result = validate({"id": "r1", "price": 4000}, ServiceUpdate)

    assert isinstance(result, ValidatedInput)
    assert result.values == {"price": 4000}
    assert "id" not in result.values


def test_update_requires_an_id():
    result = validate({"price": 4000}, ServiceUpdate)

    assert isinstance(result, ValidationFailure)
    assert _fields(result) == {"id"}


def test_update_refuses_null_for_required_columns():
    result = validate({"id": "r1", "name": None}, ServiceUpdate)

    assert isinstance(result, ValidationFailure)
    assert result.errors[0].field == "name"
    assert result.errors[0].message == "Field may be omitted but not set to null"


def test_update_allows_clearing_optional_columns():
    result = validate({"id": "r1", "description": None}, ServiceUpdate)

    assert isinstance(result, ValidatedInput)
    assert result.values == {"description": None}


def test_update_discards_owner_reference_and_logs_mismatch(caplog):
    with caplog.at_level(logging.WARNING):
        result = validate(
            {"id": "r1", "ownerId": "u2", "name": "Novo"}, ServiceUpdate, principal_id="u1"
        )

    assert isinstance(result, ValidatedInput)
    assert result.values == {"name": "Novo"}
    assert "Discarded mismatching owner reference" in caplog.text


def test_update_matching_owner_reference_is_discarded_quietly(caplog):
    with caplog.at_level(logging.WARNING):
        result = validate({"id": "r1", "ownerId": "u1"}, ServiceUpdate, principal_id="u1")

    assert isinstance(result, ValidatedInput)
    assert result.values == {}
    assert "owner reference" not in caplog.text


@pytest.mark.parametrize("body", [["name", "Corte"], "Corte", 42, None])
def test_non_object_input_raises(body):
    with pytest.raises(MalformedPayloadError):
        validate(body, ServiceCreate)
