"""Response envelope — the single place a handler outcome becomes an HTTP response.

    succeeded          → 200, payload
    created            → 201, payload
    validation_failed  → 422, {"errors": [{"field", "message"}]}
    not_found          → 404, {"error": "<Label> not found"}
    store_error        → 500, {"error": "Internal server error"}
"""

from collections.abc import Iterable
from typing import Any

from fastapi import status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from salonflow.application.services import HandlerOutcome, OutcomeKind
from salonflow.application.validation import FieldError

INTERNAL_ERROR_MESSAGE = "Internal server error"
UNAUTHORIZED_MESSAGE = "Unauthorized"


def dump(payload: Any) -> Any:
    """Serialize response models (or lists of them) to camelCase JSON-safe data."""
    if isinstance(payload, BaseModel):
        return payload.model_dump(mode="json", by_alias=True)
    if isinstance(payload, list):
        return [dump(item) for item in payload]
    return payload


def success(payload: Any, status_code: int = status.HTTP_200_OK) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=dump(payload))


def validation_failed(errors: Iterable[FieldError]) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={"errors": [{"field": e.field, "message": e.message} for e in errors]},
    )


def error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def render(outcome: HandlerOutcome, label: str) -> JSONResponse:
    """Translate a terminal handler outcome into the uniform envelope."""
    if outcome.kind is OutcomeKind.CREATED:
        return success(outcome.payload, status.HTTP_201_CREATED)
    if outcome.kind is OutcomeKind.SUCCEEDED:
        return success(outcome.payload)
    if outcome.kind is OutcomeKind.VALIDATION_FAILED:
        return validation_failed(outcome.errors)
    if outcome.kind is OutcomeKind.NOT_FOUND:
        return error(status.HTTP_404_NOT_FOUND, f"{label} not found")
    return error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)
