"""Schema validation — raw request payload in, canonical values or field errors out.

``validate`` is a pure function. Malformed-but-well-typed input is reported
as data (``ValidationFailure``); only a body that is not a key/value object
at all raises, because there is nothing to report field errors against.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ValidationError

from salonflow.application.schemas.common import UpdateSchema
from salonflow.domain.exceptions import MalformedPayloadError


@dataclass(frozen=True)
class FieldError:
    """A single ``{field, message}`` pair, field named as on the wire."""

    field: str
    message: str


@dataclass(frozen=True)
class ValidationFailure:
    errors: list[FieldError]


@dataclass(frozen=True)
class ValidatedInput:
    """Canonical (snake_case) values, exactly the fields the schema declares.

    For update schemas ``values`` only holds the fields the caller sent; the
    target id travels separately, on the request path.
    """

    values: dict[str, Any]


def validate(
    raw_input: Any,
    schema: type[BaseModel],
    *,
    principal_id: str | None = None,
) -> ValidatedInput | ValidationFailure:
    """Validate ``raw_input`` against ``schema``.

    Raises:
        MalformedPayloadError: if ``raw_input`` is not a mapping.
    """
    if not isinstance(raw_input, Mapping):
        raise MalformedPayloadError(type(raw_input).__name__)

    try:
        model = schema.model_validate(
            dict(raw_input), context={"principal_id": principal_id}
        )
    except ValidationError as exc:
        return ValidationFailure([_to_field_error(err) for err in exc.errors()])

    rule_check = getattr(model, "rule_violations", None)
    violations = rule_check() if rule_check is not None else []
    if violations:
        return ValidationFailure(
            [FieldError(field=v.field, message=v.message) for v in violations]
        )

    if isinstance(model, UpdateSchema):
        values = model.model_dump(exclude_unset=True, exclude={"id"})
        return ValidatedInput(values=values)
    return ValidatedInput(values=model.model_dump())


def _to_field_error(err: Any) -> FieldError:
    """Map one pydantic error dict to a wire-level field error."""
    field_name = ".".join(str(part) for part in err.get("loc", ())) or "body"
    if err.get("type") == "value_error" and "error" in err.get("ctx", {}):
        message = str(err["ctx"]["error"])
    else:
        message = err.get("msg", "Invalid value")
    return FieldError(field=field_name, message=message)
