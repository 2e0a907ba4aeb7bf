"""Generic tenant-scoped CRUD engine, instantiated once per resource type.

Each request walks the same stages and stops at the first terminal one:

    Received → Validating → (ValidationFailed | Validated)
             → Authorizing (scoped query) → Executing
             → (Succeeded | NotFound | StoreError)

Validation failures and not-found are returned as ``HandlerOutcome`` data.
Anything raised by the store is caught once here, logged with context and
turned into an opaque ``STORE_ERROR`` outcome.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pydantic import BaseModel

from salonflow.application.interfaces import ResourceStore, SortKey
from salonflow.application.ownership import ResourceQuery, scope, scope_point
from salonflow.application.schemas.common import (
    CreateSchema,
    DeleteConfirmation,
    RecordResponse,
    ResourceFilters,
    UpdateSchema,
)
from salonflow.application.validation import (
    FieldError,
    ValidatedInput,
    ValidationFailure,
    validate,
)
from salonflow.domain.entities import Principal, ResourceRecord
from salonflow.infrastructure.logging.stage_logger import HandlerStage, StageLogger

logger = logging.getLogger(__name__)
hlog = StageLogger("ResourceHandler")

# Appended to every ordering so ties fall back to insertion order.
_INSERTION_ORDER = (SortKey("created_at"), SortKey("id"))


class OutcomeKind(str, Enum):
    SUCCEEDED = "succeeded"
    CREATED = "created"
    VALIDATION_FAILED = "validation_failed"
    NOT_FOUND = "not_found"
    STORE_ERROR = "store_error"


@dataclass(frozen=True)
class HandlerOutcome:
    """Terminal state of one handler call.

    ``payload`` is a response model (or a list of them) on success;
    ``errors`` is only set for ``VALIDATION_FAILED``.
    """

    kind: OutcomeKind
    resource_type: str
    payload: Any = None
    errors: tuple[FieldError, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return self.kind in (OutcomeKind.SUCCEEDED, OutcomeKind.CREATED)


@dataclass(frozen=True)
class ResourceConfig:
    """Everything that differs between two resource types."""

    resource_type: str
    table: str
    label: str
    create_schema: type[CreateSchema]
    update_schema: type[UpdateSchema]
    response_schema: type[RecordResponse]
    filter_schema: type[ResourceFilters] = ResourceFilters
    ordering: tuple[SortKey, ...] = ()


class ResourceHandler:
    """Validator → Ownership filter → Store adapter, for one resource type."""

    def __init__(self, config: ResourceConfig, store: ResourceStore):
        self._config = config
        self._store = store
        self._order = (*config.ordering, *_INSERTION_ORDER)

    @property
    def config(self) -> ResourceConfig:
        return self._config

    # ── Reads ─────────────────────────────────────────────────────────

    async def list(
        self, principal: Principal, raw_filters: Mapping[str, Any] | None = None
    ) -> HandlerOutcome:
        op = self._op("list")
        hlog.step_start(HandlerStage.RECEIVED, op, principal=principal.id)

        checked = validate(dict(raw_filters or {}), self._config.filter_schema)
        if isinstance(checked, ValidationFailure):
            return self._validation_failed(op, checked)
        filters = {k: v for k, v in checked.values.items() if v is not None}

        query = scope(ResourceQuery(filters=filters), principal)
        hlog.detail("scoped", owner=query.owner_id, filters=len(filters))
        try:
            with hlog.timed_step(HandlerStage.EXECUTE, op):
                records = await self._store.list(query, self._order)
                payload = [self._respond(r) for r in records]
        except Exception as exc:
            return self._store_error(op, exc, principal)
        return self._done(op, OutcomeKind.SUCCEEDED, payload)

    async def get_by_id(self, principal: Principal, record_id: str) -> HandlerOutcome:
        op = self._op("get", record_id)
        hlog.step_start(HandlerStage.RECEIVED, op, principal=principal.id)

        query = scope_point(record_id, principal)
        try:
            with hlog.timed_step(HandlerStage.EXECUTE, op):
                record = await self._store.find_one(query)
                payload = self._respond(record) if record is not None else None
        except Exception as exc:
            return self._store_error(op, exc, principal)
        if payload is None:
            return self._not_found(op)
        return self._done(op, OutcomeKind.SUCCEEDED, payload)

    # ── Writes ────────────────────────────────────────────────────────

    async def create(self, principal: Principal, raw_input: Any) -> HandlerOutcome:
        op = self._op("create")
        hlog.step_start(HandlerStage.RECEIVED, op, principal=principal.id)

        checked = self._validate(op, raw_input, self._config.create_schema, principal)
        if isinstance(checked, ValidationFailure):
            return self._validation_failed(op, checked)

        query = scope(ResourceQuery(), principal)
        try:
            with hlog.timed_step(HandlerStage.EXECUTE, op):
                record = await self._store.insert(query, checked.values)
                payload = self._respond(record)
        except Exception as exc:
            return self._store_error(op, exc, principal)
        return self._done(op, OutcomeKind.CREATED, payload)

    async def update(
        self, principal: Principal, record_id: str, raw_input: Any
    ) -> HandlerOutcome:
        op = self._op("update", record_id)
        hlog.step_start(HandlerStage.RECEIVED, op, principal=principal.id)

        if isinstance(raw_input, Mapping):
            body_id = raw_input.get("id")
            if body_id is not None and str(body_id) != record_id:
                return self._validation_failed(
                    op,
                    ValidationFailure(
                        [FieldError("id", "Body id does not match the requested record")]
                    ),
                )
            raw_input = {**raw_input, "id": record_id}

        checked = self._validate(op, raw_input, self._config.update_schema, principal)
        if isinstance(checked, ValidationFailure):
            return self._validation_failed(op, checked)

        query = scope_point(record_id, principal)
        hlog.step_complete(HandlerStage.AUTHORIZE, op, owner=query.owner_id)
        try:
            with hlog.timed_step(HandlerStage.EXECUTE, op, fields=len(checked.values)):
                record = await self._store.update(query, checked.values)
                payload = self._respond(record) if record is not None else None
        except Exception as exc:
            return self._store_error(op, exc, principal)
        if payload is None:
            return self._not_found(op)
        return self._done(op, OutcomeKind.SUCCEEDED, payload)

    async def delete(self, principal: Principal, record_id: str) -> HandlerOutcome:
        op = self._op("delete", record_id)
        hlog.step_start(HandlerStage.RECEIVED, op, principal=principal.id)

        query = scope_point(record_id, principal)
        hlog.step_complete(HandlerStage.AUTHORIZE, op, owner=query.owner_id)
        try:
            with hlog.timed_step(HandlerStage.EXECUTE, op):
                record = await self._store.remove(query)
        except Exception as exc:
            return self._store_error(op, exc, principal)
        if record is None:
            return self._not_found(op)
        # Only the identifier goes back; the deleted fields are not echoed.
        return self._done(op, OutcomeKind.SUCCEEDED, DeleteConfirmation(id=record.id))

    # ── Helpers ───────────────────────────────────────────────────────

    def _op(self, action: str, record_id: str | None = None) -> str:
        name = f"{self._config.resource_type}.{action}"
        return f"{name}({record_id})" if record_id else name

    def _validate(
        self, op: str, raw_input: Any, schema: type[BaseModel], principal: Principal
    ) -> ValidatedInput | ValidationFailure:
        hlog.step_start(HandlerStage.VALIDATE, op, schema=schema.__name__)
        return validate(raw_input, schema, principal_id=principal.id)

    def _respond(self, record: ResourceRecord) -> RecordResponse:
        return self._config.response_schema.model_validate(record.as_dict())

    def _done(self, op: str, kind: OutcomeKind, payload: Any) -> HandlerOutcome:
        hlog.step_complete(HandlerStage.COMPLETE, op, outcome=kind.value)
        return HandlerOutcome(kind, self._config.resource_type, payload=payload)

    def _validation_failed(self, op: str, failure: ValidationFailure) -> HandlerOutcome:
        hlog.detail(f"{op} rejected", errors=len(failure.errors))
        return HandlerOutcome(
            OutcomeKind.VALIDATION_FAILED,
            self._config.resource_type,
            errors=tuple(failure.errors),
        )

    def _not_found(self, op: str) -> HandlerOutcome:
        hlog.detail(f"{op} matched zero rows")
        return HandlerOutcome(OutcomeKind.NOT_FOUND, self._config.resource_type)

    def _store_error(self, op: str, exc: Exception, principal: Principal) -> HandlerOutcome:
        logger.exception(
            "Store fault during %s (principal=%s): %s", op, principal.id, exc
        )
        return HandlerOutcome(OutcomeKind.STORE_ERROR, self._config.resource_type)
