"""Mutation executor — sends one write, then invalidates what it touched.

Invalidation happens only after the server confirmed the write. A failed
write, or one whose awaiting caller was cancelled, leaves the cache alone.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from salonflow.client.api_client import ApiClient
from salonflow.client.cache_store import CacheStore, collection_key, item_key

logger = logging.getLogger(__name__)


class WriteKind(str, Enum):
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


class MutationInFlightError(Exception):
    """A write for the same ``(resource_type, id)`` is still awaiting the server."""

    def __init__(self, resource_type: str, record_id: str | None):
        self.resource_type = resource_type
        self.record_id = record_id
        target = f"{resource_type}:{record_id}" if record_id else resource_type
        super().__init__(f"A write to '{target}' is already in flight")


@dataclass(frozen=True)
class WriteRequest:
    kind: WriteKind
    resource_type: str
    record_id: str | None = None
    payload: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def create(cls, resource_type: str, payload: Mapping[str, Any]) -> "WriteRequest":
        return cls(WriteKind.CREATE, resource_type, payload=payload)

    @classmethod
    def update(
        cls, resource_type: str, record_id: str, payload: Mapping[str, Any]
    ) -> "WriteRequest":
        return cls(WriteKind.UPDATE, resource_type, record_id, payload)

    @classmethod
    def delete(cls, resource_type: str, record_id: str) -> "WriteRequest":
        return cls(WriteKind.DELETE, resource_type, record_id)

    @property
    def in_flight_key(self) -> tuple[str, str | None]:
        # Creates have no id yet: one pending create per resource type.
        return (self.resource_type, self.record_id)


class MutationExecutor:
    def __init__(self, api: ApiClient, cache: CacheStore):
        self._api = api
        self._cache = cache
        self._in_flight: set[tuple[str, str | None]] = set()

    def is_pending(self, resource_type: str, record_id: str | None = None) -> bool:
        """True while a write to ``(resource_type, record_id)`` awaits the server."""
        return (resource_type, record_id) in self._in_flight

    async def execute(self, request: WriteRequest) -> Any:
        """Send ``request`` and invalidate the affected keys on success.

        Raises:
            MutationInFlightError: a write to the same target is still pending.
            ApiClientError: whatever the API client raised; nothing is invalidated.
        """
        key = request.in_flight_key
        if key in self._in_flight:
            raise MutationInFlightError(*key)

        self._in_flight.add(key)
        try:
            result = await self._send(request)
        finally:
            self._in_flight.discard(key)

        self._invalidate(request)
        return result

    async def _send(self, request: WriteRequest) -> Any:
        if request.kind is WriteKind.CREATE:
            return await self._api.create(request.resource_type, request.payload)
        if request.record_id is None:
            raise ValueError(f"{request.kind.value} requires a record id")
        if request.kind is WriteKind.UPDATE:
            return await self._api.update(
                request.resource_type, request.record_id, request.payload
            )
        return await self._api.delete(request.resource_type, request.record_id)

    def _invalidate(self, request: WriteRequest) -> None:
        self._cache.invalidate(collection_key(request.resource_type))
        if request.kind is not WriteKind.CREATE and request.record_id is not None:
            self._cache.invalidate(item_key(request.resource_type, request.record_id))
        logger.info(
            "%s %s succeeded; cache invalidated",
            request.kind.value,
            request.resource_type,
        )
