"""Ownership filter — binds every store query to the current principal."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from salonflow.domain.entities import Principal

# Keys a caller can never filter on directly: the owner comes from the
# principal and the id from the point lookup.
_RESERVED_KEYS = frozenset({"owner_id", "id"})


@dataclass(frozen=True)
class ResourceQuery:
    """An unscoped query: an optional id plus equality filters."""

    id: str | None = None
    filters: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ScopedQuery:
    """A query conjoined with ``owner_id = principal.id``.

    Only ``scope`` builds these; store adapters refuse anything else.
    """

    owner_id: str
    id: str | None = None
    filters: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    @property
    def is_point_lookup(self) -> bool:
        return self.id is not None


def scope(base_query: ResourceQuery, principal: Principal) -> ScopedQuery:
    """Return ``base_query`` restricted to records owned by ``principal``.

    For point lookups the result is the conjunction
    ``id = requested AND owner_id = principal.id``.
    """
    if not principal.id:
        raise ValueError("Cannot scope a query to a principal without an id")
    filters = {
        key: value
        for key, value in base_query.filters.items()
        if key not in _RESERVED_KEYS and value is not None
    }
    return ScopedQuery(
        owner_id=principal.id,
        id=base_query.id,
        filters=MappingProxyType(filters),
    )


def scope_point(record_id: str, principal: Principal) -> ScopedQuery:
    """Shorthand for a scoped single-record lookup."""
    return scope(ResourceQuery(id=record_id), principal)


def scope_all(principal: Principal, filters: Mapping[str, Any] | None = None) -> ScopedQuery:
    """Shorthand for a scoped collection query."""
    return scope(ResourceQuery(filters=dict(filters or {})), principal)
