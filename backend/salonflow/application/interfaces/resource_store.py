"""Abstract store adapter (port) shared by every resource type."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from salonflow.application.ownership import ScopedQuery
from salonflow.domain.entities import ResourceRecord


@dataclass(frozen=True)
class SortKey:
    """One ordering term, by canonical field name."""

    field: str
    descending: bool = False


class ResourceStore(ABC):
    """Port for tenant-scoped persistence — implemented in the infrastructure layer.

    Every method takes a ``ScopedQuery``; there is no unscoped entry point.
    Each mutating call performs exactly one storage mutation and commits it
    before returning.
    """

    @abstractmethod
    async def list(
        self, query: ScopedQuery, order: Sequence[SortKey] = ()
    ) -> list[ResourceRecord]:
        """Return matching records in the requested order."""
        ...

    @abstractmethod
    async def find_one(self, query: ScopedQuery) -> ResourceRecord | None:
        """Return the single matching record, or None."""
        ...

    @abstractmethod
    async def insert(self, query: ScopedQuery, values: dict[str, Any]) -> ResourceRecord:
        """Persist a new record owned by ``query.owner_id``."""
        ...

    @abstractmethod
    async def update(
        self, query: ScopedQuery, patch: dict[str, Any]
    ) -> ResourceRecord | None:
        """Apply ``patch`` to the matching record. None when zero rows match."""
        ...

    @abstractmethod
    async def remove(self, query: ScopedQuery) -> ResourceRecord | None:
        """Delete the matching record. None when zero rows match."""
        ...
