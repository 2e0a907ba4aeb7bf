"""Domain entity — a tenant-owned record of any resource type."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass
class ResourceRecord:
    """A persisted record in canonical (snake_case, semantic) naming.

    ``id`` and ``owner_id`` are assigned once and never change. ``fields``
    holds the resource-specific columns; the audit timestamps are kept
    apart so every resource shares them.
    """

    resource_type: str
    id: str
    owner_id: str
    fields: dict[str, Any] = field(default_factory=dict)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def as_dict(self) -> dict[str, Any]:
        """Flatten into a single mapping suitable for response schemas."""
        return {
            "id": self.id,
            "owner_id": self.owner_id,
            **self.fields,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }
