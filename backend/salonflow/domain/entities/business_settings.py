"""Domain entity — per-owner business opening hours."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4


@dataclass
class BusinessSettings:
    """Singleton settings row for one owner."""

    owner_id: str
    work_start_time: str | None = None
    work_end_time: str | None = None
    lunch_start_time: str | None = None
    lunch_end_time: str | None = None
    id: str = field(default_factory=lambda: str(uuid4()))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def update(
        self,
        *,
        work_start_time: str | None,
        work_end_time: str | None,
        lunch_start_time: str | None,
        lunch_end_time: str | None,
    ) -> None:
        """Replace the opening hours and refresh the updated_at timestamp."""
        self.work_start_time = work_start_time
        self.work_end_time = work_end_time
        self.lunch_start_time = lunch_start_time
        self.lunch_end_time = lunch_end_time
        self.updated_at = datetime.now(timezone.utc)
