"""Abstract read-model interface (port) for dashboard aggregates."""

from abc import ABC, abstractmethod
from datetime import date, datetime

from salonflow.application.ownership import ScopedQuery


class DashboardRepository(ABC):
    """Port for owner-scoped aggregate queries."""

    @abstractmethod
    async def sum_income(self, query: ScopedQuery, on: date) -> int:
        """Total of ``receita`` entries dated ``on``, in cents."""
        ...

    @abstractmethod
    async def count_attended(
        self, query: ScopedQuery, start: datetime, end: datetime
    ) -> int:
        """Attended appointments starting within ``[start, end]``."""
        ...

    @abstractmethod
    async def income_by_day(self, query: ScopedQuery, since: date) -> list[tuple[date, int]]:
        """``receita`` totals per entry date from ``since`` on, ascending."""
        ...
