"""Unit tests for the DashboardService."""

from datetime import date, datetime

import pytest

from salonflow.application.interfaces import DashboardRepository
from salonflow.application.ownership import ScopedQuery
from salonflow.application.services import DashboardService
from salonflow.domain.entities import EarningsPoint, Principal

TODAY = date(2025, 3, 10)
U1 = Principal(id="u1")


class FakeDashboardRepository(DashboardRepository):
    def __init__(self, income: dict[date, int] | None = None, attended: int = 0):
        self.income = income or {}
        self.attended = attended
        self.seen_owners: set[str] = set()
        self.window: tuple[datetime, datetime] | None = None

    async def sum_income(self, query: ScopedQuery, on: date) -> int:
        self.seen_owners.add(query.owner_id)
        return self.income.get(on, 0)

    async def count_attended(self, query: ScopedQuery, start: datetime, end: datetime) -> int:
        self.seen_owners.add(query.owner_id)
        self.window = (start, end)
        return self.attended

    async def income_by_day(self, query: ScopedQuery, since: date) -> list[tuple[date, int]]:
        self.seen_owners.add(query.owner_id)
        return sorted((d, v) for d, v in self.income.items() if d >= since)


@pytest.mark.asyncio
async def test_stats_average_ticket_is_rounded():
    repository = FakeDashboardRepository(income={TODAY: 10000}, attended=3)

    stats = await DashboardService(repository).get_stats(U1, today=TODAY)

    assert stats.daily_earnings == 10000
    assert stats.attended_appointments == 3
    assert stats.average_ticket == 3333
    assert repository.seen_owners == {"u1"}


@pytest.mark.asyncio
async def test_stats_without_appointments_has_zero_average():
    repository = FakeDashboardRepository(income={TODAY: 5000}, attended=0)

    stats = await DashboardService(repository).get_stats(U1, today=TODAY)

    assert stats.average_ticket == 0


@pytest.mark.asyncio
async def test_stats_count_window_covers_the_whole_utc_day():
    repository = FakeDashboardRepository()

    await DashboardService(repository).get_stats(U1, today=TODAY)

    start, end = repository.window
    assert start.date() == TODAY and end.date() == TODAY
    assert start.utcoffset().total_seconds() == 0
    assert (start.hour, end.hour) == (0, 23)


@pytest.mark.asyncio
async def test_weekly_chart_is_zero_filled_and_ascending():
    repository = FakeDashboardRepository(
        income={date(2025, 3, 4): 1000, date(2025, 3, 10): 2500, date(2025, 3, 1): 999}
    )

    chart = await DashboardService(repository).get_weekly_chart(U1, today=TODAY)

    assert len(chart) == 7
    assert chart[0] == EarningsPoint(date=date(2025, 3, 4), amount=1000)
    assert chart[-1] == EarningsPoint(date=TODAY, amount=2500)
    assert [p.amount for p in chart[1:-1]] == [0] * 5
