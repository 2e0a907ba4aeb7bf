"""Application service for the dashboard KPIs and weekly chart."""

from datetime import date, datetime, time, timedelta, timezone

from salonflow.application.interfaces import DashboardRepository
from salonflow.application.ownership import scope_all
from salonflow.domain.entities import DashboardStats, EarningsPoint, Principal

CHART_DAYS = 7


class DashboardService:
    """Owner-scoped aggregates. Days are calendar days in UTC."""

    def __init__(self, repository: DashboardRepository):
        self._repository = repository

    async def get_stats(self, principal: Principal, today: date | None = None) -> DashboardStats:
        """Today's income, attended appointments and average ticket."""
        day = today or datetime.now(timezone.utc).date()
        query = scope_all(principal)

        earnings = await self._repository.sum_income(query, day)
        start = datetime.combine(day, time.min, tzinfo=timezone.utc)
        end = datetime.combine(day, time.max, tzinfo=timezone.utc)
        attended = await self._repository.count_attended(query, start, end)

        average = round(earnings / attended) if attended else 0
        return DashboardStats(
            daily_earnings=earnings,
            attended_appointments=attended,
            average_ticket=average,
        )

    async def get_weekly_chart(
        self, principal: Principal, today: date | None = None
    ) -> list[EarningsPoint]:
        """Income per day for the last seven days, oldest first, zero-filled."""
        day = today or datetime.now(timezone.utc).date()
        since = day - timedelta(days=CHART_DAYS - 1)
        totals = dict(await self._repository.income_by_day(scope_all(principal), since))
        return [
            EarningsPoint(date=d, amount=int(totals.get(d, 0)))
            for d in (since + timedelta(days=offset) for offset in range(CHART_DAYS))
        ]
