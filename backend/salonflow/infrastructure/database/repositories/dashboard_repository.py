"""Aggregate queries for the dashboard, backed by SQLAlchemy."""

from datetime import date, datetime

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from salonflow.application.interfaces import DashboardRepository
from salonflow.application.ownership import ScopedQuery
from salonflow.infrastructure.database.models import AppointmentModel, FinancialEntryModel

_INCOME = "receita"


class SQLAlchemyDashboardRepository(DashboardRepository):
    """Implements the DashboardRepository port with SUM/COUNT/GROUP BY queries."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def sum_income(self, query: ScopedQuery, on: date) -> int:
        stmt = select(func.coalesce(func.sum(FinancialEntryModel.amount), 0)).where(
            FinancialEntryModel.owner_id == query.owner_id,
            FinancialEntryModel.type == _INCOME,
            FinancialEntryModel.entry_date == on,
        )
        result = await self._session.execute(stmt)
        return int(result.scalar_one())

    async def count_attended(
        self, query: ScopedQuery, start: datetime, end: datetime
    ) -> int:
        stmt = select(func.count(AppointmentModel.id)).where(
            AppointmentModel.owner_id == query.owner_id,
            AppointmentModel.attended.is_(True),
            AppointmentModel.appointment_date >= start,
            AppointmentModel.appointment_date <= end,
        )
        result = await self._session.execute(stmt)
        return int(result.scalar_one())

    async def income_by_day(
        self, query: ScopedQuery, since: date
    ) -> list[tuple[date, int]]:
        stmt = (
            select(FinancialEntryModel.entry_date, func.sum(FinancialEntryModel.amount))
            .where(
                FinancialEntryModel.owner_id == query.owner_id,
                FinancialEntryModel.type == _INCOME,
                FinancialEntryModel.entry_date >= since,
            )
            .group_by(FinancialEntryModel.entry_date)
            .order_by(FinancialEntryModel.entry_date)
        )
        result = await self._session.execute(stmt)
        return [(row[0], int(row[1] or 0)) for row in result.all()]
