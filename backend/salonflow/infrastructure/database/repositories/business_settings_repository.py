"""Concrete business settings repository backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from salonflow.application.interfaces import BusinessSettingsRepository
from salonflow.application.ownership import ScopedQuery
from salonflow.domain.entities import BusinessSettings
from salonflow.infrastructure.database.models import BusinessSettingsModel


class SQLAlchemyBusinessSettingsRepository(BusinessSettingsRepository):
    """Implements the BusinessSettingsRepository port using SQLAlchemy."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: BusinessSettingsModel) -> BusinessSettings:
        """Map ORM model → domain entity."""
        return BusinessSettings(
            id=model.id,
            owner_id=model.owner_id,
            work_start_time=model.work_start_time,
            work_end_time=model.work_end_time,
            lunch_start_time=model.lunch_start_time,
            lunch_end_time=model.lunch_end_time,
            updated_at=model.updated_at,
        )

    async def get(self, query: ScopedQuery) -> BusinessSettings | None:
        stmt = select(BusinessSettingsModel).where(
            BusinessSettingsModel.owner_id == query.owner_id
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def save(self, settings: BusinessSettings) -> BusinessSettings:
        stmt = select(BusinessSettingsModel).where(
            BusinessSettingsModel.owner_id == settings.owner_id
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        if model is None:
            model = BusinessSettingsModel(id=settings.id, owner_id=settings.owner_id)
            self._session.add(model)
        model.work_start_time = settings.work_start_time
        model.work_end_time = settings.work_end_time
        model.lunch_start_time = settings.lunch_start_time
        model.lunch_end_time = settings.lunch_end_time
        model.updated_at = settings.updated_at
        await self._session.flush()
        entity = self._to_entity(model)
        await self._session.commit()
        return entity
