"""Application service (use case) for per-owner business settings."""

from typing import Any

from salonflow.application.interfaces import BusinessSettingsRepository
from salonflow.application.ownership import scope_all
from salonflow.application.schemas import BusinessSettingsUpdate
from salonflow.application.validation import ValidationFailure, validate
from salonflow.domain.entities import BusinessSettings, Principal


class BusinessSettingsService:
    """Reads and upserts the caller's settings row. Depends on the repository port (DI)."""

    def __init__(self, repository: BusinessSettingsRepository):
        self._repository = repository

    async def get_settings(self, principal: Principal) -> BusinessSettings | None:
        return await self._repository.get(scope_all(principal))

    async def save_settings(
        self, principal: Principal, raw_input: Any
    ) -> BusinessSettings | ValidationFailure:
        checked = validate(raw_input, BusinessSettingsUpdate, principal_id=principal.id)
        if isinstance(checked, ValidationFailure):
            return checked

        query = scope_all(principal)
        existing = await self._repository.get(query)
        if existing is None:
            # Owner always comes from the principal, never from the payload.
            settings = BusinessSettings(owner_id=query.owner_id, **checked.values)
        else:
            settings = existing
            settings.update(**checked.values)
        return await self._repository.save(settings)
