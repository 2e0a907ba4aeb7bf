"""Abstract repository interface (port) for per-owner business settings."""

from abc import ABC, abstractmethod

from salonflow.application.ownership import ScopedQuery
from salonflow.domain.entities import BusinessSettings


class BusinessSettingsRepository(ABC):
    """Port for business settings persistence."""

    @abstractmethod
    async def get(self, query: ScopedQuery) -> BusinessSettings | None:
        """Return the owner's settings row, if one exists."""
        ...

    @abstractmethod
    async def save(self, settings: BusinessSettings) -> BusinessSettings:
        """Insert or update the owner's settings row."""
        ...
