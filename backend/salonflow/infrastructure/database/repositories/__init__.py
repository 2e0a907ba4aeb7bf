from .resource_store import SQLAlchemyResourceStore, scoped_clause
from .business_settings_repository import SQLAlchemyBusinessSettingsRepository
from .dashboard_repository import SQLAlchemyDashboardRepository

__all__ = [
    "SQLAlchemyResourceStore",
    "scoped_clause",
    "SQLAlchemyBusinessSettingsRepository",
    "SQLAlchemyDashboardRepository",
]
