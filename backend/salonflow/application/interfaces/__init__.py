from .resource_store import ResourceStore, SortKey
from .auth_adapter import AuthAdapter
from .business_settings_repository import BusinessSettingsRepository
from .dashboard_repository import DashboardRepository

__all__ = [
    "ResourceStore",
    "SortKey",
    "AuthAdapter",
    "BusinessSettingsRepository",
    "DashboardRepository",
]
