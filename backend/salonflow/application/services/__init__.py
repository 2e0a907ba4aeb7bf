from .resource_handler import HandlerOutcome, OutcomeKind, ResourceConfig, ResourceHandler
from .resource_registry import RESOURCE_CONFIGS, get_resource_config
from .business_settings_service import BusinessSettingsService
from .dashboard_service import DashboardService

__all__ = [
    "HandlerOutcome",
    "OutcomeKind",
    "ResourceConfig",
    "ResourceHandler",
    "RESOURCE_CONFIGS",
    "get_resource_config",
    "BusinessSettingsService",
    "DashboardService",
]
