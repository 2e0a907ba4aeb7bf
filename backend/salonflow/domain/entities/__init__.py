from .principal import Principal
from .resource_record import ResourceRecord
from .business_settings import BusinessSettings
from .dashboard import DashboardStats, EarningsPoint

__all__ = [
    "Principal",
    "ResourceRecord",
    "BusinessSettings",
    "DashboardStats",
    "EarningsPoint",
]
