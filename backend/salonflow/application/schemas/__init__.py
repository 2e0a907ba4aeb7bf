from .common import (
    CamelModel,
    CreateSchema,
    UpdateSchema,
    ResourceFilters,
    RecordResponse,
    DeleteConfirmation,
    FieldRuleViolation,
    ErrorResponse,
    ValidationErrorResponse,
)
from .appointment import (
    AppointmentCreate,
    AppointmentUpdate,
    AppointmentFilters,
    AppointmentResponse,
)
from .client import ClientCreate, ClientUpdate, ClientFilters, ClientResponse
from .financial import (
    FinancialEntryCreate,
    FinancialEntryUpdate,
    FinancialEntryFilters,
    FinancialEntryResponse,
)
from .product import ProductCreate, ProductUpdate, ProductFilters, ProductResponse
from .professional import (
    ProfessionalCreate,
    ProfessionalUpdate,
    ProfessionalFilters,
    ProfessionalResponse,
)
from .service import ServiceCreate, ServiceUpdate, ServiceFilters, ServiceResponse
from .business_settings import BusinessSettingsUpdate, BusinessSettingsResponse
from .dashboard import DashboardStatsResponse, EarningsPointResponse
from .health import HealthResponse

__all__ = [
    "CamelModel",
    "CreateSchema",
    "UpdateSchema",
    "ResourceFilters",
    "RecordResponse",
    "DeleteConfirmation",
    "FieldRuleViolation",
    "ErrorResponse",
    "ValidationErrorResponse",
    "AppointmentCreate",
    "AppointmentUpdate",
    "AppointmentFilters",
    "AppointmentResponse",
    "ClientCreate",
    "ClientUpdate",
    "ClientFilters",
    "ClientResponse",
    "FinancialEntryCreate",
    "FinancialEntryUpdate",
    "FinancialEntryFilters",
    "FinancialEntryResponse",
    "ProductCreate",
    "ProductUpdate",
    "ProductFilters",
    "ProductResponse",
    "ProfessionalCreate",
    "ProfessionalUpdate",
    "ProfessionalFilters",
    "ProfessionalResponse",
    "ServiceCreate",
    "ServiceUpdate",
    "ServiceFilters",
    "ServiceResponse",
    "BusinessSettingsUpdate",
    "BusinessSettingsResponse",
    "DashboardStatsResponse",
    "EarningsPointResponse",
    "HealthResponse",
]
