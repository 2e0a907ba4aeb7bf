"""Per-resource configuration for the generic CRUD engine."""

from salonflow.application.interfaces import SortKey
from salonflow.application.schemas import (
    AppointmentCreate,
    AppointmentFilters,
    AppointmentResponse,
    AppointmentUpdate,
    ClientCreate,
    ClientFilters,
    ClientResponse,
    ClientUpdate,
    FinancialEntryCreate,
    FinancialEntryFilters,
    FinancialEntryResponse,
    FinancialEntryUpdate,
    ProductCreate,
    ProductFilters,
    ProductResponse,
    ProductUpdate,
    ProfessionalCreate,
    ProfessionalFilters,
    ProfessionalResponse,
    ProfessionalUpdate,
    ServiceCreate,
    ServiceFilters,
    ServiceResponse,
    ServiceUpdate,
)

from .resource_handler import ResourceConfig

APPOINTMENTS = ResourceConfig(
    resource_type="appointments",
    table="appointments",
    label="Appointment",
    create_schema=AppointmentCreate,
    update_schema=AppointmentUpdate,
    response_schema=AppointmentResponse,
    filter_schema=AppointmentFilters,
    ordering=(SortKey("appointment_date", descending=True),),
)

CLIENTS = ResourceConfig(
    resource_type="clients",
    table="clients",
    label="Client",
    create_schema=ClientCreate,
    update_schema=ClientUpdate,
    response_schema=ClientResponse,
    filter_schema=ClientFilters,
    ordering=(SortKey("name"),),
)

PRODUCTS = ResourceConfig(
    resource_type="products",
    table="products",
    label="Product",
    create_schema=ProductCreate,
    update_schema=ProductUpdate,
    response_schema=ProductResponse,
    filter_schema=ProductFilters,
    ordering=(SortKey("name"),),
)

FINANCIAL_ENTRIES = ResourceConfig(
    resource_type="financial",
    table="financial_entries",
    label="Financial entry",
    create_schema=FinancialEntryCreate,
    update_schema=FinancialEntryUpdate,
    response_schema=FinancialEntryResponse,
    filter_schema=FinancialEntryFilters,
    ordering=(SortKey("entry_date", descending=True),),
)

PROFESSIONALS = ResourceConfig(
    resource_type="professionals",
    table="professionals",
    label="Professional",
    create_schema=ProfessionalCreate,
    update_schema=ProfessionalUpdate,
    response_schema=ProfessionalResponse,
    filter_schema=ProfessionalFilters,
    ordering=(SortKey("name"),),
)

SERVICES = ResourceConfig(
    resource_type="services",
    table="services",
    label="Service",
    create_schema=ServiceCreate,
    update_schema=ServiceUpdate,
    response_schema=ServiceResponse,
    filter_schema=ServiceFilters,
    ordering=(SortKey("name"),),
)

RESOURCE_CONFIGS: dict[str, ResourceConfig] = {
    config.resource_type: config
    for config in (
        APPOINTMENTS,
        CLIENTS,
        PRODUCTS,
        FINANCIAL_ENTRIES,
        PROFESSIONALS,
        SERVICES,
    )
}


def get_resource_config(resource_type: str) -> ResourceConfig:
    """Look up a config by its resource type key (``KeyError`` if unknown)."""
    return RESOURCE_CONFIGS[resource_type]
