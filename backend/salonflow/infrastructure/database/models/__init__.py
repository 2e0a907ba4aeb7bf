from .resource_models import (
    AppointmentModel,
    ClientModel,
    FinancialEntryModel,
    ProductModel,
    ProfessionalModel,
    ServiceModel,
)
from .business_settings import BusinessSettingsModel

# Table name → ORM model, looked up by the resource store adapter.
MODEL_REGISTRY = {
    model.__tablename__: model
    for model in (
        AppointmentModel,
        ClientModel,
        FinancialEntryModel,
        ProductModel,
        ProfessionalModel,
        ServiceModel,
    )
}

__all__ = [
    "AppointmentModel",
    "ClientModel",
    "FinancialEntryModel",
    "ProductModel",
    "ProfessionalModel",
    "ServiceModel",
    "BusinessSettingsModel",
    "MODEL_REGISTRY",
]
