from .base import Base, OwnedRecordMixin
from .session import engine, async_session_factory, get_db_session
from .models import MODEL_REGISTRY, BusinessSettingsModel

__all__ = [
    "Base",
    "OwnedRecordMixin",
    "engine",
    "async_session_factory",
    "get_db_session",
    "MODEL_REGISTRY",
    "BusinessSettingsModel",
]
