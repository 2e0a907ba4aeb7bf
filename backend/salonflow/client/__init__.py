from .api_client import (
    ApiClient,
    ApiClientError,
    ResourceNotFoundError,
    ServerFaultError,
    TransportFaultError,
    ValidationRejectedError,
)
from .cache_store import CacheEntry, CacheStore, collection_key, item_key
from .mutation_executor import MutationExecutor, MutationInFlightError, WriteKind, WriteRequest
from .queries import ResourceQueries
from .ui_state import UIState, UIStateStore
from .container import ClientContainer

__all__ = [
    "ApiClient",
    "ApiClientError",
    "ResourceNotFoundError",
    "ServerFaultError",
    "TransportFaultError",
    "ValidationRejectedError",
    "CacheEntry",
    "CacheStore",
    "collection_key",
    "item_key",
    "MutationExecutor",
    "MutationInFlightError",
    "WriteKind",
    "WriteRequest",
    "ResourceQueries",
    "UIState",
    "UIStateStore",
    "ClientContainer",
]
