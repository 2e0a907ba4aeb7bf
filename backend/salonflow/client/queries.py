"""Read-through helpers: serve fresh cache entries, fetch everything else."""

from collections.abc import Mapping
from typing import Any
from urllib.parse import urlencode

from salonflow.client.api_client import ApiClient
from salonflow.client.cache_store import CacheStore, Listener, collection_key, item_key


class ResourceQueries:
    def __init__(self, api: ApiClient, cache: CacheStore):
        self._api = api
        self._cache = cache

    async def fetch_collection(
        self, resource_type: str, filters: Mapping[str, Any] | None = None
    ) -> list[dict[str, Any]]:
        key = self._collection_key(resource_type, filters)
        entry = self._cache.get(key)
        if entry is not None and not entry.stale:
            return entry.value
        generation = self._cache.generation(key)
        value = await self._api.list(resource_type, filters)
        self._cache.set(key, value, generation)
        return value

    async def fetch_item(self, resource_type: str, record_id: str) -> dict[str, Any]:
        key = item_key(resource_type, record_id)
        entry = self._cache.get(key)
        if entry is not None and not entry.stale:
            return entry.value
        generation = self._cache.generation(key)
        value = await self._api.get(resource_type, record_id)
        self._cache.set(key, value, generation)
        return value

    def watch_collection(
        self,
        resource_type: str,
        listener: Listener,
        filters: Mapping[str, Any] | None = None,
    ):
        """Keep a collection fresh after invalidation; ``listener`` receives each refetch."""
        key = self._collection_key(resource_type, filters)

        async def fetch() -> list[dict[str, Any]]:
            return await self._api.list(resource_type, filters)

        return self._cache.subscribe(key, fetch, listener)

    def watch_item(self, resource_type: str, record_id: str, listener: Listener):
        async def fetch() -> dict[str, Any]:
            return await self._api.get(resource_type, record_id)

        return self._cache.subscribe(item_key(resource_type, record_id), fetch, listener)

    @staticmethod
    def _collection_key(resource_type: str, filters: Mapping[str, Any] | None) -> str:
        # Filtered collections share the collection prefix so one invalidation covers them.
        active = sorted((k, str(v)) for k, v in (filters or {}).items() if v is not None)
        if not active:
            return collection_key(resource_type)
        return f"{collection_key(resource_type)}?{urlencode(active)}"
