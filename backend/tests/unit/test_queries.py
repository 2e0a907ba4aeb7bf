"""Unit tests for the read-through ResourceQueries."""

import asyncio

import pytest

from salonflow.client.cache_store import CacheStore
from salonflow.client.queries import ResourceQueries


class FakeApiClient:
    def __init__(self):
        self.calls: list[tuple] = []
        self.version = 1

    async def list(self, resource_type, filters=None):
        self.calls.append(("list", resource_type, dict(filters or {})))
        return [{"v": self.version}]

    async def get(self, resource_type, record_id):
        self.calls.append(("get", resource_type, record_id))
        return {"id": record_id, "v": self.version}


@pytest.fixture
def api() -> FakeApiClient:
    return FakeApiClient()


@pytest.fixture
def cache() -> CacheStore:
    return CacheStore()


@pytest.fixture
def queries(api, cache) -> ResourceQueries:
    return ResourceQueries(api, cache)


@pytest.mark.asyncio
async def test_fresh_entry_is_served_from_cache(queries, api):
    await queries.fetch_collection("services")
    await queries.fetch_collection("services")

    assert len(api.calls) == 1


@pytest.mark.asyncio
async def test_stale_entry_is_fetched_again(queries, api, cache):
    await queries.fetch_item("services", "s1")
    api.version = 2
    cache.invalidate("services:s1")

    item = await queries.fetch_item("services", "s1")

    assert item == {"id": "s1", "v": 2}
    assert len(api.calls) == 2


@pytest.mark.asyncio
async def test_filtered_collections_are_cached_separately_under_the_same_prefix(queries, cache):
    await queries.fetch_collection("appointments", {"attended": True})
    await queries.fetch_collection("appointments")

    stale = cache.invalidate("appointments")

    assert sorted(stale) == ["appointments", "appointments?attended=True"]


@pytest.mark.asyncio
async def test_watched_collection_refreshes_after_invalidation(queries, api, cache):
    await queries.fetch_collection("services")
    seen = []
    queries.watch_collection("services", seen.append)

    api.version = 2
    cache.invalidate("services")
    await cache.drain()

    assert seen == [[{"v": 2}]]
    assert await queries.fetch_collection("services") == [{"v": 2}]
    assert len(api.calls) == 2


@pytest.mark.asyncio
async def test_watched_item_refreshes_after_invalidation(queries, api, cache):
    await queries.fetch_item("services", "s1")
    seen = []
    queries.watch_item("services", "s1", seen.append)

    cache.invalidate("services")
    await cache.drain()

    assert seen == [{"id": "s1", "v": 1}]


@pytest.mark.asyncio
async def test_read_started_before_an_invalidation_is_not_cached_fresh(queries, api, cache):
    release = asyncio.Event()
    direct_list = api.list

    async def slow_list(resource_type, filters=None):
        value = await direct_list(resource_type, filters)
        await release.wait()
        return value

    api.list = slow_list
    read = asyncio.create_task(queries.fetch_collection("services"))
    await asyncio.sleep(0)

    api.version = 2
    cache.invalidate("services")
    release.set()

    assert await read == [{"v": 1}]
    assert cache.get("services").stale is True

    api.list = direct_list
    assert await queries.fetch_collection("services") == [{"v": 2}]
    assert cache.get("services").stale is False
