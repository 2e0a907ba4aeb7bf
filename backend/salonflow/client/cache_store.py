"""Client-side cache of last-known server state, keyed by resource.

Keys are ``<resource_type>`` for collections and ``<resource_type>:<id>``
for single records. ``invalidate(prefix)`` marks every entry whose key
starts with the prefix stale and refetches the subscribed ones in the
background; listeners get the fresh value once it arrives.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any

logger = logging.getLogger(__name__)

Fetcher = Callable[[], Awaitable[Any]]
Listener = Callable[[Any], None]


def collection_key(resource_type: str) -> str:
    return resource_type


def item_key(resource_type: str, record_id: str) -> str:
    return f"{resource_type}:{record_id}"


@dataclass
class CacheEntry:
    value: Any
    stale: bool = False


@dataclass
class _Subscription:
    fetcher: Fetcher
    listeners: list[Listener] = field(default_factory=list)


class CacheStore:
    """Key-addressed cache. Never authoritative: the server is.

    Every key carries an invalidation generation. A fetch records the
    generation before it starts; if an invalidation lands while the fetch
    is in flight, its result is stored as stale and subscribed keys are
    fetched once more, so a value read before a write is never marked fresh.
    """

    def __init__(self) -> None:
        self._entries: dict[str, CacheEntry] = {}
        self._generations: dict[str, int] = {}
        self._subscriptions: dict[str, _Subscription] = {}
        self._refetching: dict[str, asyncio.Task] = {}

    def get(self, key: str) -> CacheEntry | None:
        return self._entries.get(key)

    def generation(self, key: str) -> int:
        """Current invalidation generation of ``key``; pass it back to ``set``."""
        return self._generations.setdefault(key, 0)

    def set(self, key: str, value: Any, generation: int | None = None) -> bool:
        """Store a fetched value. Returns False when the value predates an invalidation.

        Without ``generation`` the value is taken as fresh.
        """
        current_generation = self.generation(key)
        fresh = generation is None or generation == current_generation
        if not fresh:
            current = self._entries.get(key)
            if current is not None and not current.stale:
                # A later fetch already stored the current generation.
                return False
        self._entries[key] = CacheEntry(value=value, stale=not fresh)
        if not fresh:
            logger.debug("Fetch of '%s' raced an invalidation; kept stale", key)
            self._schedule(key)
        return fresh

    def subscribe(
        self, key: str, fetcher: Fetcher, listener: Listener | None = None
    ) -> Callable[[], None]:
        """Register how to refetch ``key`` and who to tell. Returns an unsubscribe callable."""
        subscription = self._subscriptions.setdefault(key, _Subscription(fetcher))
        subscription.fetcher = fetcher
        if listener is not None:
            subscription.listeners.append(listener)

        def unsubscribe() -> None:
            current = self._subscriptions.get(key)
            if current is None:
                return
            if listener is not None and listener in current.listeners:
                current.listeners.remove(listener)
            if not current.listeners:
                del self._subscriptions[key]

        return unsubscribe

    def invalidate(self, prefix: str) -> list[str]:
        """Mark matching entries stale and schedule refetches. Returns the stale keys."""
        # Generations also cover keys whose first fetch is still in flight.
        for key in self._generations:
            if key.startswith(prefix):
                self._generations[key] += 1
        stale = [key for key in self._entries if key.startswith(prefix)]
        for key in stale:
            self._entries[key].stale = True
        for key in stale:
            self._schedule(key)
        if stale:
            logger.debug("Invalidated %d cache entries under '%s'", len(stale), prefix)
        return stale

    async def refetch(self, key: str) -> Any:
        """Fetch ``key`` now through its subscription, store and broadcast the result.

        Listeners are only told about values stored fresh.
        """
        subscription = self._subscriptions.get(key)
        if subscription is None:
            raise KeyError(f"No fetcher subscribed for cache key '{key}'")
        generation = self.generation(key)
        value = await subscription.fetcher()
        if self.set(key, value, generation):
            for listener in list(subscription.listeners):
                listener(value)
        return value

    async def drain(self) -> None:
        """Wait for every background refetch scheduled so far."""
        while self._refetching:
            await asyncio.gather(*list(self._refetching.values()), return_exceptions=True)

    def _schedule(self, key: str) -> None:
        if key in self._subscriptions and key not in self._refetching:
            self._refetching[key] = asyncio.create_task(self._refetch(key))

    async def _refetch(self, key: str) -> None:
        try:
            while key in self._subscriptions:
                await self.refetch(key)
                entry = self._entries.get(key)
                if entry is None or not entry.stale:
                    break
        except Exception:
            # The entry stays stale; the next read through the queries fetches again.
            logger.warning("Background refetch of '%s' failed", key, exc_info=True)
        finally:
            self._refetching.pop(key, None)
