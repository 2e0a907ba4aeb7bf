"""Client container — builds and owns one set of client-side collaborators."""

import httpx

from salonflow.config import Settings, get_settings
from salonflow.client.api_client import ApiClient
from salonflow.client.cache_store import CacheStore
from salonflow.client.mutation_executor import MutationExecutor
from salonflow.client.queries import ResourceQueries
from salonflow.client.ui_state import UIStateStore


class ClientContainer:
    """Explicit composition root for the client layer.

    Each container has its own cache; nothing here is a module-level singleton.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        token: str | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        settings = settings or get_settings()
        self.api = ApiClient(
            base_url=settings.api_base_url,
            token=token,
            timeout=settings.client_timeout_seconds,
            http_client=http_client,
        )
        self.cache = CacheStore()
        self.mutations = MutationExecutor(self.api, self.cache)
        self.queries = ResourceQueries(self.api, self.cache)
        self.ui_state = UIStateStore(settings.ui_state_file)
        self.ui_state.hydrate()

    async def aclose(self) -> None:
        """Wait for background refetches to settle."""
        await self.cache.drain()
