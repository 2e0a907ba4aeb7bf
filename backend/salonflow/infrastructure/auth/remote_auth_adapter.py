"""Identity-provider adapter — resolves bearer tokens via the provider's user endpoint.

The provider exposes ``GET {base_url}/auth/v1/user``; a 200 response carries
the user object (``id``, ``email``), anything else means the token is not
valid. Network faults are logged and treated as "no principal" so a flaky
provider never lets an unauthenticated request through.
"""

import logging

import httpx

from salonflow.application.interfaces import AuthAdapter
from salonflow.domain.entities import Principal

logger = logging.getLogger(__name__)


class RemoteAuthAdapter(AuthAdapter):
    """Infrastructure adapter — validates tokens against the identity provider."""

    def __init__(
        self,
        base_url: str,
        api_key: str = "",
        timeout: float = 10.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._timeout = timeout
        self._http_client = http_client

    def _get_headers(self, token: str) -> dict[str, str]:
        headers = {"Authorization": f"Bearer {token}"}
        if self._api_key:
            headers["apikey"] = self._api_key
        return headers

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout)

    async def validate_token(self, token: str) -> Principal | None:
        if not token:
            return None

        client = await self._get_client()
        should_close = self._http_client is None
        try:
            response = await client.get(
                f"{self._base_url}/auth/v1/user", headers=self._get_headers(token)
            )
        except httpx.HTTPError as exc:
            logger.warning("Identity provider unreachable: %s", exc)
            return None
        finally:
            if should_close:
                await client.aclose()

        if response.status_code != 200:
            logger.info("Token rejected by identity provider (status=%d)", response.status_code)
            return None

        try:
            data = response.json()
        except ValueError:
            logger.warning("Identity provider returned a non-JSON body")
            return None
        user_id = data.get("id") if isinstance(data, dict) else None
        if not user_id:
            return None
        return Principal(id=str(user_id), email=str(data.get("email") or ""))
