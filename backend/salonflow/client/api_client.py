"""HTTP client for the resource API — the client layer's only way to reach the server.

Non-2xx responses are mapped onto a small exception hierarchy so callers
can tell a rejected payload from a missing record from a server fault:

    422            → ValidationRejectedError (carries the field errors)
    404            → ResourceNotFoundError
    other non-2xx  → ServerFaultError
    network/timeout → TransportFaultError (retryable)
"""

import logging
from collections.abc import Mapping
from typing import Any

import httpx

logger = logging.getLogger(__name__)


class ApiClientError(Exception):
    """Base class for every error the API client raises."""


class ValidationRejectedError(ApiClientError):
    """The server refused the payload; ``errors`` holds ``{field, message}`` dicts."""

    def __init__(self, errors: list[dict[str, str]]):
        self.errors = errors
        fields = ", ".join(e.get("field", "?") for e in errors) or "payload"
        super().__init__(f"Validation rejected: {fields}")


class ResourceNotFoundError(ApiClientError):
    def __init__(self, message: str = "Not found"):
        super().__init__(message)


class ServerFaultError(ApiClientError):
    """Any other non-success status, including 5xx."""

    def __init__(self, status_code: int, message: str = ""):
        self.status_code = status_code
        detail = f": {message}" if message else ""
        super().__init__(f"Server responded {status_code}{detail}")


class TransportFaultError(ApiClientError):
    """The request never got a response (connection error, timeout)."""

    retryable = True


class ApiClient:
    """Thin async wrapper over ``/api/v1/<resource_type>`` routes.

    Uses the injected ``httpx.AsyncClient`` when given (tests pass one built on
    ``httpx.MockTransport``); otherwise opens a short-lived client per call.
    """

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        timeout: float = 15.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._token = token
        self._timeout = timeout
        self._http_client = http_client

    def _get_headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        return headers

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout)

    async def list(
        self, resource_type: str, filters: Mapping[str, Any] | None = None
    ) -> list[dict[str, Any]]:
        params = {k: _param(v) for k, v in (filters or {}).items() if v is not None}
        return await self._request("GET", f"/{resource_type}", params=params)

    async def get(self, resource_type: str, record_id: str) -> dict[str, Any]:
        return await self._request("GET", f"/{resource_type}/{record_id}")

    async def create(self, resource_type: str, payload: Mapping[str, Any]) -> dict[str, Any]:
        return await self._request("POST", f"/{resource_type}", json=dict(payload))

    async def update(
        self, resource_type: str, record_id: str, payload: Mapping[str, Any]
    ) -> dict[str, Any]:
        return await self._request("PUT", f"/{resource_type}/{record_id}", json=dict(payload))

    async def delete(self, resource_type: str, record_id: str) -> dict[str, Any]:
        return await self._request("DELETE", f"/{resource_type}/{record_id}")

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        json: Any = None,
    ) -> Any:
        url = f"{self._base_url}{path}"
        client = await self._get_client()
        should_close = self._http_client is None

        try:
            response = await client.request(
                method, url, headers=self._get_headers(), params=params, json=json
            )
        except httpx.TransportError as exc:
            logger.warning("%s %s failed: %s", method, path, exc)
            raise TransportFaultError(f"{method} {path}: {exc}") from exc
        finally:
            if should_close:
                await client.aclose()

        if response.is_success:
            return response.json()
        self._raise_for_status(response)

    @staticmethod
    def _raise_for_status(response: httpx.Response) -> None:
        try:
            data = response.json()
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}

        if response.status_code == 422:
            raise ValidationRejectedError(list(data.get("errors", [])))
        if response.status_code == 404:
            raise ResourceNotFoundError(str(data.get("error", "Not found")))
        raise ServerFaultError(response.status_code, str(data.get("error", response.text)))


def _param(value: Any) -> str:
    # Query strings carry booleans the way the server's filter schemas parse them.
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
