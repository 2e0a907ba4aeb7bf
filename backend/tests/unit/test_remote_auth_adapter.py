"""Unit tests for the RemoteAuthAdapter."""

import httpx
import pytest

from salonflow.domain.entities import Principal
from salonflow.infrastructure.auth.remote_auth_adapter import RemoteAuthAdapter


def _adapter(handler) -> RemoteAuthAdapter:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return RemoteAuthAdapter("https://id.example.com/", api_key="anon", http_client=client)


@pytest.mark.asyncio
async def test_valid_token_resolves_principal():
    seen: dict[str, httpx.Request] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["request"] = request
        return httpx.Response(200, json={"id": "u1", "email": "u1@example.com"})

    principal = await _adapter(handler).validate_token("tok")

    assert principal == Principal(id="u1", email="u1@example.com")
    assert str(seen["request"].url) == "https://id.example.com/auth/v1/user"
    assert seen["request"].headers["Authorization"] == "Bearer tok"
    assert seen["request"].headers["apikey"] == "anon"


@pytest.mark.asyncio
async def test_rejected_token_yields_none():
    adapter = _adapter(lambda request: httpx.Response(401, json={"msg": "invalid JWT"}))

    assert await adapter.validate_token("expired") is None


@pytest.mark.asyncio
async def test_network_fault_yields_none():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    assert await _adapter(handler).validate_token("tok") is None


@pytest.mark.asyncio
async def test_empty_token_is_not_sent():
    calls = []
    adapter = _adapter(lambda request: calls.append(request) or httpx.Response(200, json={}))

    assert await adapter.validate_token("") is None
    assert calls == []
