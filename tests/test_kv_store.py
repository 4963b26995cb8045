"""Tests for the Redis REST key-value backend."""

from __future__ import annotations

import json

import httpx
import pytest

from tests.conftest import make_tools
from tools_directory.errors import StorageFailure
from tools_directory.store import KVToolStore


class FakeRedisRest:
    """Minimal in-memory stand-in for a Redis REST endpoint."""

    def __init__(self):
        self.data: dict[str, str] = {}
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        command = json.loads(request.content)
        if command[0] == "GET":
            return httpx.Response(200, json={"result": self.data.get(command[1])})
        if command[0] == "SET":
            self.data[command[1]] = command[2]
            return httpx.Response(200, json={"result": "OK"})
        return httpx.Response(400, json={"error": f"ERR unknown command '{command[0]}'"})


def make_store(handler, key: str = "tools") -> KVToolStore:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return KVToolStore(url="https://kv.example.com/", token="tok", key=key, client=client)


@pytest.mark.asyncio
async def test_missing_key_returns_empty():
    fake = FakeRedisRest()
    store = make_store(fake.handler)
    assert await store.load() == []


@pytest.mark.asyncio
async def test_save_then_load():
    fake = FakeRedisRest()
    store = make_store(fake.handler, key="tools")
    tools = make_tools(2)

    await store.save(tools)

    assert json.loads(fake.data["tools"])[1]["order"] == 2
    assert await store.load() == tools


@pytest.mark.asyncio
async def test_requests_carry_bearer_token():
    fake = FakeRedisRest()
    store = make_store(fake.handler)
    await store.load()

    request = fake.requests[0]
    assert request.headers["Authorization"] == "Bearer tok"
    assert request.url.host == "kv.example.com"
    assert json.loads(request.content) == ["GET", "tools"]


@pytest.mark.asyncio
async def test_already_decoded_result_is_accepted():
    def handler(request):
        return httpx.Response(
            200,
            json={"result": [{"id": "1", "name": "a", "description": "b", "url": "c", "order": 1}]},
        )

    tools = await make_store(handler).load()
    assert tools[0].name == "a"


@pytest.mark.asyncio
async def test_http_error_is_storage_failure():
    store = make_store(lambda request: httpx.Response(503, text="unavailable"))
    with pytest.raises(StorageFailure):
        await store.load()


@pytest.mark.asyncio
async def test_error_body_is_storage_failure():
    store = make_store(lambda request: httpx.Response(200, json={"error": "WRONGPASS"}))
    with pytest.raises(StorageFailure):
        await store.save(make_tools(1))


@pytest.mark.asyncio
async def test_transport_error_is_storage_failure():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(StorageFailure):
        await make_store(handler).load()


@pytest.mark.asyncio
async def test_close_leaves_injected_client_open():
    fake = FakeRedisRest()
    client = httpx.AsyncClient(transport=httpx.MockTransport(fake.handler))
    store = KVToolStore(url="https://kv.example.com", token="tok", client=client)
    await store.close()
    assert not client.is_closed
    await client.aclose()
