"""ResultClient facade: forwarding, default options, and client ownership."""

from __future__ import annotations

import asyncio

import httpx
import pytest

from http_result.client import ResultClient
from http_result.config import AdapterOptions
from http_result.result import Failure, Success

pytestmark = pytest.mark.integration

VERBS = ["get", "post", "put", "delete", "patch", "head", "options"]


@pytest.mark.asyncio
@pytest.mark.parametrize("verb", VERBS)
async def test_inline_methods_forward_to_adapters(
    ok_client: httpx.AsyncClient, verb: str
) -> None:
    async with ok_client:
        api = ResultClient(ok_client)
        result = await getattr(api, verb)(f"/sample_{verb}_url")

    assert result == Success(f"{verb} success")


@pytest.mark.asyncio
@pytest.mark.parametrize("verb", VERBS)
async def test_deferred_methods_return_tasks(
    ok_client: httpx.AsyncClient, verb: str
) -> None:
    async with ok_client:
        api = ResultClient(ok_client)
        task = getattr(api, f"{verb}_async")(f"/sample_{verb}_url")
        assert isinstance(task, asyncio.Task)
        result = await task

    assert result == Success(f"{verb} success")


@pytest.mark.asyncio
async def test_default_options_apply_unless_overridden(
    conflict_client: httpx.AsyncClient,
) -> None:
    async with conflict_client:
        api = ResultClient(
            conflict_client, options=AdapterOptions(raise_for_status=False)
        )
        lenient = await api.get("/x")
        strict = await api.get("/x", options=AdapterOptions())

    assert lenient == Success("get success")
    assert isinstance(strict, Failure)


@pytest.mark.asyncio
async def test_borrowed_client_is_not_closed(ok_client: httpx.AsyncClient) -> None:
    async with ResultClient(ok_client) as api:
        assert api.client is ok_client

    assert not ok_client.is_closed
    await ok_client.aclose()


@pytest.mark.asyncio
async def test_created_client_is_owned_and_closed() -> None:
    transport = httpx.MockTransport(lambda request: httpx.Response(200, text="pong"))

    async with ResultClient.create(
        base_url="https://example.test", transport=transport
    ) as api:
        assert await api.get("/ping") == Success("pong")
        inner = api.client

    assert inner.is_closed
