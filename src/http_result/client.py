"""Method-style facade over the adapters.

``ResultClient`` binds an ``httpx.AsyncClient`` and default ``AdapterOptions``
so call sites read ``await api.get("/users", list[User])``. It adds no
behavior of its own; every method forwards to ``http_result.adapters`` or
``http_result.deferred``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Self

import httpx

from http_result import adapters, deferred

if TYPE_CHECKING:
    import asyncio
    from types import TracebackType

    from http_result.config import AdapterOptions
    from http_result.result import Result


class ResultClient:
    """Result-returning view of an ``httpx.AsyncClient``.

    A client passed in stays owned by the caller and is never closed here.
    A client built with ``ResultClient.create`` is owned and closed on
    ``aclose()`` or when leaving ``async with``.

    Example:
        async with ResultClient.create(base_url="https://api.example.com") as api:
            result = await api.get("/users/1", User)
            task = api.post_async("/audit", configure=lambda r: r.header("X-Trace", "1"))
            audit = await task
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        *,
        options: AdapterOptions | None = None,
    ) -> None:
        self._client = client
        self._options = options
        self._owns_client = False

    @classmethod
    def create(cls, *, options: AdapterOptions | None = None, **client_kwargs: Any) -> Self:
        """Build an owned ``httpx.AsyncClient`` from *client_kwargs*."""
        instance = cls(httpx.AsyncClient(**client_kwargs), options=options)
        instance._owns_client = True
        return instance

    @property
    def client(self) -> httpx.AsyncClient:
        return self._client

    @property
    def default_options(self) -> AdapterOptions | None:
        return self._options

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    def _kwargs(self, kwargs: dict[str, Any]) -> dict[str, Any]:
        kwargs.setdefault("options", self._options)
        return kwargs

    # --- Inline (awaited) requests ---

    async def request(
        self, method: str, url: str, response_type: Any = str, **kwargs: Any
    ) -> Result[Any]:
        return await adapters.request_result(
            self._client, method, url, response_type, **self._kwargs(kwargs)
        )

    async def get(self, url: str, response_type: Any = str, **kwargs: Any) -> Result[Any]:
        return await self.request("GET", url, response_type, **kwargs)

    async def post(self, url: str, response_type: Any = str, **kwargs: Any) -> Result[Any]:
        return await self.request("POST", url, response_type, **kwargs)

    async def put(self, url: str, response_type: Any = str, **kwargs: Any) -> Result[Any]:
        return await self.request("PUT", url, response_type, **kwargs)

    async def delete(self, url: str, response_type: Any = str, **kwargs: Any) -> Result[Any]:
        return await self.request("DELETE", url, response_type, **kwargs)

    async def patch(self, url: str, response_type: Any = str, **kwargs: Any) -> Result[Any]:
        return await self.request("PATCH", url, response_type, **kwargs)

    async def head(self, url: str, response_type: Any = str, **kwargs: Any) -> Result[Any]:
        return await self.request("HEAD", url, response_type, **kwargs)

    async def options(self, url: str, response_type: Any = str, **kwargs: Any) -> Result[Any]:
        return await self.request("OPTIONS", url, response_type, **kwargs)

    # --- Deferred (task) requests ---

    def request_async(
        self, method: str, url: str, response_type: Any = str, **kwargs: Any
    ) -> asyncio.Task[Result[Any]]:
        return deferred.request_result_async(
            self._client, method, url, response_type, **self._kwargs(kwargs)
        )

    def get_async(
        self, url: str, response_type: Any = str, **kwargs: Any
    ) -> asyncio.Task[Result[Any]]:
        return self.request_async("GET", url, response_type, **kwargs)

    def post_async(
        self, url: str, response_type: Any = str, **kwargs: Any
    ) -> asyncio.Task[Result[Any]]:
        return self.request_async("POST", url, response_type, **kwargs)

    def put_async(
        self, url: str, response_type: Any = str, **kwargs: Any
    ) -> asyncio.Task[Result[Any]]:
        return self.request_async("PUT", url, response_type, **kwargs)

    def delete_async(
        self, url: str, response_type: Any = str, **kwargs: Any
    ) -> asyncio.Task[Result[Any]]:
        return self.request_async("DELETE", url, response_type, **kwargs)

    def patch_async(
        self, url: str, response_type: Any = str, **kwargs: Any
    ) -> asyncio.Task[Result[Any]]:
        return self.request_async("PATCH", url, response_type, **kwargs)

    def head_async(
        self, url: str, response_type: Any = str, **kwargs: Any
    ) -> asyncio.Task[Result[Any]]:
        return self.request_async("HEAD", url, response_type, **kwargs)

    def options_async(
        self, url: str, response_type: Any = str, **kwargs: Any
    ) -> asyncio.Task[Result[Any]]:
        return self.request_async("OPTIONS", url, response_type, **kwargs)
