"""Deferred adapters: schedule a request and hand back its task.

Each function must be called while an event loop is running. The returned
``asyncio.Task`` starts immediately; awaiting it yields the same ``Result`` the
matching adapter in ``http_result.adapters`` would return. ``task.cancel()``
cancels the in-flight request and ``await task`` then raises
``asyncio.CancelledError``.

Keep a reference to the task until it is awaited; the event loop only holds a
weak one.

Example:
    users = get_result_async(client, "/users", list[User])
    groups = get_result_async(client, "/groups", list[Group])
    users_result, groups_result = await users, await groups
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Any

from http_result.adapters import request_result

if TYPE_CHECKING:
    from collections.abc import Callable

    import httpx

    from http_result.config import AdapterOptions
    from http_result.request import RequestConfigurator
    from http_result.result import Result


def request_result_async(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    response_type: Any = str,
    *,
    configure: RequestConfigurator | None = None,
    decoder: Callable[[httpx.Response], Any] | None = None,
    options: AdapterOptions | None = None,
) -> asyncio.Task[Result[Any]]:
    """Schedule ``request_result`` as a task named ``"<METHOD> <url>"``.

    Raises:
        RuntimeError: No event loop is running in this thread.
    """
    loop = asyncio.get_running_loop()
    verb = method.upper()
    return loop.create_task(
        request_result(
            client,
            verb,
            url,
            response_type,
            configure=configure,
            decoder=decoder,
            options=options,
        ),
        name=f"{verb} {url}",
    )


def get_result_async(
    client: httpx.AsyncClient,
    url: str,
    response_type: Any = str,
    *,
    configure: RequestConfigurator | None = None,
    decoder: Callable[[httpx.Response], Any] | None = None,
    options: AdapterOptions | None = None,
) -> asyncio.Task[Result[Any]]:
    return request_result_async(
        client,
        "GET",
        url,
        response_type,
        configure=configure,
        decoder=decoder,
        options=options,
    )


def post_result_async(
    client: httpx.AsyncClient,
    url: str,
    response_type: Any = str,
    *,
    configure: RequestConfigurator | None = None,
    decoder: Callable[[httpx.Response], Any] | None = None,
    options: AdapterOptions | None = None,
) -> asyncio.Task[Result[Any]]:
    return request_result_async(
        client,
        "POST",
        url,
        response_type,
        configure=configure,
        decoder=decoder,
        options=options,
    )


def put_result_async(
    client: httpx.AsyncClient,
    url: str,
    response_type: Any = str,
    *,
    configure: RequestConfigurator | None = None,
    decoder: Callable[[httpx.Response], Any] | None = None,
    options: AdapterOptions | None = None,
) -> asyncio.Task[Result[Any]]:
    return request_result_async(
        client,
        "PUT",
        url,
        response_type,
        configure=configure,
        decoder=decoder,
        options=options,
    )


def delete_result_async(
    client: httpx.AsyncClient,
    url: str,
    response_type: Any = str,
    *,
    configure: RequestConfigurator | None = None,
    decoder: Callable[[httpx.Response], Any] | None = None,
    options: AdapterOptions | None = None,
) -> asyncio.Task[Result[Any]]:
    return request_result_async(
        client,
        "DELETE",
        url,
        response_type,
        configure=configure,
        decoder=decoder,
        options=options,
    )


def patch_result_async(
    client: httpx.AsyncClient,
    url: str,
    response_type: Any = str,
    *,
    configure: RequestConfigurator | None = None,
    decoder: Callable[[httpx.Response], Any] | None = None,
    options: AdapterOptions | None = None,
) -> asyncio.Task[Result[Any]]:
    return request_result_async(
        client,
        "PATCH",
        url,
        response_type,
        configure=configure,
        decoder=decoder,
        options=options,
    )


def head_result_async(
    client: httpx.AsyncClient,
    url: str,
    response_type: Any = str,
    *,
    configure: RequestConfigurator | None = None,
    decoder: Callable[[httpx.Response], Any] | None = None,
    options: AdapterOptions | None = None,
) -> asyncio.Task[Result[Any]]:
    return request_result_async(
        client,
        "HEAD",
        url,
        response_type,
        configure=configure,
        decoder=decoder,
        options=options,
    )


def options_result_async(
    client: httpx.AsyncClient,
    url: str,
    response_type: Any = str,
    *,
    configure: RequestConfigurator | None = None,
    decoder: Callable[[httpx.Response], Any] | None = None,
    options: AdapterOptions | None = None,
) -> asyncio.Task[Result[Any]]:
    return request_result_async(
        client,
        "OPTIONS",
        url,
        response_type,
        configure=configure,
        decoder=decoder,
        options=options,
    )
