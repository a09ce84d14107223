"""Result-returning adapters over ``httpx.AsyncClient``.

One coroutine per HTTP verb. Each builds the request, applies the optional
configurator, sends it through the caller's client, checks the status and
decodes the body, all inside ``run_catching``. Any fault along the way becomes
``Failure``; cancellation propagates.

Example:
    async with httpx.AsyncClient(base_url="https://api.example.com") as client:
        result = await get_result(client, "/users/1", User)
        name = result.map(lambda u: u.name).get_or_default("anonymous")
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from http_result.catching import run_catching
from http_result.config import DEFAULT_OPTIONS
from http_result.decoding import decode_body
from http_result.request import RequestBuilder

if TYPE_CHECKING:
    from collections.abc import Callable

    import httpx

    from http_result.config import AdapterOptions
    from http_result.request import RequestConfigurator
    from http_result.result import Result

logger = logging.getLogger(__name__)


async def _send_and_decode(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    response_type: Any,
    configure: RequestConfigurator | None,
    decoder: Callable[[httpx.Response], Any] | None,
    options: AdapterOptions,
) -> Any:
    builder = RequestBuilder(method=method, url=url)
    builder.headers.update(options.default_headers)
    if options.timeout is not None:
        builder.timeout = options.timeout
    if configure is not None:
        configure(builder)

    request = client.build_request(builder.method, builder.url, **builder.to_kwargs())
    response = await client.send(request)
    logger.debug("%s %s -> %d", request.method, request.url, response.status_code)

    if options.raise_for_status:
        response.raise_for_status()
    if decoder is not None:
        return decoder(response)
    return decode_body(response, response_type)


async def request_result(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    response_type: Any = str,
    *,
    configure: RequestConfigurator | None = None,
    decoder: Callable[[httpx.Response], Any] | None = None,
    options: AdapterOptions | None = None,
) -> Result[Any]:
    """Send *method* to *url* and return the decoded body as a ``Result``.

    Args:
        client: Caller-owned client; it is neither closed nor mutated.
        method: HTTP verb, case-insensitive.
        url: Absolute URL, or relative to the client's ``base_url``.
        response_type: Target type for the body (``str`` by default).
        configure: Callback that edits the ``RequestBuilder`` in place.
        decoder: Explicit decoder; takes precedence over *response_type*.
        options: Adapter options; ``AdapterOptions()`` when omitted.

    Returns:
        ``Success(body)`` or ``Failure(exc)`` where *exc* is whatever the
        client, the status check or the decoder raised.

    Raises:
        asyncio.CancelledError: The calling task was cancelled mid-request.
    """
    opts = options if options is not None else DEFAULT_OPTIONS
    return await run_catching(
        lambda: _send_and_decode(
            client, method.upper(), url, response_type, configure, decoder, opts
        )
    )


async def get_result(
    client: httpx.AsyncClient,
    url: str,
    response_type: Any = str,
    *,
    configure: RequestConfigurator | None = None,
    decoder: Callable[[httpx.Response], Any] | None = None,
    options: AdapterOptions | None = None,
) -> Result[Any]:
    """GET *url* and return the decoded body as a ``Result``."""
    return await request_result(
        client,
        "GET",
        url,
        response_type,
        configure=configure,
        decoder=decoder,
        options=options,
    )


async def post_result(
    client: httpx.AsyncClient,
    url: str,
    response_type: Any = str,
    *,
    configure: RequestConfigurator | None = None,
    decoder: Callable[[httpx.Response], Any] | None = None,
    options: AdapterOptions | None = None,
) -> Result[Any]:
    """POST to *url* and return the decoded body as a ``Result``."""
    return await request_result(
        client,
        "POST",
        url,
        response_type,
        configure=configure,
        decoder=decoder,
        options=options,
    )


async def put_result(
    client: httpx.AsyncClient,
    url: str,
    response_type: Any = str,
    *,
    configure: RequestConfigurator | None = None,
    decoder: Callable[[httpx.Response], Any] | None = None,
    options: AdapterOptions | None = None,
) -> Result[Any]:
    """PUT to *url* and return the decoded body as a ``Result``."""
    return await request_result(
        client,
        "PUT",
        url,
        response_type,
        configure=configure,
        decoder=decoder,
        options=options,
    )


async def delete_result(
    client: httpx.AsyncClient,
    url: str,
    response_type: Any = str,
    *,
    configure: RequestConfigurator | None = None,
    decoder: Callable[[httpx.Response], Any] | None = None,
    options: AdapterOptions | None = None,
) -> Result[Any]:
    """DELETE *url* and return the decoded body as a ``Result``."""
    return await request_result(
        client,
        "DELETE",
        url,
        response_type,
        configure=configure,
        decoder=decoder,
        options=options,
    )


async def patch_result(
    client: httpx.AsyncClient,
    url: str,
    response_type: Any = str,
    *,
    configure: RequestConfigurator | None = None,
    decoder: Callable[[httpx.Response], Any] | None = None,
    options: AdapterOptions | None = None,
) -> Result[Any]:
    """PATCH *url* and return the decoded body as a ``Result``."""
    return await request_result(
        client,
        "PATCH",
        url,
        response_type,
        configure=configure,
        decoder=decoder,
        options=options,
    )


async def head_result(
    client: httpx.AsyncClient,
    url: str,
    response_type: Any = str,
    *,
    configure: RequestConfigurator | None = None,
    decoder: Callable[[httpx.Response], Any] | None = None,
    options: AdapterOptions | None = None,
) -> Result[Any]:
    """HEAD *url*; servers usually send no body, so ``None`` or ``httpx.Response`` are typical types."""
    return await request_result(
        client,
        "HEAD",
        url,
        response_type,
        configure=configure,
        decoder=decoder,
        options=options,
    )


async def options_result(
    client: httpx.AsyncClient,
    url: str,
    response_type: Any = str,
    *,
    configure: RequestConfigurator | None = None,
    decoder: Callable[[httpx.Response], Any] | None = None,
    options: AdapterOptions | None = None,
) -> Result[Any]:
    """OPTIONS *url* and return the decoded body as a ``Result``."""
    return await request_result(
        client,
        "OPTIONS",
        url,
        response_type,
        configure=configure,
        decoder=decoder,
        options=options,
    )
