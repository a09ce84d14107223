"""Decode an ``httpx.Response`` body into a caller-specified type.

The type token plays the role of a reified generic: callers pass the target
type at runtime and never write decode calls themselves.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any

import httpx
from pydantic import TypeAdapter, ValidationError

from http_result.errors import ResponseDecodeError


@lru_cache(maxsize=256)
def _cached_adapter(response_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(response_type)


def _type_adapter(response_type: Any) -> TypeAdapter[Any]:
    try:
        return _cached_adapter(response_type)
    except TypeError:
        # Unhashable type expressions (e.g. some Annotated metadata) skip the cache.
        return TypeAdapter(response_type)


def decode_body(response: httpx.Response, response_type: Any = str) -> Any:
    """Return the body of *response* as an instance of *response_type*.

    ``str``, ``bytes``, ``httpx.Response`` and ``None`` are passed through
    without parsing; everything else is validated as JSON with pydantic.

    Raises:
        ResponseDecodeError: The body is not valid for *response_type*.
    """
    if response_type is str:
        return response.text
    if response_type is bytes:
        return response.content
    if response_type is httpx.Response:
        return response
    if response_type is None or response_type is type(None):
        return None

    adapter = _type_adapter(response_type)
    try:
        return adapter.validate_json(response.content)
    except ValidationError as exc:
        raise ResponseDecodeError(
            f"Could not decode response body as {response_type!r} "
            f"(status={response.status_code}): {exc.error_count()} validation error(s)",
            hint="Check the response_type or pass a custom decoder.",
            status_code=response.status_code,
            url=str(response.request.url),
            response_type=response_type,
        ) from exc
