"""Per-request configurator passed to every adapter.

An adapter creates a fresh ``RequestBuilder``, hands it to the caller's
``configure`` callback for in-place edits, then forwards the populated fields
to ``httpx.AsyncClient.build_request``.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Self

import httpx

_UNSET: Any = object()


@dataclass
class RequestBuilder:
    """Mutable request settings for a single call.

    Example:
        def configure(req: RequestBuilder) -> None:
            req.header("Authorization", f"Bearer {token}")
            req.json = {"name": "widget"}

        result = await post_result(client, "/items", dict, configure=configure)
    """

    method: str
    url: str
    # Case-insensitive, so a configurator header replaces a default of any casing.
    headers: httpx.Headers = field(default_factory=httpx.Headers)
    params: dict[str, Any] = field(default_factory=dict)
    json: Any = _UNSET
    content: bytes | str | None = None
    data: dict[str, Any] | None = None
    files: Any = None
    timeout: Any = _UNSET
    extensions: dict[str, Any] = field(default_factory=dict)

    def header(self, name: str, value: str) -> Self:
        self.headers[name] = value
        return self

    def parameter(self, name: str, value: Any) -> Self:
        self.params[name] = value
        return self

    def to_kwargs(self) -> dict[str, Any]:
        """Keyword arguments for ``build_request``; unset fields are omitted."""
        kwargs: dict[str, Any] = {}
        if self.headers:
            kwargs["headers"] = self.headers
        if self.params:
            kwargs["params"] = self.params
        # ``json=None`` is a legitimate body ("null"), hence the sentinel.
        if self.json is not _UNSET:
            kwargs["json"] = self.json
        if self.content is not None:
            kwargs["content"] = self.content
        if self.data is not None:
            kwargs["data"] = self.data
        if self.files is not None:
            kwargs["files"] = self.files
        if self.timeout is not _UNSET:
            kwargs["timeout"] = self.timeout
        if self.extensions:
            kwargs["extensions"] = self.extensions
        return kwargs


type RequestConfigurator = Callable[[RequestBuilder], object]
