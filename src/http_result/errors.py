"""Exception hierarchy for http-result.

Transport and status faults raised by ``httpx`` are not re-typed; a
``Failure`` carries them as-is. The types below cover what this library adds.
"""

from __future__ import annotations

from typing import Any


class HttpResultError(Exception):
    """Base exception for all http-result errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ConfigurationError(HttpResultError):
    """Adapter options failed validation."""


class ResponseDecodeError(HttpResultError):
    """A response body could not be decoded into the requested type.

    The underlying parser error is chained as ``__cause__``.
    """

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        status_code: int | None = None,
        url: str | None = None,
        response_type: Any = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.status_code = status_code
        self.url = url
        self.response_type = response_type
