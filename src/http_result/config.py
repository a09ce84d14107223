"""Configuration: frozen per-call adapter options."""

from __future__ import annotations

from dataclasses import dataclass, field
import math
from typing import TYPE_CHECKING

from http_result.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(frozen=True)
class AdapterOptions:
    """Immutable options shared by every adapter call.

    Nothing is read from the environment; the ``httpx.AsyncClient`` keeps
    ownership of transport settings.

    Example:
        options = AdapterOptions(timeout=5.0, default_headers={"Accept": "application/json"})
        result = await get_result(client, "/users/1", dict, options=options)
    """

    #: Surface non-2xx responses as ``httpx.HTTPStatusError`` (and so ``Failure``).
    raise_for_status: bool = True
    #: Per-request timeout in seconds; *None* defers to the client's timeout.
    timeout: float | None = None
    #: Applied before the request configurator, which can override them.
    default_headers: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate options so misconfiguration fails before any request."""
        if self.timeout is not None and (
            isinstance(self.timeout, bool)
            or not isinstance(self.timeout, (int, float))
            or not math.isfinite(self.timeout)
            or self.timeout < 0
        ):
            raise ConfigurationError(
                f"timeout must be a finite number ≥ 0, got {self.timeout!r}",
                hint="Pass None to use the client's own timeout.",
            )
        for name, value in self.default_headers.items():
            if not isinstance(name, str) or not isinstance(value, str):
                raise ConfigurationError(
                    f"default_headers entries must be str -> str, got {name!r}: {value!r}",
                    hint="Convert header values to strings before passing them.",
                )
        # Snapshot so later mutation of the caller's mapping has no effect.
        object.__setattr__(self, "default_headers", dict(self.default_headers))


DEFAULT_OPTIONS = AdapterOptions()
