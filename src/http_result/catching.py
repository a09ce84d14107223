"""Cancellation-safe catching helpers.

This is the single place where raised faults are turned into ``Result``
values. Contract for every helper here:

- The block runs exactly once.
- A normal return ``v`` becomes ``Success(v)``.
- A cancellation signal (``asyncio.CancelledError`` or
  ``concurrent.futures.CancelledError``) is re-raised unchanged.
- Any other ``Exception`` becomes ``Failure(exc)`` with the original object.
- Non-``Exception`` base exceptions (``KeyboardInterrupt``, ``SystemExit``)
  are never caught.
"""

from __future__ import annotations

import inspect
import logging
from typing import TYPE_CHECKING, Any, TypeVar

from http_result._cancellation import CANCELLATION_TYPES, is_cancellation
from http_result.result import Failure, Result, Success

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

T = TypeVar("T")
R = TypeVar("R")
S = TypeVar("S")

logger = logging.getLogger(__name__)

__all__ = ["is_cancellation", "run_catching", "run_catching_with", "run_safe"]


def _to_failure(exc: Exception) -> Failure[Exception]:
    logger.debug("Captured failure: %r", exc)
    return Failure(exc)


def run_safe(block: Callable[[], T]) -> Result[T]:
    """Run *block* and return its outcome as a ``Result``.

    Example:
        result = run_safe(lambda: int("42"))
        assert result == Success(42)
    """
    try:
        return Success(block())
    except CANCELLATION_TYPES as exc:
        logger.debug("Propagating cancellation: %r", exc)
        raise
    except Exception as exc:
        return _to_failure(exc)


async def run_catching(block: Callable[[], Awaitable[T] | T]) -> Result[T]:
    """Await *block* and return its outcome as a ``Result``.

    *block* may be a coroutine function or a plain callable; an awaitable
    return value is awaited inside the catch so its faults are captured too.
    ``asyncio.CancelledError`` raised while suspended is re-raised.
    """
    try:
        value: Any = block()
        if inspect.isawaitable(value):
            value = await value
        return Success(value)
    except CANCELLATION_TYPES as exc:
        logger.debug("Propagating cancellation: %r", exc)
        raise
    except Exception as exc:
        return _to_failure(exc)


async def run_catching_with(
    receiver: S, block: Callable[[S], Awaitable[R] | R]
) -> Result[R]:
    """Receiver-scoped ``run_catching``: awaits ``block(receiver)``.

    Example:
        result = await run_catching_with(client, lambda c: c.get("/health"))
    """
    return await run_catching(lambda: block(receiver))
