"""Result combinators whose callbacks may be coroutine functions.

Same contracts as the ``Success``/``Failure`` methods: variant dispatch is the
only branching, each callback runs at most once, and nothing here catches.
A callback may return a plain value or an awaitable; awaitables are awaited.
"""

from __future__ import annotations

import inspect
from typing import TYPE_CHECKING, Any, TypeVar

from http_result.result import Failure, Result, Success

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

T = TypeVar("T")
R = TypeVar("R")


async def _resolve(value: Awaitable[R] | R) -> R:
    if inspect.isawaitable(value):
        return await value
    return value


async def fold_async(
    result: Result[T],
    on_success: Callable[[T], Awaitable[R] | R],
    on_failure: Callable[[Exception], Awaitable[R] | R],
) -> R:
    """Await whichever callback matches the variant and return its value."""
    if isinstance(result, Success):
        return await _resolve(on_success(result.value))
    return await _resolve(on_failure(result.error))


async def map_async(
    result: Result[T], transform: Callable[[T], Awaitable[R] | R]
) -> Result[R]:
    """``Success(await transform(value))``; a ``Failure`` is returned as-is."""
    if isinstance(result, Success):
        return Success(await _resolve(transform(result.value)))
    return result


async def recover_async(
    result: Result[T], transform: Callable[[Exception], Awaitable[R] | R]
) -> Result[T | R]:
    """``Success(await transform(error))``; a ``Success`` is returned as-is."""
    if isinstance(result, Failure):
        return Success(await _resolve(transform(result.error)))
    return result


async def on_success_async(
    result: Result[T], action: Callable[[T], Awaitable[Any] | Any]
) -> Result[T]:
    if isinstance(result, Success):
        await _resolve(action(result.value))
    return result


async def on_failure_async(
    result: Result[T], action: Callable[[Exception], Awaitable[Any] | Any]
) -> Result[T]:
    if isinstance(result, Failure):
        await _resolve(action(result.error))
    return result
