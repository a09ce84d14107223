"""Result monad for HTTP calls that should not raise.

A ``Result`` is exactly one of ``Success`` (holding the value) or ``Failure``
(holding the exception). Both variants are frozen; every combinator returns a
new ``Result`` (or the same object when nothing changes) instead of mutating.

Combinators never catch on their own. ``map`` and ``recover`` let a raising
transform propagate; use ``map_catching`` / ``recover_catching`` when the
transform is fallible.
"""

from __future__ import annotations

import dataclasses
import typing

from http_result._cancellation import is_cancellation

if typing.TYPE_CHECKING:
    from collections.abc import Callable

TSuccess = typing.TypeVar("TSuccess")
TFailure = typing.TypeVar("TFailure", bound=Exception)


@dataclasses.dataclass(frozen=True, slots=True)
class Success[TSuccess]:
    """A completed operation and its value."""

    value: TSuccess

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False

    def get_or_none(self) -> TSuccess:
        return self.value

    def error_or_none(self) -> None:
        return None

    def get_or_default(self, default: object) -> TSuccess:
        return self.value

    def get_or_else(self, on_failure: Callable[[Exception], object]) -> TSuccess:
        return self.value

    def get_or_raise(self) -> TSuccess:
        return self.value

    def fold[R](
        self,
        on_success: Callable[[TSuccess], R],
        on_failure: Callable[[Exception], R],
    ) -> R:
        """Return ``on_success(value)``; ``on_failure`` is never called."""
        return on_success(self.value)

    def map[R](self, transform: Callable[[TSuccess], R]) -> Success[R]:
        """Wrap ``transform(value)`` in a new ``Success``.

        Exceptions raised by ``transform`` propagate to the caller.
        """
        return Success(transform(self.value))

    def map_catching[R](self, transform: Callable[[TSuccess], R]) -> Result[R]:
        """Like ``map`` but an ordinary fault in ``transform`` becomes ``Failure``."""
        from http_result.catching import run_safe

        return run_safe(lambda: transform(self.value))

    def recover(self, transform: Callable[[Exception], object]) -> Success[TSuccess]:
        return self

    def recover_catching(
        self, transform: Callable[[Exception], object]
    ) -> Success[TSuccess]:
        return self

    def on_success(self, action: Callable[[TSuccess], object]) -> Success[TSuccess]:
        action(self.value)
        return self

    def on_failure(self, action: Callable[[Exception], object]) -> Success[TSuccess]:
        return self


@dataclasses.dataclass(frozen=True, slots=True)
class Failure[TFailure]:
    """A failed operation, containing the error.

    Cancellation is a control signal and not an error: a ``Failure`` never
    holds one.
    """

    error: TFailure

    def __post_init__(self) -> None:
        if is_cancellation(self.error):  # type: ignore[arg-type]
            raise TypeError(
                "Failure cannot hold a cancellation signal; re-raise it instead"
            )

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True

    def get_or_none(self) -> None:
        return None

    def error_or_none(self) -> TFailure:
        return self.error

    def get_or_default[R](self, default: R) -> R:
        return default

    def get_or_else[R](self, on_failure: Callable[[TFailure], R]) -> R:
        return on_failure(self.error)

    def get_or_raise(self) -> typing.NoReturn:
        """Re-raise the stored error unchanged."""
        raise self.error  # type: ignore[misc]

    def fold[R](
        self,
        on_success: Callable[[typing.Any], R],
        on_failure: Callable[[TFailure], R],
    ) -> R:
        """Return ``on_failure(error)``; ``on_success`` is never called."""
        return on_failure(self.error)

    def map(self, transform: Callable[[typing.Any], object]) -> Failure[TFailure]:
        return self

    def map_catching(
        self, transform: Callable[[typing.Any], object]
    ) -> Failure[TFailure]:
        return self

    def recover[R](self, transform: Callable[[TFailure], R]) -> Success[R]:
        """Turn the failure into ``Success(transform(error))``.

        Exceptions raised by ``transform`` propagate to the caller.
        """
        return Success(transform(self.error))

    def recover_catching[R](self, transform: Callable[[TFailure], R]) -> Result[R]:
        from http_result.catching import run_safe

        return run_safe(lambda: transform(self.error))

    def on_success(self, action: Callable[[typing.Any], object]) -> Failure[TFailure]:
        return self

    def on_failure(self, action: Callable[[TFailure], object]) -> Failure[TFailure]:
        action(self.error)
        return self


Result = Success[TSuccess] | Failure[Exception]
