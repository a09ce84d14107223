"""Cancellation classification shared by the result types and the catchers.

Kept dependency-free so ``result`` and ``catching`` can both import it.
"""

from __future__ import annotations

import asyncio
import concurrent.futures

# ``concurrent.futures.CancelledError`` is an ``Exception`` subclass, so a plain
# ``except Exception`` would swallow it; ``asyncio.CancelledError`` is not.
CANCELLATION_TYPES: tuple[type[BaseException], ...] = (
    asyncio.CancelledError,
    concurrent.futures.CancelledError,
)


def is_cancellation(exc: BaseException) -> bool:
    """Return True when *exc* signals that the running context was cancelled."""
    return isinstance(exc, CANCELLATION_TYPES)
