"""Pytest configuration and fixtures.

Provides the mock HTTP engine used by adapter tests and logging setup.
Adapter tests never touch the network: every client is backed by
``httpx.MockTransport``.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
import logging
from typing import Any

import httpx
import pytest

BASE_URL = "https://example.test"

# =============================================================================
# Test Doubles
# =============================================================================


def method_echo_handler(status_code: int = 200) -> Callable[[httpx.Request], httpx.Response]:
    """Respond with ``"<method> success"`` and *status_code* for every request."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            status_code, text=f"{request.method.lower()} success"
        )

    return handler


def make_client(
    handler: Callable[[httpx.Request], httpx.Response | Awaitable[httpx.Response]],
    **kwargs: Any,
) -> httpx.AsyncClient:
    """Build an ``AsyncClient`` backed by *handler* instead of the network."""
    return httpx.AsyncClient(
        base_url=BASE_URL, transport=httpx.MockTransport(handler), **kwargs
    )


@pytest.fixture
def client_factory() -> Callable[..., httpx.AsyncClient]:
    """Expose ``make_client`` to tests that need a bespoke handler."""
    return make_client


@pytest.fixture
def ok_client() -> httpx.AsyncClient:
    """Client answering 200 with ``"<method> success"``."""
    return make_client(method_echo_handler(200))


@pytest.fixture
def conflict_client() -> httpx.AsyncClient:
    """Client answering 409 Conflict with ``"<method> success"`` as body."""
    return make_client(method_echo_handler(409))


@pytest.fixture
def recording_client() -> tuple[httpx.AsyncClient, list[httpx.Request]]:
    """Client answering 200 ``"ok"`` that records every request it receives."""
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, text="ok")

    return make_client(handler), seen


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def quiet_noisy_libraries():
    """Suppress noisy third-party loggers."""
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("hpack").setLevel(logging.WARNING)
