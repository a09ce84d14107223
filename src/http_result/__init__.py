"""http-result: ``Success``/``Failure`` results for httpx requests.

Public API:
    - Success, Failure, Result: the tagged result value and its combinators
    - run_safe(), run_catching(), run_catching_with(): cancellation-safe catchers
    - get_result() ... options_result(): awaited per-verb adapters
    - get_result_async() ... options_result_async(): task-returning adapters
    - ResultClient: method-style facade over an ``httpx.AsyncClient``
"""

from __future__ import annotations

import logging

from http_result.adapters import (
    delete_result,
    get_result,
    head_result,
    options_result,
    patch_result,
    post_result,
    put_result,
    request_result,
)
from http_result.catching import (
    is_cancellation,
    run_catching,
    run_catching_with,
    run_safe,
)
from http_result.client import ResultClient
from http_result.combinators import (
    fold_async,
    map_async,
    on_failure_async,
    on_success_async,
    recover_async,
)
from http_result.config import AdapterOptions
from http_result.decoding import decode_body
from http_result.deferred import (
    delete_result_async,
    get_result_async,
    head_result_async,
    options_result_async,
    patch_result_async,
    post_result_async,
    put_result_async,
    request_result_async,
)
from http_result.errors import (
    ConfigurationError,
    HttpResultError,
    ResponseDecodeError,
)
from http_result.request import RequestBuilder, RequestConfigurator
from http_result.result import Failure, Result, Success

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("http-result")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("http_result").addHandler(logging.NullHandler())

__all__ = [
    "AdapterOptions",
    "ConfigurationError",
    "Failure",
    "HttpResultError",
    "RequestBuilder",
    "RequestConfigurator",
    "ResponseDecodeError",
    "Result",
    "ResultClient",
    "Success",
    "decode_body",
    "delete_result",
    "delete_result_async",
    "fold_async",
    "get_result",
    "get_result_async",
    "head_result",
    "head_result_async",
    "is_cancellation",
    "map_async",
    "on_failure_async",
    "on_success_async",
    "options_result",
    "options_result_async",
    "patch_result",
    "patch_result_async",
    "post_result",
    "post_result_async",
    "put_result",
    "put_result_async",
    "recover_async",
    "request_result",
    "request_result_async",
    "run_catching",
    "run_catching_with",
    "run_safe",
]
