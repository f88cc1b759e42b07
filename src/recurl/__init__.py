r"""recurl - HTTP requests through the curl executable, with bounded
retry.

This package sends HTTP requests by running curl, parses its raw output
into a typed response, retries failed attempts when asked to, and
builds reusable client instances sharing a base URL, headers and proxy.

Key Features:
    - Typed responses: status code, lower-cased headers, JSON-decoded body
    - Multi-valued ``set-cookie`` header
    - Bounded, immediate retry driven by a (possibly async) predicate
    - Client instances with deep-merged default options
    - Structured errors carrying the full request context
    - Sync and async APIs

Example:
    ```pycon
    >>> import asyncio
    >>> from recurl import create_instance, request_async
    >>> response = asyncio.run(request_async("https://api.example.com/data"))  # doctest: +SKIP
    >>> api = create_instance(base_url="https://api.example.com", headers={"Accept": "application/json"})
    >>> response = asyncio.run(api("/users", max_retries=5))  # doctest: +SKIP

    ```
"""

from __future__ import annotations

__all__ = [
    "AsyncCurlClient",
    "BodyDecodeError",
    "CurlClient",
    "CurlResponse",
    "CurlTransport",
    "InstanceConfig",
    "MalformedResponseError",
    "RequestContext",
    "RequestError",
    "RequestOptions",
    "ResponseParseError",
    "__version__",
    "create_instance",
    "request",
    "request_async",
]

from importlib.metadata import PackageNotFoundError, version

from recurl.client import CurlClient
from recurl.client_async import AsyncCurlClient, create_instance
from recurl.core.config import InstanceConfig, RequestOptions
from recurl.exceptions import (
    BodyDecodeError,
    MalformedResponseError,
    RequestContext,
    RequestError,
    ResponseParseError,
)
from recurl.models import CurlResponse
from recurl.request import request
from recurl.request_async import request_async
from recurl.transport import CurlTransport

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
