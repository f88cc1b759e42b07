r"""Contains the asynchronous curl request with bounded automatic
retry."""

from __future__ import annotations

__all__ = ["request_async"]

from functools import partial
from typing import TYPE_CHECKING, Any

from recurl.attempt import execute_attempt_async
from recurl.core.config import RequestOptions
from recurl.retry import AsyncRetryExecutor, RetryConfig
from recurl.transport import CurlTransport, build_curl_args

if TYPE_CHECKING:
    from recurl.models import CurlResponse


async def request_async(
    url: str,
    options: RequestOptions | None = None,
    *,
    transport: CurlTransport | None = None,
    **overrides: Any,
) -> CurlResponse[Any]:
    r"""Send an HTTP request through curl with bounded automatic retry.

    Each attempt runs one curl process. When curl exits with a non-zero
    code, the ``should_retry`` predicate is called with curl's stderr and
    decides whether another attempt is made, up to ``max_retries``
    attempts in total. A clean exit is parsed into a ``CurlResponse``,
    whatever its HTTP status.

    Args:
        url: The URL to send the request to.
        options: Optional request options. If None, default
            RequestOptions values are used.
        transport: Optional transport running curl. If None, a default
            CurlTransport is used.
        **overrides: Fields replacing the matching fields of
            ``options`` (e.g. ``method="POST"``, ``max_retries=5``).

    Returns:
        The parsed response.

    Raises:
        RequestError: If curl failed on the last allowed attempt.
        MalformedResponseError: If the output of curl does not look like
            a raw HTTP response.
        BodyDecodeError: If a JSON body cannot be decoded.
        ValueError: If the options are invalid.

    Example:
        ```pycon
        >>> import asyncio
        >>> from recurl import request_async
        >>> response = asyncio.run(
        ...     request_async(
        ...         "https://api.example.com/data",
        ...         method="POST",
        ...         body={"key": "value"},
        ...         should_retry=lambda failure: "Connection refused" in failure,
        ...     )
        ... )  # doctest: +SKIP

        ```
    """
    options = (options if options is not None else RequestOptions()).merge(**overrides)
    transport = transport if transport is not None else CurlTransport()
    curl_args = build_curl_args(url, options)
    executor = AsyncRetryExecutor(RetryConfig.from_options(options))
    return await executor.execute(
        url=url,
        options=options,
        curl_args=curl_args,
        attempt_func=partial(
            execute_attempt_async, transport, curl_args, url=url, options=options
        ),
    )
