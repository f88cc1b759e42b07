r"""Contains the synchronous curl request with bounded automatic
retry."""

from __future__ import annotations

__all__ = ["request"]

from functools import partial
from typing import TYPE_CHECKING, Any

from recurl.attempt import execute_attempt
from recurl.core.config import RequestOptions
from recurl.retry import RetryConfig, RetryExecutor
from recurl.transport import CurlTransport, build_curl_args

if TYPE_CHECKING:
    from recurl.models import CurlResponse


def request(
    url: str,
    options: RequestOptions | None = None,
    *,
    transport: CurlTransport | None = None,
    **overrides: Any,
) -> CurlResponse[Any]:
    r"""Send an HTTP request through curl with bounded automatic retry,
    blocking until it completes.

    This is the synchronous counterpart of ``request_async``. The
    ``should_retry`` predicate must return a plain bool.

    Args:
        url: The URL to send the request to.
        options: Optional request options. If None, default
            RequestOptions values are used.
        transport: Optional transport running curl. If None, a default
            CurlTransport is used.
        **overrides: Fields replacing the matching fields of
            ``options``.

    Returns:
        The parsed response.

    Raises:
        RequestError: If curl failed on the last allowed attempt.
        MalformedResponseError: If the output of curl does not look like
            a raw HTTP response.
        BodyDecodeError: If a JSON body cannot be decoded.
        TypeError: If the retry predicate returns an awaitable.
        ValueError: If the options are invalid.

    Example:
        ```pycon
        >>> from recurl import request
        >>> response = request("https://api.example.com/data")  # doctest: +SKIP
        >>> response.status_code  # doctest: +SKIP
        200

        ```
    """
    options = (options if options is not None else RequestOptions()).merge(**overrides)
    transport = transport if transport is not None else CurlTransport()
    curl_args = build_curl_args(url, options)
    executor = RetryExecutor(RetryConfig.from_options(options))
    return executor.execute(
        url=url,
        options=options,
        curl_args=curl_args,
        attempt_func=partial(execute_attempt, transport, curl_args, url=url, options=options),
    )
