r"""Asynchronous retry executor for curl requests.

This module provides the AsyncRetryExecutor class that runs attempts
one after the other until one succeeds or the attempt ceiling is
reached.
"""

from __future__ import annotations

__all__ = ["AsyncRetryExecutor"]

import logging
from typing import TYPE_CHECKING, Any

from recurl.retry.decider import RetryDecider
from recurl.retry.state import AttemptState
from recurl.utils.exceptions import raise_final_error

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Sequence

    from recurl.attempt import AttemptResult
    from recurl.core.config import RequestOptions
    from recurl.models import CurlResponse
    from recurl.retry.config import RetryConfig

logger: logging.Logger = logging.getLogger(__name__)


class AsyncRetryExecutor:
    """Executes async curl attempts with bounded retry.

    Attempts run sequentially, never in parallel. After each failed
    attempt the failure counter is incremented, and another attempt is
    made only if the counter is still below ``max_retries`` and the
    retry predicate, awaited if needed, approves the failure text. With
    a predicate that always approves, exactly ``max_retries`` attempts
    are made. Without a predicate, exactly one attempt is made. Retries
    are immediate.

    Attributes:
        config: Retry configuration.
        decider: Logic for deciding whether to retry.

    Example:
        ```pycon
        >>> import asyncio
        >>> from functools import partial
        >>> from recurl.attempt import execute_attempt_async
        >>> from recurl.core.config import RequestOptions
        >>> from recurl.retry import AsyncRetryExecutor, RetryConfig
        >>> from recurl.transport import CurlTransport, build_curl_args
        >>> async def main():
        ...     url = "https://api.example.com/data"
        ...     options = RequestOptions(should_retry=lambda failure: True)
        ...     args = build_curl_args(url, options)
        ...     executor = AsyncRetryExecutor(RetryConfig.from_options(options))
        ...     return await executor.execute(
        ...         url=url,
        ...         options=options,
        ...         curl_args=args,
        ...         attempt_func=partial(
        ...             execute_attempt_async, CurlTransport(), args, url=url, options=options
        ...         ),
        ...     )
        ...
        >>> asyncio.run(main())  # doctest: +SKIP

        ```
    """

    def __init__(self, retry_config: RetryConfig) -> None:
        self.config = retry_config
        self.decider: RetryDecider = RetryDecider(
            retry_config.max_retries,
            retry_config.should_retry,
        )

    async def execute(
        self,
        url: str,
        options: RequestOptions,
        curl_args: Sequence[str],
        attempt_func: Callable[[], Awaitable[AttemptResult]],
    ) -> CurlResponse[Any]:
        """Execute attempts until one succeeds or no retry is allowed.

        Args:
            url: The target URL. Used for logging and error context.
            options: The effective request options. Used for error
                context.
            curl_args: The curl argument vector. Used for error context.
            attempt_func: Coroutine function running one attempt.

        Returns:
            The response of the first successful attempt.

        Raises:
            RequestError: If the last allowed attempt failed.
            ResponseParseError: If an attempt produced output that
                cannot be parsed.
        """
        state = AttemptState()
        while True:
            result = await attempt_func()
            if result.response is not None:
                if state.attempts:
                    logger.debug(
                        f"{options.method} request to {url} succeeded after "
                        f"{state.attempts} failed attempt(s)"
                    )
                return result.response

            state = state.record_failure(result.failure, result.exit_code)
            if not await self.decider.should_retry_async(state):
                raise_final_error(url=url, options=options, curl_args=curl_args, state=state)
            logger.debug(
                f"{options.method} to {url}: will retry "
                f"(attempt {state.attempts + 1}/{self.config.max_retries})"
            )
