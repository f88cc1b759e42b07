r"""Synchronous retry executor for curl requests."""

from __future__ import annotations

__all__ = ["RetryExecutor"]

import logging
from typing import TYPE_CHECKING, Any

from recurl.retry.decider import RetryDecider
from recurl.retry.state import AttemptState
from recurl.utils.exceptions import raise_final_error

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from recurl.attempt import AttemptResult
    from recurl.core.config import RequestOptions
    from recurl.models import CurlResponse
    from recurl.retry.config import RetryConfig

logger: logging.Logger = logging.getLogger(__name__)


class RetryExecutor:
    """Executes blocking curl attempts with bounded retry.

    This is the synchronous counterpart of ``AsyncRetryExecutor`` and
    follows the same counting rules. The retry predicate must return a
    plain bool.

    Attributes:
        config: Retry configuration.
        decider: Logic for deciding whether to retry.
    """

    def __init__(self, retry_config: RetryConfig) -> None:
        self.config = retry_config
        self.decider: RetryDecider = RetryDecider(
            retry_config.max_retries,
            retry_config.should_retry,
        )

    def execute(
        self,
        url: str,
        options: RequestOptions,
        curl_args: Sequence[str],
        attempt_func: Callable[[], AttemptResult],
    ) -> CurlResponse[Any]:
        """Execute attempts until one succeeds or no retry is allowed.

        Args:
            url: The target URL. Used for logging and error context.
            options: The effective request options. Used for error
                context.
            curl_args: The curl argument vector. Used for error context.
            attempt_func: Function running one attempt.

        Returns:
            The response of the first successful attempt.

        Raises:
            RequestError: If the last allowed attempt failed.
            ResponseParseError: If an attempt produced output that
                cannot be parsed.
            TypeError: If the retry predicate returns an awaitable.
        """
        state = AttemptState()
        while True:
            result = attempt_func()
            if result.response is not None:
                if state.attempts:
                    logger.debug(
                        f"{options.method} request to {url} succeeded after "
                        f"{state.attempts} failed attempt(s)"
                    )
                return result.response

            state = state.record_failure(result.failure, result.exit_code)
            if not self.decider.should_retry(state):
                raise_final_error(url=url, options=options, curl_args=curl_args, state=state)
            logger.debug(
                f"{options.method} to {url}: will retry "
                f"(attempt {state.attempts + 1}/{self.config.max_retries})"
            )
