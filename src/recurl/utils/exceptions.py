r"""Exception handling utilities for curl request retries."""

from __future__ import annotations

__all__ = ["raise_final_error"]

import logging
from typing import TYPE_CHECKING, NoReturn

from recurl.exceptions import RequestContext, RequestError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from recurl.core.config import RequestOptions
    from recurl.retry.state import AttemptState

logger: logging.Logger = logging.getLogger(__name__)


def raise_final_error(
    *,
    url: str,
    options: RequestOptions,
    curl_args: Sequence[str],
    state: AttemptState,
) -> NoReturn:
    """Create and raise the final error once no attempt is left.

    Args:
        url: The target URL.
        options: The effective request options.
        curl_args: The argument vector passed to curl.
        state: The state after the last failed attempt.

    Raises:
        RequestError: Always, with the failure text of the last attempt.
    """
    logger.debug(
        f"{options.method} request to {url} failed after {state.attempts} attempt(s) "
        f"(max_retries={options.max_retries}, exit code {state.exit_code})"
    )
    raise RequestError(
        state.failure,
        RequestContext(
            url=url,
            options=options,
            attempts=state.attempts,
            max_retries=options.max_retries,
            exit_code=state.exit_code,
            curl_args=tuple(curl_args),
        ),
    )
