r"""Execute a single curl attempt.

An attempt runs the transport once. A clean exit is parsed into a
``CurlResponse``; any other exit is reported as a failed
``AttemptResult`` carrying curl's stderr, so that the retry executor can
decide what to do next.
"""

from __future__ import annotations

__all__ = ["AttemptResult", "execute_attempt", "execute_attempt_async"]

import dataclasses
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from recurl.utils.response import parse_response

if TYPE_CHECKING:
    from collections.abc import Sequence

    from recurl.core.config import RequestOptions
    from recurl.models import CurlResponse
    from recurl.transport import CurlTransport, TransportResult

logger: logging.Logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AttemptResult:
    """Outcome of one attempt.

    Attributes:
        response: The parsed response when curl exited cleanly.
        failure: The failure text (curl's stderr) otherwise.
        exit_code: The curl exit code.
    """

    response: CurlResponse[Any] | None = None
    failure: str = ""
    exit_code: int = 0

    @property
    def succeeded(self) -> bool:
        return self.response is not None


def _handle_result(result: TransportResult, url: str, options: RequestOptions) -> AttemptResult:
    if not result.succeeded:
        logger.debug(
            f"{options.method} request to {url} exited with code {result.exit_code}: "
            f"{result.stderr.strip()}"
        )
        return AttemptResult(failure=result.stderr, exit_code=result.exit_code)
    response = parse_response(result.stdout, proxied=options.proxied)
    return AttemptResult(
        response=dataclasses.replace(response, url=url, method=options.method),
        exit_code=result.exit_code,
    )


def execute_attempt(
    transport: CurlTransport,
    args: Sequence[str],
    *,
    url: str,
    options: RequestOptions,
) -> AttemptResult:
    """Run one blocking attempt.

    Args:
        transport: The transport running curl.
        args: The curl arguments.
        url: The target URL.
        options: The effective request options.

    Returns:
        The outcome of the attempt.

    Raises:
        ResponseParseError: If curl exited cleanly but its output cannot
            be parsed.
    """
    return _handle_result(transport.run(args), url, options)


async def execute_attempt_async(
    transport: CurlTransport,
    args: Sequence[str],
    *,
    url: str,
    options: RequestOptions,
) -> AttemptResult:
    """Run one attempt without blocking the event loop.

    Args:
        transport: The transport running curl.
        args: The curl arguments.
        url: The target URL.
        options: The effective request options.

    Returns:
        The outcome of the attempt.

    Raises:
        ResponseParseError: If curl exited cleanly but its output cannot
            be parsed.
    """
    return _handle_result(await transport.run_async(args), url, options)
