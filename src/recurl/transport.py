r"""Curl process transport.

This module builds the curl argument vector for a request and runs the
curl executable, either blocking or as an asyncio subprocess. The
transport only reports what the process produced: interpreting the
output is left to ``recurl.attempt``.
"""

from __future__ import annotations

__all__ = [
    "SPAWN_FAILURE_EXIT_CODE",
    "CurlTransport",
    "TransportResult",
    "build_curl_args",
    "serialize_body",
]

import asyncio
import contextlib
import json
import logging
import subprocess
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from recurl.core.config import DEFAULT_CURL_BINARY, JSON_CONTENT_TYPE

if TYPE_CHECKING:
    from collections.abc import Sequence

    from recurl.core.config import RequestOptions

logger: logging.Logger = logging.getLogger(__name__)

# Exit code reported when the curl process could not be started
SPAWN_FAILURE_EXIT_CODE = -1

BASE_ARGS = ("--silent", "--show-error", "--include")


@dataclass(frozen=True)
class TransportResult:
    """Outcome of one curl process.

    Attributes:
        exit_code: The process exit status. 0 means curl obtained a
            response, whatever its HTTP status.
        stdout: The raw response text.
        stderr: The failure diagnostics.
    """

    exit_code: int
    stdout: str
    stderr: str

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0


def serialize_body(body: Any) -> tuple[str | None, bool]:
    r"""Serialize a request body for curl.

    Args:
        body: The request body. Only ``None`` means "no body": an empty
            string is sent as an empty body, and ``0`` or ``False`` are
            sent as JSON.

    Returns:
        A tuple ``(data, is_json)``. ``data`` is None when there is no
        body. ``is_json`` tells whether the body was serialized to JSON.

    Example:
        ```pycon
        >>> from recurl.transport import serialize_body
        >>> serialize_body("a=1")
        ('a=1', False)
        >>> serialize_body({"key": [1, 2]})
        ('{"key": [1, 2]}', True)

        ```
    """
    if body is None:
        return None, False
    if isinstance(body, str):
        return body, False
    return json.dumps(body), True


def build_curl_args(url: str, options: RequestOptions) -> tuple[str, ...]:
    r"""Build the curl argument vector of a request.

    Args:
        url: The target URL.
        options: The effective request options.

    Returns:
        The arguments to pass to the curl executable.

    Example:
        ```pycon
        >>> from recurl.core.config import RequestOptions
        >>> from recurl.transport import build_curl_args
        >>> build_curl_args("https://example.com", RequestOptions(headers={"Accept": "*/*"}))
        ('--silent', '--show-error', '--include', '--request', 'GET', '--url', 'https://example.com', '--header', 'Accept: */*')

        ```
    """
    args = [*BASE_ARGS, "--request", options.method, "--url", url]
    if options.proxy:
        args.extend(("--proxy", options.proxy))
    for key, value in options.headers.items():
        args.extend(("--header", f"{key}: {value}"))
    data, is_json = serialize_body(options.body)
    if data is not None:
        if is_json:
            args.extend(("--header", f"Content-Type: {JSON_CONTENT_TYPE}"))
        args.extend(("--data-raw", data))
    args.extend(options.extra_args)
    return tuple(args)


def _decode(output: bytes | None) -> str:
    return (output or b"").decode("utf-8", errors="replace")


class CurlTransport:
    """Run the curl executable.

    Args:
        binary: Name or path of the curl executable.

    Example:
        ```pycon
        >>> from recurl.transport import CurlTransport
        >>> transport = CurlTransport()
        >>> transport.command(["--version"])
        ['curl', '--version']
        >>> result = transport.run(["--version"])  # doctest: +SKIP

        ```
    """

    def __init__(self, binary: str = DEFAULT_CURL_BINARY) -> None:
        self.binary = binary

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(binary={self.binary!r})"

    def command(self, args: Sequence[str]) -> list[str]:
        return [self.binary, *args]

    def run(self, args: Sequence[str]) -> TransportResult:
        """Run curl and block until it exits.

        Args:
            args: The curl arguments.

        Returns:
            The outcome of the process. A process that cannot be started
            is reported as a failure with ``SPAWN_FAILURE_EXIT_CODE``.
        """
        try:
            completed = subprocess.run(self.command(args), capture_output=True, check=False)
        except OSError as exc:
            logger.debug(f"Failed to start {self.binary}: {exc}")
            return TransportResult(exit_code=SPAWN_FAILURE_EXIT_CODE, stdout="", stderr=str(exc))
        return TransportResult(
            exit_code=completed.returncode,
            stdout=_decode(completed.stdout),
            stderr=_decode(completed.stderr),
        )

    async def run_async(self, args: Sequence[str]) -> TransportResult:
        """Run curl as an asyncio subprocess and wait until it exits.

        Args:
            args: The curl arguments.

        Returns:
            The outcome of the process. A process that cannot be started
            is reported as a failure with ``SPAWN_FAILURE_EXIT_CODE``.

        Raises:
            asyncio.CancelledError: If the wait is cancelled, after the
                curl process has been killed and reaped.
        """
        try:
            process = await asyncio.create_subprocess_exec(
                *self.command(args),
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as exc:
            logger.debug(f"Failed to start {self.binary}: {exc}")
            return TransportResult(exit_code=SPAWN_FAILURE_EXIT_CODE, stdout="", stderr=str(exc))
        try:
            stdout, stderr = await process.communicate()
        except BaseException:
            # Kill and reap curl when the wait is cancelled.
            with contextlib.suppress(ProcessLookupError):
                process.kill()
            await process.wait()
            raise
        return TransportResult(
            exit_code=process.returncode if process.returncode is not None else SPAWN_FAILURE_EXIT_CODE,
            stdout=_decode(stdout),
            stderr=_decode(stderr),
        )
