r"""Define the exceptions raised by curl requests.

``RequestError`` is the terminal failure of a call whose attempts all
failed at the transport level. ``ResponseParseError`` and its
subclasses report a response that curl delivered but that could not be
decoded; they are raised immediately and never retried.
"""

from __future__ import annotations

__all__ = [
    "BodyDecodeError",
    "MalformedResponseError",
    "RequestContext",
    "RequestError",
    "ResponseParseError",
]

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from recurl.core.config import RequestOptions


@dataclass(frozen=True)
class RequestContext:
    """Describe what was attempted by a failed call.

    Attributes:
        url: The target URL.
        options: The effective request options.
        attempts: The number of attempts made.
        max_retries: The configured attempt ceiling.
        exit_code: The curl exit code of the last attempt.
        curl_args: The argument vector passed to curl.
    """

    url: str
    options: RequestOptions
    attempts: int
    max_retries: int
    exit_code: int | None
    curl_args: tuple[str, ...]


class RequestError(Exception):
    r"""Raised when a call fails after exhausting its attempts.

    The message is the failure text (curl's stderr) of the last attempt.

    Args:
        message: The failure text.
        context: The description of what was attempted.

    Example:
        ```pycon
        >>> from recurl.core.config import RequestOptions
        >>> from recurl.exceptions import RequestContext, RequestError
        >>> error = RequestError(
        ...     "curl: (6) Could not resolve host: example.invalid",
        ...     RequestContext(
        ...         url="https://example.invalid",
        ...         options=RequestOptions(),
        ...         attempts=1,
        ...         max_retries=3,
        ...         exit_code=6,
        ...         curl_args=("--url", "https://example.invalid"),
        ...     ),
        ... )
        >>> error.exit_code
        6

        ```
    """

    def __init__(self, message: str, context: RequestContext) -> None:
        super().__init__(message)
        self._message = message
        self._context = context

    @property
    def message(self) -> str:
        return self._message

    @property
    def context(self) -> RequestContext:
        return self._context

    @property
    def url(self) -> str:
        return self._context.url

    @property
    def options(self) -> RequestOptions:
        return self._context.options

    @property
    def attempts(self) -> int:
        return self._context.attempts

    @property
    def max_retries(self) -> int:
        return self._context.max_retries

    @property
    def exit_code(self) -> int | None:
        return self._context.exit_code

    @property
    def curl_args(self) -> tuple[str, ...]:
        return self._context.curl_args

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(url={self.url!r}, attempts={self.attempts}, "
            f"max_retries={self.max_retries}, exit_code={self.exit_code})"
        )


class ResponseParseError(ValueError):
    r"""Raised when the raw output of curl cannot be turned into a
    response.

    Args:
        message: The error message.
        raw: The raw text that failed to parse.
    """

    def __init__(self, message: str, raw: str) -> None:
        super().__init__(message)
        self.raw = raw


class MalformedResponseError(ResponseParseError):
    r"""Raised when the response text does not have the expected block
    structure or contains a malformed header line."""


class BodyDecodeError(ResponseParseError):
    r"""Raised when a body declared as JSON cannot be decoded.

    Args:
        message: The error message.
        body: The raw body text.
    """

    def __init__(self, message: str, body: str) -> None:
        super().__init__(message, raw=body)
        self.body = body
