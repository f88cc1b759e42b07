r"""Define the response type returned by curl requests."""

from __future__ import annotations

__all__ = ["CurlResponse", "ResponseHeaders"]

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar, Union

import httpx

T = TypeVar("T")

# Lower-cased header name to value. ``set-cookie`` maps to the list of
# all its values, every other name to the value of its last occurrence.
ResponseHeaders = dict[str, Union[str, list[str]]]


@dataclass(frozen=True)
class CurlResponse(Generic[T]):
    r"""A parsed HTTP response.

    Only ``status_code``, ``headers`` and ``body`` take part in equality.

    Attributes:
        status_code: The status code, or 0 when the status line could
            not be parsed.
        headers: The response headers, see ``ResponseHeaders``.
        body: The decoded JSON value when the response declares a JSON
            content type, else the raw body text.
        text: The raw body text.
        url: The requested URL, if known.
        method: The request method, if known.

    Example:
        ```pycon
        >>> from recurl.models import CurlResponse
        >>> response = CurlResponse(
        ...     status_code=404, headers={"content-type": "text/plain"}, body="not found"
        ... )
        >>> response.reason_phrase
        'Not Found'
        >>> response.is_success
        False

        ```
    """

    status_code: int
    headers: ResponseHeaders
    body: T
    text: str = field(default="", repr=False, compare=False)
    url: str = field(default="", repr=False, compare=False)
    method: str = field(default="", repr=False, compare=False)

    @property
    def reason_phrase(self) -> str:
        return httpx.codes.get_reason_phrase(self.status_code)

    @property
    def is_success(self) -> bool:
        return httpx.codes.is_success(self.status_code)

    def header_items(self) -> list[tuple[str, str]]:
        r"""Return the headers as a list of ``(name, value)`` pairs, one
        pair per ``set-cookie`` value."""
        items: list[tuple[str, str]] = []
        for name, value in self.headers.items():
            if isinstance(value, list):
                items.extend((name, item) for item in value)
            else:
                items.append((name, value))
        return items

    def to_httpx(self) -> httpx.Response:
        r"""Build an ``httpx.Response`` holding the same status, headers
        and raw body.

        The request is attached when the URL is known.

        Returns:
            The equivalent ``httpx.Response``.
        """
        kwargs: dict[str, Any] = {}
        if self.url:
            kwargs["request"] = httpx.Request(self.method or "GET", self.url)
        return httpx.Response(
            self.status_code,
            headers=self.header_items(),
            content=self.text.encode("utf-8"),
            **kwargs,
        )

    def raise_for_status(self) -> CurlResponse[T]:
        r"""Raise ``httpx.HTTPStatusError`` unless the status code is
        2xx.

        Returns:
            The response itself, for chaining.

        Raises:
            httpx.HTTPStatusError: If the status code is not 2xx.
            RuntimeError: If the URL of the response is unknown.
        """
        self.to_httpx().raise_for_status()
        return self
