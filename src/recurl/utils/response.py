r"""Response parsing utilities.

This module turns the raw output of ``curl --include`` into a
``CurlResponse``. The output is a raw HTTP stream: one or more header
blocks followed by the body, separated by blank lines.
"""

from __future__ import annotations

__all__ = [
    "decode_body",
    "parse_headers",
    "parse_response",
    "parse_status_code",
    "split_blocks",
]

import json
import logging
import re
from typing import Any

from recurl.core.config import JSON_CONTENT_TYPE
from recurl.exceptions import BodyDecodeError, MalformedResponseError
from recurl.models import CurlResponse, ResponseHeaders

logger: logging.Logger = logging.getLogger(__name__)

BLOCK_SEPARATOR = "\r\n\r\n"
LINE_SEPARATOR = "\r\n"
HEADER_SEPARATOR = ": "

# Headers whose repeated occurrences are all kept, in order
MULTI_VALUE_HEADERS = frozenset({"set-cookie"})

_LEADING_DIGITS = re.compile(r"\d+")


def split_blocks(raw: str, *, proxied: bool = False) -> tuple[str, str]:
    r"""Split the raw response into its header block and body.

    Args:
        raw: The raw response text.
        proxied: Whether the request went through a proxy. The first
            block is then the proxy's own connection response and is
            discarded.

    Returns:
        A tuple ``(header_block, body)``. The body is everything after
        the header block, unmodified.

    Raises:
        MalformedResponseError: If fewer than two blocks remain.

    Example:
        ```pycon
        >>> from recurl.utils.response import split_blocks
        >>> split_blocks("HTTP/1.1 200 OK\r\nA: 1\r\n\r\nhello")
        ('HTTP/1.1 200 OK\r\nA: 1', 'hello')

        ```
    """
    blocks = raw.split(BLOCK_SEPARATOR)
    if proxied:
        blocks = blocks[1:]
    if len(blocks) < 2:
        msg = (
            f"expected a header block and a body separated by a blank line, "
            f"got {len(blocks)} block(s){' after discarding the proxy response' if proxied else ''}"
        )
        raise MalformedResponseError(msg, raw=raw)
    return blocks[0], BLOCK_SEPARATOR.join(blocks[1:])


def parse_status_code(status_line: str) -> int:
    r"""Extract the status code from a status line.

    The status code is the second whitespace-delimited token.

    Args:
        status_line: The first line of the header block.

    Returns:
        The status code, or 0 when it is absent or not numeric.

    Example:
        ```pycon
        >>> from recurl.utils.response import parse_status_code
        >>> parse_status_code("HTTP/1.1 404 Not Found")
        404
        >>> parse_status_code("garbage")
        0

        ```
    """
    tokens = status_line.split()
    if len(tokens) < 2:
        return 0
    match = _LEADING_DIGITS.match(tokens[1])
    return int(match.group()) if match else 0


def parse_headers(lines: list[str], raw: str = "") -> ResponseHeaders:
    r"""Parse header lines into a ``ResponseHeaders`` mapping.

    Names are lower-cased. ``set-cookie`` values are collected into a
    list, other names keep the value of their last occurrence.

    Args:
        lines: The header lines, without the status line.
        raw: The raw response text, attached to parse errors.

    Returns:
        The parsed headers.

    Raises:
        MalformedResponseError: If a line has no ``": "`` separator.
    """
    headers: ResponseHeaders = {}
    for line in lines:
        name, separator, value = line.partition(HEADER_SEPARATOR)
        if not separator:
            msg = f"malformed header line: {line!r}"
            raise MalformedResponseError(msg, raw=raw)
        key = name.lower()
        if key in MULTI_VALUE_HEADERS:
            values = headers.setdefault(key, [])
            values.append(value)
        else:
            headers[key] = value
    return headers


def decode_body(body: str, headers: ResponseHeaders) -> Any:
    r"""Decode the body according to the response content type.

    Args:
        body: The raw body text.
        headers: The parsed response headers.

    Returns:
        The decoded JSON value when the content type starts with
        ``application/json``, else ``body`` unchanged.

    Raises:
        BodyDecodeError: If the body is declared as JSON but is not
            valid JSON.
    """
    content_type = headers.get("content-type")
    if not isinstance(content_type, str) or not content_type.startswith(JSON_CONTENT_TYPE):
        return body
    try:
        return json.loads(body)
    except json.JSONDecodeError as exc:
        msg = f"failed to decode {content_type} body: {exc}"
        raise BodyDecodeError(msg, body=body) from exc


def parse_response(raw: str, *, proxied: bool = False) -> CurlResponse[Any]:
    r"""Parse the raw output of one curl attempt.

    Args:
        raw: The raw response text.
        proxied: Whether the request went through a proxy.

    Returns:
        The parsed response.

    Raises:
        MalformedResponseError: If the block structure or a header line
            is malformed.
        BodyDecodeError: If a JSON body cannot be decoded.

    Example:
        ```pycon
        >>> from recurl.utils.response import parse_response
        >>> response = parse_response(
        ...     "HTTP/1.1 404 Not Found\r\nContent-Type: text/plain\r\n\r\nnot found"
        ... )
        >>> response.status_code, response.headers, response.body
        (404, {'content-type': 'text/plain'}, 'not found')

        ```
    """
    header_block, body = split_blocks(raw, proxied=proxied)
    status_line, *header_lines = header_block.split(LINE_SEPARATOR)
    status_code = parse_status_code(status_line)
    headers = parse_headers(header_lines, raw=raw)
    logger.debug(f"Parsed response with status {status_code} and {len(headers)} header(s)")
    return CurlResponse(
        status_code=status_code,
        headers=headers,
        body=decode_body(body, headers),
        text=body,
    )
