r"""Utility functions for curl requests.

This package provides the helpers that decode the raw output of curl
into typed responses and build the error raised once retries are
exhausted.
"""

from __future__ import annotations

__all__ = [
    "decode_body",
    "parse_headers",
    "parse_response",
    "parse_status_code",
    "raise_final_error",
    "split_blocks",
]

from recurl.utils.exceptions import raise_final_error
from recurl.utils.response import (
    decode_body,
    parse_headers,
    parse_response,
    parse_status_code,
    split_blocks,
)
