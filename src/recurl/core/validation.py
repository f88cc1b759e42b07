r"""Parameter validation utilities for curl requests.

This module provides validation functions for request options to ensure
they meet the required constraints before being turned into curl
arguments.
"""

from __future__ import annotations

__all__ = ["validate_max_retries", "validate_method"]

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Collection


def validate_method(method: str, allowed: Collection[str]) -> None:
    """Validate the HTTP method.

    Args:
        method: The HTTP method name, already upper-cased.
        allowed: The accepted HTTP method names.

    Raises:
        ValueError: If the method is not one of the accepted names.

    Example:
        ```pycon
        >>> from recurl.core.validation import validate_method
        >>> validate_method("GET", ("GET", "POST"))
        >>> validate_method("TRACE", ("GET", "POST"))  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: method must be one of GET, POST, got 'TRACE'

        ```
    """
    if method not in allowed:
        msg = f"method must be one of {', '.join(allowed)}, got {method!r}"
        raise ValueError(msg)


def validate_max_retries(max_retries: int) -> None:
    """Validate the attempt ceiling.

    Args:
        max_retries: Maximum number of attempts for one call.
            Must be >= 0. Both 0 and 1 mean a single attempt.

    Raises:
        ValueError: If max_retries is negative.

    Example:
        ```pycon
        >>> from recurl.core.validation import validate_max_retries
        >>> validate_max_retries(3)
        >>> validate_max_retries(-1)  # doctest: +SKIP

        ```
    """
    if max_retries < 0:
        msg = f"max_retries must be >= 0, got {max_retries}"
        raise ValueError(msg)
