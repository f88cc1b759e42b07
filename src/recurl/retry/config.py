r"""Configuration dataclass for retry behavior."""

from __future__ import annotations

__all__ = ["RetryConfig"]

from dataclasses import dataclass
from typing import TYPE_CHECKING

from recurl.core.config import DEFAULT_MAX_RETRIES
from recurl.core.validation import validate_max_retries

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from recurl.core.config import RequestOptions


@dataclass(frozen=True)
class RetryConfig:
    """Configuration for retry behavior.

    Attributes:
        max_retries: Maximum number of attempts.
        should_retry: Optional predicate called with the failure text of
            a failed attempt. Without it no retry is ever made.
    """

    max_retries: int = DEFAULT_MAX_RETRIES
    should_retry: Callable[[str], bool | Awaitable[bool]] | None = None

    def __post_init__(self) -> None:
        validate_max_retries(self.max_retries)

    @classmethod
    def from_options(cls, options: RequestOptions) -> RetryConfig:
        """Extract the retry configuration of request options."""
        return cls(max_retries=options.max_retries, should_retry=options.should_retry)
