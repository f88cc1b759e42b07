r"""Retry package implementing the bounded attempt loop.

Public API:
    - RetryConfig: Configuration for retry behavior
    - AttemptState: Explicit state of a retry loop
    - RetryDecider: Logic for deciding whether to retry
    - RetryExecutor: Synchronous retry executor
    - AsyncRetryExecutor: Asynchronous retry executor
"""

from __future__ import annotations

__all__ = [
    "AsyncRetryExecutor",
    "AttemptState",
    "RetryConfig",
    "RetryDecider",
    "RetryExecutor",
]

from recurl.retry.config import RetryConfig
from recurl.retry.decider import RetryDecider
from recurl.retry.executor import RetryExecutor
from recurl.retry.executor_async import AsyncRetryExecutor
from recurl.retry.state import AttemptState
