r"""Retry decision logic for determining whether to retry a failed
attempt."""

from __future__ import annotations

__all__ = ["RetryDecider"]

import inspect
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from recurl.retry.state import AttemptState

logger: logging.Logger = logging.getLogger(__name__)


class RetryDecider:
    """Decides whether a failed attempt should be followed by another
    one.

    Another attempt is made only when the number of failed attempts is
    still strictly below ``max_retries``, a predicate is configured, and
    the predicate approves the failure text.

    Args:
        max_retries: Maximum number of attempts.
        predicate: Optional retry predicate. It may return a bool or an
            awaitable resolving to a bool.
    """

    def __init__(
        self,
        max_retries: int,
        predicate: Callable[[str], bool | Awaitable[bool]] | None,
    ) -> None:
        self.max_retries = max_retries
        self.predicate = predicate

    def can_retry(self, state: AttemptState) -> bool:
        """Check the attempt ceiling and the presence of a predicate.

        Args:
            state: The state after the latest failed attempt.

        Returns:
            True if the predicate should be consulted.
        """
        if self.predicate is None:
            return False
        if state.attempts >= self.max_retries:
            logger.debug(f"Attempt ceiling reached ({state.attempts}/{self.max_retries})")
            return False
        return True

    def should_retry(self, state: AttemptState) -> bool:
        """Decide whether to retry, with a synchronous predicate.

        Args:
            state: The state after the latest failed attempt.

        Returns:
            True if another attempt should be made.

        Raises:
            TypeError: If the predicate returns an awaitable.
        """
        if not self.can_retry(state):
            return False
        decision = self.predicate(state.failure)
        if inspect.isawaitable(decision):
            if inspect.iscoroutine(decision):
                decision.close()
            msg = "should_retry returned an awaitable, use the async API to await it"
            raise TypeError(msg)
        return bool(decision)

    async def should_retry_async(self, state: AttemptState) -> bool:
        """Decide whether to retry, awaiting the predicate if needed.

        Args:
            state: The state after the latest failed attempt.

        Returns:
            True if another attempt should be made.
        """
        if not self.can_retry(state):
            return False
        decision = self.predicate(state.failure)
        if inspect.isawaitable(decision):
            decision = await decision
        return bool(decision)
