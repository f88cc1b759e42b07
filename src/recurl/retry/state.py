r"""Explicit state of a retry loop.

The state of one call is an immutable value replaced after every
failed attempt, which keeps the retry loop a plain state transition.
"""

from __future__ import annotations

__all__ = ["AttemptState"]

from dataclasses import dataclass


@dataclass(frozen=True)
class AttemptState:
    """State of a call after its failed attempts.

    Attributes:
        attempts: Number of failed attempts so far.
        failure: Failure text of the last failed attempt.
        exit_code: Curl exit code of the last failed attempt.

    Example:
        ```pycon
        >>> from recurl.retry.state import AttemptState
        >>> state = AttemptState().record_failure("curl: (7) Failed to connect", 7)
        >>> state.attempts, state.exit_code
        (1, 7)

        ```
    """

    attempts: int = 0
    failure: str = ""
    exit_code: int | None = None

    def record_failure(self, failure: str, exit_code: int | None) -> AttemptState:
        """Return the state following one more failed attempt.

        Only the failure text of the latest attempt is kept.
        """
        return AttemptState(attempts=self.attempts + 1, failure=failure, exit_code=exit_code)
