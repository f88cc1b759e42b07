r"""Unit tests for synchronous retry executor."""

from __future__ import annotations

from unittest.mock import Mock

import pytest

from recurl.attempt import AttemptResult
from recurl.core.config import RequestOptions
from recurl.exceptions import RequestError
from recurl.models import CurlResponse
from recurl.retry import RetryConfig, RetryExecutor

TEST_URL = "https://example.com"
CURL_ARGS = ("--url", TEST_URL)
RESPONSE = CurlResponse(status_code=200, headers={}, body="ok")
FAILURE = AttemptResult(failure="curl: (7) Failed to connect", exit_code=7)
SUCCESS = AttemptResult(response=RESPONSE)


def make_executor(options: RequestOptions) -> RetryExecutor:
    return RetryExecutor(RetryConfig.from_options(options))


def test_retry_executor_creation() -> None:
    """Test RetryExecutor initialization."""
    retry_config = RetryConfig(max_retries=2)
    executor = RetryExecutor(retry_config)
    assert executor.config is retry_config
    assert executor.decider.max_retries == 2
    assert executor.decider.predicate is None


def test_retry_executor_successful_request() -> None:
    """Test successful request without retries."""
    options = RequestOptions()
    attempt_func = Mock(return_value=SUCCESS)

    response = make_executor(options).execute(
        url=TEST_URL, options=options, curl_args=CURL_ARGS, attempt_func=attempt_func
    )

    assert response is RESPONSE
    attempt_func.assert_called_once_with()


def test_retry_executor_retries_until_success() -> None:
    """Test that two failures followed by a success return the
    success."""
    options = RequestOptions(max_retries=3, should_retry=Mock(return_value=True))
    attempt_func = Mock(side_effect=[FAILURE, FAILURE, SUCCESS])

    response = make_executor(options).execute(
        url=TEST_URL, options=options, curl_args=CURL_ARGS, attempt_func=attempt_func
    )

    assert response is RESPONSE
    assert attempt_func.call_count == 3


@pytest.mark.parametrize("max_retries", [1, 3, 5])
def test_retry_executor_always_retry_exhausts(max_retries: int) -> None:
    """Test that an always-true predicate makes exactly max_retries
    attempts."""
    options = RequestOptions(max_retries=max_retries, should_retry=Mock(return_value=True))
    attempt_func = Mock(return_value=FAILURE)

    with pytest.raises(RequestError, match=r"Failed to connect") as exc_info:
        make_executor(options).execute(
            url=TEST_URL, options=options, curl_args=CURL_ARGS, attempt_func=attempt_func
        )

    assert attempt_func.call_count == max_retries
    assert exc_info.value.attempts == max_retries
    assert exc_info.value.exit_code == 7


def test_retry_executor_without_predicate() -> None:
    """Test that a call without predicate makes exactly one attempt."""
    options = RequestOptions(max_retries=10)
    attempt_func = Mock(return_value=FAILURE)

    with pytest.raises(RequestError):
        make_executor(options).execute(
            url=TEST_URL, options=options, curl_args=CURL_ARGS, attempt_func=attempt_func
        )

    attempt_func.assert_called_once_with()


def test_retry_executor_predicate_sees_each_failure() -> None:
    options = RequestOptions(max_retries=3, should_retry=Mock(return_value=True))
    attempt_func = Mock(
        side_effect=[
            AttemptResult(failure="first", exit_code=7),
            AttemptResult(failure="second", exit_code=7),
            AttemptResult(failure="third", exit_code=7),
        ]
    )

    with pytest.raises(RequestError, match=r"third"):
        make_executor(options).execute(
            url=TEST_URL, options=options, curl_args=CURL_ARGS, attempt_func=attempt_func
        )

    # The third failure hits the ceiling before the predicate runs.
    assert [c.args for c in options.should_retry.call_args_list] == [("first",), ("second",)]


def test_retry_executor_rejects_async_predicate() -> None:
    """Test that the blocking executor refuses awaitable predicates."""

    async def predicate(failure: str) -> bool:  # noqa: ARG001
        return True

    options = RequestOptions(should_retry=predicate)
    attempt_func = Mock(return_value=FAILURE)

    with pytest.raises(TypeError, match=r"use the async API"):
        make_executor(options).execute(
            url=TEST_URL, options=options, curl_args=CURL_ARGS, attempt_func=attempt_func
        )

    attempt_func.assert_called_once_with()
