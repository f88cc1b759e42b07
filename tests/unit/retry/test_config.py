r"""Unit tests for the retry configuration dataclass."""

from __future__ import annotations

import pytest

from recurl.core.config import RequestOptions
from recurl.retry import RetryConfig


def always_retry(failure: str) -> bool:  # noqa: ARG001
    return True


def test_retry_config_defaults() -> None:
    config = RetryConfig()
    assert config.max_retries == 3
    assert config.should_retry is None


def test_retry_config_with_predicate() -> None:
    config = RetryConfig(max_retries=5, should_retry=always_retry)
    assert config.max_retries == 5
    assert config.should_retry is always_retry


def test_retry_config_negative_max_retries() -> None:
    with pytest.raises(ValueError, match=r"max_retries must be >= 0"):
        RetryConfig(max_retries=-1)


def test_retry_config_from_options() -> None:
    config = RetryConfig.from_options(RequestOptions(max_retries=2, should_retry=always_retry))
    assert config == RetryConfig(max_retries=2, should_retry=always_retry)
