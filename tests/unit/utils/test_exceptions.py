from __future__ import annotations

import pytest

from recurl.core.config import RequestOptions
from recurl.exceptions import RequestContext, RequestError
from recurl.retry.state import AttemptState
from recurl.utils import raise_final_error

TEST_URL = "https://api.example.com/data"

#######################################
#     Tests for raise_final_error     #
#######################################


def test_raise_final_error() -> None:
    options = RequestOptions(max_retries=2)
    state = AttemptState(attempts=2, failure="curl: (28) Operation timed out", exit_code=28)

    with pytest.raises(RequestError, match=r"curl: \(28\) Operation timed out") as exc_info:
        raise_final_error(
            url=TEST_URL, options=options, curl_args=["--url", TEST_URL], state=state
        )

    assert exc_info.value.context == RequestContext(
        url=TEST_URL,
        options=options,
        attempts=2,
        max_retries=2,
        exit_code=28,
        curl_args=("--url", TEST_URL),
    )


def test_raise_final_error_converts_args_to_tuple() -> None:
    with pytest.raises(RequestError) as exc_info:
        raise_final_error(
            url=TEST_URL,
            options=RequestOptions(),
            curl_args=["--silent"],
            state=AttemptState(attempts=1, failure="boom", exit_code=1),
        )
    assert exc_info.value.curl_args == ("--silent",)
