from __future__ import annotations

from recurl.core import InstanceConfig, RequestOptions, merge_instance_options, prepare_request

TEST_URL = "https://api.example.com/data"


def always_retry(failure: str) -> bool:  # noqa: ARG001
    return True


############################################
#     Tests for merge_instance_options     #
############################################


def test_merge_instance_options_headers_union() -> None:
    merged = merge_instance_options(
        InstanceConfig(headers={"A": "1"}), RequestOptions(headers={"B": "2"})
    )
    assert merged.headers == {"A": "1", "B": "2"}


def test_merge_instance_options_call_side_wins() -> None:
    merged = merge_instance_options(
        InstanceConfig(headers={"A": "1"}), RequestOptions(headers={"A": "2"})
    )
    assert merged.headers == {"A": "2"}


def test_merge_instance_options_default_proxy() -> None:
    merged = merge_instance_options(InstanceConfig(proxy="http://p:1"), RequestOptions())
    assert merged.proxy == "http://p:1"


def test_merge_instance_options_call_proxy_wins() -> None:
    merged = merge_instance_options(
        InstanceConfig(proxy="http://p:1"), RequestOptions(proxy="http://q:2")
    )
    assert merged.proxy == "http://q:2"


def test_merge_instance_options_keeps_call_fields() -> None:
    options = RequestOptions(
        method="POST",
        body={"a": [1, 2]},
        should_retry=always_retry,
        max_retries=7,
        extra_args=("--insecure",),
    )
    merged = merge_instance_options(InstanceConfig(headers={"A": "1"}), options)
    assert merged.method == "POST"
    assert merged.body == {"a": [1, 2]}
    assert merged.body is not options.body
    assert merged.should_retry is always_retry
    assert merged.max_retries == 7
    assert merged.extra_args == ("--insecure",)


def test_merge_instance_options_does_not_mutate_inputs() -> None:
    config = InstanceConfig(headers={"A": "1"})
    options = RequestOptions(headers={"B": "2"})
    merge_instance_options(config, options)
    assert config.headers == {"A": "1"}
    assert options.headers == {"B": "2"}


def test_merge_instance_options_header_names_case_insensitive() -> None:
    merged = merge_instance_options(
        InstanceConfig(headers={"Accept": "application/json", "X-Token": "abc"}),
        RequestOptions(headers={"accept": "text/plain"}),
    )
    assert dict(merged.headers) == {"X-Token": "abc", "accept": "text/plain"}


def test_merge_instance_options_keeps_none_inside_body() -> None:
    body = {"name": "Ada", "nickname": None, "profile": {"age": None}, "tags": [None, 1]}
    merged = merge_instance_options(
        InstanceConfig(headers={"A": "1"}), RequestOptions(method="POST", body=body)
    )
    assert merged.body == body


#####################################
#     Tests for prepare_request     #
#####################################


def test_prepare_request_base_url() -> None:
    url, _ = prepare_request(InstanceConfig(base_url="https://api.example.com"), "/users")
    assert url == "https://api.example.com/users"


def test_prepare_request_without_base_url() -> None:
    url, options = prepare_request(InstanceConfig(), TEST_URL)
    assert url == TEST_URL
    assert options == RequestOptions()


def test_prepare_request_overrides() -> None:
    _, options = prepare_request(
        InstanceConfig(headers={"A": "1"}),
        TEST_URL,
        RequestOptions(method="POST", headers={"B": "2"}),
        method="PUT",
        max_retries=1,
    )
    assert options.method == "PUT"
    assert options.max_retries == 1
    assert options.headers == {"A": "1", "B": "2"}


def test_prepare_request_override_headers_merge_with_instance() -> None:
    _, options = prepare_request(InstanceConfig(headers={"A": "1"}), TEST_URL, headers={"C": "3"})
    assert options.headers == {"A": "1", "C": "3"}
