r"""Unit tests for the response type."""

from __future__ import annotations

import httpx
import pytest

from recurl.models import CurlResponse

TEST_URL = "https://api.example.com/data"


def test_curl_response_equality_ignores_raw_fields() -> None:
    assert CurlResponse(200, {}, "ok", text="ok", url=TEST_URL, method="GET") == CurlResponse(
        200, {}, "ok"
    )


def test_curl_response_repr() -> None:
    assert repr(CurlResponse(200, {"a": "b"}, "ok")) == (
        "CurlResponse(status_code=200, headers={'a': 'b'}, body='ok')"
    )


@pytest.mark.parametrize(
    ("status_code", "reason"), [(200, "OK"), (404, "Not Found"), (503, "Service Unavailable")]
)
def test_curl_response_reason_phrase(status_code: int, reason: str) -> None:
    assert CurlResponse(status_code, {}, "").reason_phrase == reason


def test_curl_response_reason_phrase_unknown_status() -> None:
    assert CurlResponse(0, {}, "").reason_phrase == ""


@pytest.mark.parametrize(("status_code", "expected"), [(200, True), (204, True), (301, False), (500, False)])
def test_curl_response_is_success(status_code: int, expected: bool) -> None:
    assert CurlResponse(status_code, {}, "").is_success is expected


def test_curl_response_header_items() -> None:
    response = CurlResponse(
        200, {"content-type": "text/plain", "set-cookie": ["a=1", "b=2"]}, "ok"
    )
    assert response.header_items() == [
        ("content-type", "text/plain"),
        ("set-cookie", "a=1"),
        ("set-cookie", "b=2"),
    ]


def test_curl_response_to_httpx() -> None:
    response = CurlResponse(
        201,
        {"content-type": "application/json", "set-cookie": ["a=1", "b=2"]},
        {"id": 1},
        text='{"id": 1}',
        url=TEST_URL,
        method="POST",
    )

    converted = response.to_httpx()

    assert converted.status_code == 201
    assert converted.json() == {"id": 1}
    assert converted.headers.get_list("set-cookie") == ["a=1", "b=2"]
    assert converted.request.method == "POST"
    assert str(converted.request.url) == TEST_URL


def test_curl_response_raise_for_status_success() -> None:
    response = CurlResponse(200, {}, "ok", url=TEST_URL, method="GET")
    assert response.raise_for_status() is response


def test_curl_response_raise_for_status_error() -> None:
    response = CurlResponse(404, {}, "missing", text="missing", url=TEST_URL, method="GET")
    with pytest.raises(httpx.HTTPStatusError, match=r"404 Not Found"):
        response.raise_for_status()


def test_curl_response_raise_for_status_without_url() -> None:
    with pytest.raises(RuntimeError):
        CurlResponse(500, {}, "").raise_for_status()
