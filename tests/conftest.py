from __future__ import annotations

from unittest.mock import AsyncMock, Mock

import pytest

from recurl.transport import CurlTransport, TransportResult

OK_RESPONSE = "HTTP/1.1 200 OK\r\nContent-Type: text/plain\r\n\r\nhello"


@pytest.fixture
def ok_result() -> TransportResult:
    """Create a clean curl exit with a plain text response."""
    return TransportResult(exit_code=0, stdout=OK_RESPONSE, stderr="")


@pytest.fixture
def failed_result() -> TransportResult:
    """Create a failed curl exit."""
    return TransportResult(
        exit_code=7, stdout="", stderr="curl: (7) Failed to connect to localhost port 1"
    )


@pytest.fixture
def mock_transport(ok_result: TransportResult) -> Mock:
    """Create a mock CurlTransport returning a clean exit."""
    return Mock(
        spec=CurlTransport,
        run=Mock(return_value=ok_result),
        run_async=AsyncMock(return_value=ok_result),
    )


@pytest.fixture
def mock_callback() -> Mock:
    """Create a mock retry predicate approving every failure."""
    return Mock(return_value=True)
