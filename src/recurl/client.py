r"""Synchronous client instance for curl requests."""

from __future__ import annotations

__all__ = ["CurlClient"]

from typing import TYPE_CHECKING, Any

from recurl.core.client_logic import prepare_request
from recurl.core.config import InstanceConfig
from recurl.request import request

if TYPE_CHECKING:
    from recurl.core.config import RequestOptions
    from recurl.models import CurlResponse
    from recurl.transport import CurlTransport


class CurlClient:
    r"""Blocking request entry point pre-bound to a configuration.

    This is the synchronous counterpart of ``AsyncCurlClient``.

    Args:
        config: Optional InstanceConfig. If ``None``, an empty
            configuration is used.
        transport: Optional transport running curl.

    Example:
        ```pycon
        >>> from recurl import CurlClient, InstanceConfig
        >>> client = CurlClient(InstanceConfig(base_url="https://api.example.com"))
        >>> response = client.get("/users")  # doctest: +SKIP

        ```
    """

    def __init__(
        self,
        config: InstanceConfig | None = None,
        *,
        transport: CurlTransport | None = None,
    ) -> None:
        self._config = config if config is not None else InstanceConfig()
        self._transport = transport

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(config={self._config!r})"

    @property
    def config(self) -> InstanceConfig:
        return self._config

    def request(
        self,
        url: str,
        options: RequestOptions | None = None,
        **overrides: Any,
    ) -> CurlResponse[Any]:
        r"""Send a request through the client.

        Args:
            url: The URL of the call, appended to the base URL if any.
            options: Optional options of the call.
            **overrides: Fields replacing the matching fields of
                ``options``.

        Returns:
            The parsed response.

        Raises:
            RequestError: If curl failed on the last allowed attempt.
            ResponseParseError: If the output of curl cannot be parsed.
        """
        request_url, request_options = prepare_request(self._config, url, options, **overrides)
        return request(request_url, request_options, transport=self._transport)

    def __call__(
        self,
        url: str,
        options: RequestOptions | None = None,
        **overrides: Any,
    ) -> CurlResponse[Any]:
        return self.request(url, options, **overrides)

    def get(self, url: str, options: RequestOptions | None = None, **overrides: Any) -> CurlResponse[Any]:
        return self.request(url, options, method="GET", **overrides)

    def post(self, url: str, options: RequestOptions | None = None, **overrides: Any) -> CurlResponse[Any]:
        return self.request(url, options, method="POST", **overrides)

    def put(self, url: str, options: RequestOptions | None = None, **overrides: Any) -> CurlResponse[Any]:
        return self.request(url, options, method="PUT", **overrides)

    def delete(self, url: str, options: RequestOptions | None = None, **overrides: Any) -> CurlResponse[Any]:
        return self.request(url, options, method="DELETE", **overrides)

    def patch(self, url: str, options: RequestOptions | None = None, **overrides: Any) -> CurlResponse[Any]:
        return self.request(url, options, method="PATCH", **overrides)
