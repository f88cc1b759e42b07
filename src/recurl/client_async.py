r"""Asynchronous client instance for curl requests.

This module provides a client bound to an ``InstanceConfig``. Every
call made through the client prefixes its URL with the configured base
URL and deep-merges the configured defaults under its own options
before running the retry loop.
"""

from __future__ import annotations

__all__ = ["AsyncCurlClient", "create_instance"]

from typing import TYPE_CHECKING, Any

from recurl.core.client_logic import prepare_request
from recurl.core.config import InstanceConfig
from recurl.request_async import request_async

if TYPE_CHECKING:
    from recurl.core.config import RequestOptions
    from recurl.models import CurlResponse
    from recurl.transport import CurlTransport


class AsyncCurlClient:
    r"""Asynchronous request entry point pre-bound to a configuration.

    The configuration is read-only: concurrent calls through the same
    client each get their own merged options and their own attempt
    chain, and may safely run in parallel.

    Args:
        config: Optional InstanceConfig. If ``None``, an empty
            configuration is used.
        transport: Optional transport running curl. If ``None``, a
            default CurlTransport is used for every call.

    Example:
        ```pycon
        >>> import asyncio
        >>> from recurl import AsyncCurlClient, InstanceConfig
        >>> client = AsyncCurlClient(
        ...     InstanceConfig(base_url="https://api.example.com", headers={"Accept": "application/json"})
        ... )
        >>> async def main():  # doctest: +SKIP
        ...     users = await client("/users")
        ...     created = await client.post("/users", body={"name": "Ada"})
        ...
        >>> asyncio.run(main())  # doctest: +SKIP

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

    async def request(
        self,
        url: str,
        options: RequestOptions | None = None,
        **overrides: Any,
    ) -> CurlResponse[Any]:
        r"""Send a request through the client.

        Args:
            url: The URL of the call, appended to the base URL if any.
            options: Optional options of the call. They win over the
                client defaults on direct conflicts, while headers are
                merged key by key.
            **overrides: Fields replacing the matching fields of
                ``options``.

        Returns:
            The parsed response.

        Raises:
            RequestError: If curl failed on the last allowed attempt.
            ResponseParseError: If the output of curl cannot be parsed.
        """
        request_url, request_options = prepare_request(self._config, url, options, **overrides)
        return await request_async(request_url, request_options, transport=self._transport)

    async def __call__(
        self,
        url: str,
        options: RequestOptions | None = None,
        **overrides: Any,
    ) -> CurlResponse[Any]:
        return await self.request(url, options, **overrides)

    async def get(self, url: str, options: RequestOptions | None = None, **overrides: Any) -> CurlResponse[Any]:
        r"""Send a GET request, see ``request``."""
        return await self.request(url, options, method="GET", **overrides)

    async def post(self, url: str, options: RequestOptions | None = None, **overrides: Any) -> CurlResponse[Any]:
        r"""Send a POST request, see ``request``."""
        return await self.request(url, options, method="POST", **overrides)

    async def put(self, url: str, options: RequestOptions | None = None, **overrides: Any) -> CurlResponse[Any]:
        r"""Send a PUT request, see ``request``."""
        return await self.request(url, options, method="PUT", **overrides)

    async def delete(self, url: str, options: RequestOptions | None = None, **overrides: Any) -> CurlResponse[Any]:
        r"""Send a DELETE request, see ``request``."""
        return await self.request(url, options, method="DELETE", **overrides)

    async def patch(self, url: str, options: RequestOptions | None = None, **overrides: Any) -> CurlResponse[Any]:
        r"""Send a PATCH request, see ``request``."""
        return await self.request(url, options, method="PATCH", **overrides)


def create_instance(
    config: InstanceConfig | None = None,
    *,
    transport: CurlTransport | None = None,
    **config_fields: Any,
) -> AsyncCurlClient:
    r"""Create an asynchronous client bound to a configuration.

    Args:
        config: Optional InstanceConfig. Keyword fields are applied on
            top of it.
        transport: Optional transport running curl.
        **config_fields: ``base_url``, ``headers`` or ``proxy`` values.

    Returns:
        A callable client: ``await client(url, options)``.

    Example:
        ```pycon
        >>> from recurl import create_instance
        >>> api = create_instance(base_url="https://api.example.com")
        >>> api.config.resolve_url("/users")
        'https://api.example.com/users'

        ```
    """
    base = config if config is not None else InstanceConfig()
    return AsyncCurlClient(base.merge(**config_fields), transport=transport)
