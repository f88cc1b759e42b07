r"""Configuration dataclasses and defaults for curl requests.

This module provides the configuration constants and the two
configuration objects of the package: ``RequestOptions`` describes one
call, and ``InstanceConfig`` holds the defaults a client instance
applies to every call made through it.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_CURL_BINARY",
    "DEFAULT_MAX_RETRIES",
    "DEFAULT_METHOD",
    "HTTP_METHODS",
    "JSON_CONTENT_TYPE",
    "InstanceConfig",
    "RequestOptions",
]

from dataclasses import dataclass, field, fields, replace
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from recurl.core.validation import validate_max_retries, validate_method

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Mapping


# Name of the executable used as transport
DEFAULT_CURL_BINARY = "curl"

# Default maximum number of attempts for one call
# Total attempts = max_retries when the retry predicate always approves
DEFAULT_MAX_RETRIES = 3

DEFAULT_METHOD = "GET"

HTTP_METHODS = ("GET", "POST", "PUT", "DELETE", "PATCH")

JSON_CONTENT_TYPE = "application/json"


def _freeze(headers: Mapping[str, str] | None) -> Mapping[str, str]:
    return MappingProxyType(dict(headers or {}))


@dataclass(frozen=True)
class RequestOptions:
    """Options for a single curl request.

    Args:
        method: HTTP method. It is upper-cased and must be one of
            ``HTTP_METHODS``.
        headers: Request headers. One ``--header`` flag is emitted per
            entry.
        body: Request body. Only ``None`` sends no body. A ``str``,
            including the empty string, is sent verbatim. Anything else,
            including ``0`` and ``False``, is serialized to JSON and sent
            with a ``Content-Type: application/json`` header.
        proxy: Optional proxy address passed to curl. When set, the
            first header block of the response is discarded as the
            proxy's own connection response.
        should_retry: Optional predicate called with the failure text of
            a failed attempt. It may return a bool or an awaitable
            resolving to a bool. Without it a call makes exactly one
            attempt.
        max_retries: Maximum number of attempts. Must be >= 0.
        extra_args: Additional curl flags appended verbatim to the
            argument vector (e.g. TLS options).

    Example:
        ```pycon
        >>> from recurl.core.config import RequestOptions
        >>> options = RequestOptions(method="post", body={"key": "value"})
        >>> options.method
        'POST'
        >>> options.merge(max_retries=5).max_retries
        5
        >>> options.max_retries  # Original unchanged
        3

        ```
    """

    method: str = DEFAULT_METHOD
    headers: Mapping[str, str] = field(default_factory=dict)
    body: Any = None
    proxy: str | None = None
    should_retry: Callable[[str], bool | Awaitable[bool]] | None = None
    max_retries: int = DEFAULT_MAX_RETRIES
    extra_args: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Normalize and validate the options.

        Raises:
            ValueError: If the method or max_retries is invalid.
        """
        method = self.method.upper()
        validate_method(method, HTTP_METHODS)
        validate_max_retries(self.max_retries)
        object.__setattr__(self, "method", method)
        object.__setattr__(self, "headers", _freeze(self.headers))
        object.__setattr__(self, "extra_args", tuple(self.extra_args))

    def merge(self, **overrides: Any) -> RequestOptions:
        """Create new options with the specified fields replaced.

        Only non-None override values are applied. Fields are replaced
        wholesale: use ``recurl.core.merge.deep_merge`` to combine
        nested values.

        Args:
            **overrides: Keyword arguments for fields to override.

        Returns:
            A new RequestOptions instance with overrides applied.
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        if not filtered_overrides:
            return self
        return replace(self, **filtered_overrides)

    def to_dict(self) -> dict[str, Any]:
        """Convert the options to a dictionary of their set fields.

        Fields holding ``None`` are left out so that they do not shadow
        defaults when merged.

        Returns:
            Dictionary mapping field names to values.
        """
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }

    @property
    def proxied(self) -> bool:
        """Whether the request goes through a proxy."""
        return bool(self.proxy)


@dataclass(frozen=True)
class InstanceConfig:
    """Defaults shared by all calls made through a client instance.

    The configuration is immutable: calls made through a client never
    modify it, and two clients never share mutable state.

    Args:
        base_url: Optional prefix concatenated verbatim in front of every
            call URL.
        headers: Default headers, merged key by key under the per-call
            headers.
        proxy: Default proxy address.

    Example:
        ```pycon
        >>> from recurl.core.config import InstanceConfig
        >>> config = InstanceConfig(base_url="https://api.example.com")
        >>> config.resolve_url("/users")
        'https://api.example.com/users'

        ```
    """

    base_url: str | None = None
    headers: Mapping[str, str] = field(default_factory=dict)
    proxy: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", _freeze(self.headers))

    def resolve_url(self, url: str) -> str:
        """Prefix ``url`` with the base URL, without any normalization."""
        if self.base_url:
            return f"{self.base_url}{url}"
        return url

    def merge(self, **overrides: Any) -> InstanceConfig:
        """Create a new config with the specified non-None fields
        replaced."""
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)

    def to_dict(self) -> dict[str, Any]:
        """Convert the request defaults to a dictionary.

        ``base_url`` is not a request option and is left out, as are
        fields holding ``None``.

        Returns:
            Dictionary with the ``headers`` and ``proxy`` defaults.
        """
        defaults: dict[str, Any] = {"headers": self.headers, "proxy": self.proxy}
        return {k: v for k, v in defaults.items() if v is not None}
