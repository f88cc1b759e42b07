r"""Shared client logic for both sync and async curl clients.

This module turns the configuration of a client instance and the
arguments of one call into the effective URL and options of that call.
"""

from __future__ import annotations

__all__ = ["merge_instance_options", "prepare_request"]

from typing import TYPE_CHECKING, Any

from recurl.core.config import RequestOptions
from recurl.core.merge import deep_merge

if TYPE_CHECKING:
    from collections.abc import Mapping

    from recurl.core.config import InstanceConfig


def merge_instance_options(config: InstanceConfig, options: RequestOptions) -> RequestOptions:
    """Deep-merge the instance defaults under the call options.

    Per-call values win on direct conflicts, while headers are merged key
    by key. Header names are compared case-insensitively and the call-side
    spelling is kept. Neither input is modified.

    Args:
        config: The client instance configuration.
        options: The options of the call.

    Returns:
        A new RequestOptions instance holding the effective options.

    Example:
        ```pycon
        >>> from recurl.core.config import InstanceConfig, RequestOptions
        >>> from recurl.core.client_logic import merge_instance_options
        >>> merged = merge_instance_options(
        ...     InstanceConfig(headers={"A": "1"}), RequestOptions(headers={"B": "2"})
        ... )
        >>> dict(merged.headers)
        {'A': '1', 'B': '2'}

        ```
    """
    defaults = config.to_dict()
    if "headers" in defaults:
        defaults["headers"] = _unshadowed_headers(defaults["headers"], options.headers)
    return RequestOptions(**deep_merge(defaults, options.to_dict()))


def _unshadowed_headers(defaults: Mapping[str, str], headers: Mapping[str, str]) -> dict[str, str]:
    # Defaults whose name matches a call header in any casing are dropped.
    names = {name.lower() for name in headers}
    return {name: value for name, value in defaults.items() if name.lower() not in names}


def prepare_request(
    config: InstanceConfig,
    url: str,
    options: RequestOptions | None = None,
    **overrides: Any,
) -> tuple[str, RequestOptions]:
    """Compute the effective URL and options of a call made through a
    client instance.

    Args:
        config: The client instance configuration.
        url: The URL of the call, prefixed with the base URL if any.
        options: Optional options of the call.
        **overrides: Fields replacing the matching fields of ``options``.

    Returns:
        A tuple ``(url, options)`` ready to be executed.
    """
    call_options = (options if options is not None else RequestOptions()).merge(**overrides)
    return config.resolve_url(url), merge_instance_options(config, call_options)
