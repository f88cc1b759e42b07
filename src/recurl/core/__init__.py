r"""Core shared logic for sync and async curl requests.

This module contains configuration, validation and merge functionality
shared by the synchronous and asynchronous request implementations.
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
    "deep_merge",
    "merge_instance_options",
    "prepare_request",
    "validate_max_retries",
    "validate_method",
]

from recurl.core.client_logic import merge_instance_options, prepare_request
from recurl.core.config import (
    DEFAULT_CURL_BINARY,
    DEFAULT_MAX_RETRIES,
    DEFAULT_METHOD,
    HTTP_METHODS,
    JSON_CONTENT_TYPE,
    InstanceConfig,
    RequestOptions,
)
from recurl.core.merge import deep_merge
from recurl.core.validation import validate_max_retries, validate_method
