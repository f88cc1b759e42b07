r"""Deep merge of configuration values.

This module implements the merge used to combine the defaults of a
client instance with the options of one call:

- mappings are merged key by key, recursively;
- lists are merged position by position, extra items are appended;
- any other value from the override replaces the base value;
- a top-level ``None`` in the override means "not set" and never
  replaces a value, while nested ``None`` values are copied like any
  other value.

Inputs are never modified. Mappings and lists in the result are fresh
containers, other values are shared by reference.
"""

from __future__ import annotations

__all__ = ["deep_merge"]

from collections.abc import Mapping
from typing import Any


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    r"""Merge ``override`` on top of ``base`` into a new dictionary.

    Args:
        base: The default values.
        override: The values that win on direct conflicts.

    Returns:
        A new dictionary holding the merged values.

    Example:
        ```pycon
        >>> from recurl.core.merge import deep_merge
        >>> deep_merge({"headers": {"A": "1"}}, {"headers": {"B": "2"}})
        {'headers': {'A': '1', 'B': '2'}}
        >>> deep_merge({"headers": {"A": "1"}}, {"headers": {"A": "2"}})
        {'headers': {'A': '2'}}
        >>> deep_merge({"items": [1, 2, 3]}, {"items": [9]})
        {'items': [9, 2, 3]}
        >>> deep_merge({"proxy": "http://p:1"}, {"proxy": None, "body": {"a": None}})
        {'proxy': 'http://p:1', 'body': {'a': None}}

        ```
    """
    return _merge_mapping(base, {key: value for key, value in override.items() if value is not None})


def _merge_mapping(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    merged = {key: _merge_value(None, value) for key, value in base.items()}
    for key, value in override.items():
        merged[key] = _merge_value(merged.get(key), value)
    return merged


def _merge_value(base: Any, value: Any) -> Any:
    if isinstance(value, Mapping):
        return _merge_mapping(base if isinstance(base, Mapping) else {}, value)
    if isinstance(value, list):
        merged = [_merge_value(None, item) for item in base] if isinstance(base, list) else []
        for index, item in enumerate(value):
            if index < len(merged):
                merged[index] = _merge_value(merged[index], item)
            else:
                merged.append(_merge_value(None, item))
        return merged
    return value
