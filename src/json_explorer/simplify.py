# /src/json_explorer/simplify.py
"""
Render a JSON value at a chosen level of detail.

Verbosity levels
  5 raw           -> value unchanged
  4 small-expand  -> small objects expanded (each child at level 1); lists -> "list";
                     large objects fall back to level 3
  3 size-summary  -> primitives kept; lists/objects show item/key count + char count
  2 summary-count -> primitives kept; lists -> N items; objects -> N keys
  1 type-map      -> key -> kind name; small lists expanded at level 1
  0 root-only     -> object keys; lists -> N items

A list or object is "small" when its count is within the display limit OR its
serialized text is within the char limit.

Example:
  simplify({"a": [1, 2], "b": "x"}, 2)  -> {"a": "[list: 2 items]", "b": "x"}
"""

from __future__ import annotations
from typing import Any, Dict, List

from json_explorer.values import JSONValue, JsonKind, char_size, kind_of

DEFAULT_LIST_LIMIT = 5
DEFAULT_OBJECT_LIMIT = 6
DEFAULT_CHAR_LIMIT = 200

VERBOSITY_LEVELS = range(0, 6)


def _list_items(value: List[Any]) -> str:
    return f"[list: {len(value)} items]"


def _list_size(value: List[Any]) -> str:
    return f"[list: {len(value)} items, {char_size(value)} chars]"


def _object_keys(value: Dict[str, Any]) -> str:
    return f"[object: {len(value)} keys]"


def _object_size(value: Dict[str, Any]) -> str:
    return f"{{object: {len(value)} keys, {char_size(value)} chars}}"


def _summarize_child(v: Any, with_size: bool) -> Any:
    kind = kind_of(v)
    if kind is JsonKind.LIST:
        return _list_size(v) if with_size else _list_items(v)
    if kind is JsonKind.OBJECT:
        return _object_size(v) if with_size else _object_keys(v)
    return v


def simplify(
    value: JSONValue,
    verbosity: int,
    list_limit: int = DEFAULT_LIST_LIMIT,
    object_limit: int = DEFAULT_OBJECT_LIMIT,
    char_limit: int = DEFAULT_CHAR_LIMIT,
) -> Any:
    if verbosity not in VERBOSITY_LEVELS:
        raise ValueError(f"verbosity must be between 0 and 5, got {verbosity!r}")

    if verbosity == 5:
        return value

    kind = kind_of(value)

    if verbosity == 0:
        if kind is JsonKind.LIST:
            return _list_items(value)
        if kind is JsonKind.OBJECT:
            return list(value.keys())
        return value

    if kind is JsonKind.LIST:
        if verbosity == 4:
            return "list"
        if verbosity == 3:
            return _list_size(value)
        if verbosity == 2:
            return _list_items(value)
        # verbosity == 1
        if len(value) <= list_limit or char_size(value) <= char_limit:
            return [simplify(v, 1, list_limit, object_limit, char_limit) for v in value]
        return _list_size(value)

    if kind is JsonKind.OBJECT:
        if verbosity == 4:
            if len(value) <= object_limit or char_size(value) <= char_limit:
                return {
                    k: simplify(v, 1, list_limit, object_limit, char_limit)
                    for k, v in value.items()
                }
            return simplify(value, 3, list_limit, object_limit, char_limit)
        if verbosity == 3:
            return {k: _summarize_child(v, with_size=True) for k, v in value.items()}
        if verbosity == 2:
            return {k: _summarize_child(v, with_size=False) for k, v in value.items()}
        # verbosity == 1
        return {k: kind_of(v).value for k, v in value.items()}

    # null, boolean, number, string
    return value
