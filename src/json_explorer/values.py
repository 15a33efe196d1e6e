# /src/json_explorer/values.py
"""
JSON value kinds and canonical text forms.

Every component dispatches on `kind_of(value)` instead of ad-hoc isinstance
chains, so each branch covers exactly one of the six JSON kinds.

Example:
  kind_of([1, 2])          -> JsonKind.LIST
  char_size({"a": 1})      -> 7   (len('{"a":1}'))
  to_text(True)            -> "true"
"""

from __future__ import annotations
from enum import Enum
from typing import Any, Dict, List, Union
import json
import sys

JSONValue = Union[None, bool, int, float, str, List[Any], Dict[str, Any]]

# Sentinel returned when a value cannot be serialized (e.g. cyclic)
MAX_CHAR_SIZE = sys.maxsize


class JsonKind(str, Enum):
    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    LIST = "list"
    OBJECT = "object"


def kind_of(value: Any) -> JsonKind:
    if value is None:
        return JsonKind.NULL
    # bool is a subclass of int, check it first
    if isinstance(value, bool):
        return JsonKind.BOOLEAN
    if isinstance(value, (int, float)):
        return JsonKind.NUMBER
    if isinstance(value, str):
        return JsonKind.STRING
    if isinstance(value, (list, tuple)):
        return JsonKind.LIST
    if isinstance(value, dict):
        return JsonKind.OBJECT
    raise TypeError(f"Not a JSON value: {type(value).__name__}")


def is_container(value: Any) -> bool:
    return kind_of(value) in (JsonKind.LIST, JsonKind.OBJECT)


def serialize(value: JSONValue) -> str:
    """Compact JSON text, same shape as JavaScript's JSON.stringify."""
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def char_size(value: JSONValue) -> int:
    """Length of serialize(value); MAX_CHAR_SIZE when it cannot be serialized."""
    try:
        return len(serialize(value))
    except (ValueError, TypeError, RecursionError):
        return MAX_CHAR_SIZE


def to_text(value: JSONValue) -> str:
    """Text form of a primitive: strings as-is, everything else as JSON literal."""
    kind = kind_of(value)
    if kind is JsonKind.STRING:
        return value
    return serialize(value)
