# /src/json_explorer/contains.py
"""Strict, case-sensitive containment check on the value at a JSON path."""

from __future__ import annotations

from json_explorer.errors import NavigationError
from json_explorer.navigator import resolve
from json_explorer.values import JSONValue, JsonKind, is_container, kind_of, serialize, to_text


def contains(document: JSONValue, jsonpath: str, literal: str) -> bool:
    """
    True when `literal` occurs in the text of the value at `jsonpath`.

    Lists and objects are compared against their compact JSON text, primitives
    against their plain text form. Unresolvable paths and nulls never match.
    """
    try:
        value = resolve(document, jsonpath)
    except NavigationError:
        return False

    if kind_of(value) is JsonKind.NULL:
        return False
    if is_container(value):
        return literal in serialize(value)
    return literal in to_text(value)
