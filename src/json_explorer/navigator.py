# /src/json_explorer/navigator.py
"""
Dot/bracket path navigation over a parsed JSON value.

Segments (checked in this order):
  [3]        index into the current list
  3          index, only when the current value is a list
  key        object key
  key[2]     object key, then index into the list found there
Trailing indexes may repeat (key[2][0], [1][4]) for lists nested in lists.
A key that misses is joined with the following segments, so keys that
contain dots ("user.name") still resolve.

Examples:
  resolve(doc, "")                       -> doc
  resolve(doc, "items.3.name")
  resolve(doc, "items[2].value")
  resolve(doc, "items.[0].options[4]")

Navigation is strictly left to right; the first failing segment raises a
NavigationError subclass carrying the segment and the reason.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional, Tuple
import re

from json_explorer.errors import IndexOutOfRange, InvalidSegment, KeyNotFound, TypeMismatch
from json_explorer.values import JSONValue, JsonKind, kind_of

_BRACKETS = re.compile(r"^((?:\[\d+\])+)$")
_DIGITS = re.compile(r"^\d+$")
_KEYED = re.compile(r"^([^\[]+)((?:\[\d+\])*)$")
_INDEX = re.compile(r"\[(\d+)\]")


def _indexes(text: str) -> List[int]:
    return [int(n) for n in _INDEX.findall(text)]


def _take_index(current: Any, idx: int, segment: str, where: str = "") -> Any:
    if kind_of(current) is not JsonKind.LIST:
        raise TypeMismatch(segment, f"Expected list before index {idx}{where}")
    if idx >= len(current):
        raise IndexOutOfRange(segment, f"Index {idx} out of range{where}")
    return current[idx]


def _lookup(current: Dict[str, Any], parts: List[str], i: int) -> Optional[Tuple[Any, int]]:
    """
    Find the key that starts at parts[i] in the object `current`.

    Keys may contain dots, so "user.name" is tried after "user" misses. Returns
    the resolved value (trailing indexes applied) and the last part consumed.
    """
    for j in range(i, len(parts)):
        text = ".".join(parts[i:j + 1])
        m = _KEYED.match(text)
        if m and m.group(1) in current:
            key = m.group(1)
            value = current[key]
            for idx in _indexes(m.group(2)):
                if kind_of(value) is not JsonKind.LIST:
                    raise TypeMismatch(text, f'Key "{key}" is not a list')
                value = _take_index(value, idx, text, f' in list "{key}"')
            return value, j
        # keys such as "a[b" only match literally
        if text in current:
            return current[text], j
    return None


def resolve(document: JSONValue, jsonpath: str = "") -> JSONValue:
    """Return the sub-value of `document` addressed by `jsonpath`."""
    if not jsonpath or not jsonpath.strip():
        return document

    parts = jsonpath.split(".")
    current: Any = document
    i = 0
    while i < len(parts):
        segment = parts[i]
        i += 1

        # Case: "[3]" / "[3][1]"
        if _BRACKETS.match(segment):
            for idx in _indexes(segment):
                current = _take_index(current, idx, segment)
            continue

        # Case: "3"
        if _DIGITS.match(segment) and kind_of(current) is JsonKind.LIST:
            current = _take_index(current, int(segment), segment)
            continue

        # Case: key / key[index] / dotted.key
        m = _KEYED.match(segment)
        if kind_of(current) is JsonKind.OBJECT:
            found = _lookup(current, parts, i - 1)
            if found is not None:
                current, last = found
                i = last + 1
                continue
            if m:
                raise KeyNotFound(segment, f"Key not found: {m.group(1)}")
        elif m:
            raise TypeMismatch(segment, f'Expected object before key "{m.group(1)}"')

        raise InvalidSegment(segment, f"Invalid path segment: {segment}")

    return current
