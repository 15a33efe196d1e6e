# /src/json_explorer/errors.py
"""
Error taxonomy for the explorer.

Navigation errors always name the segment that failed and why, e.g.:
  resolve({"a": [1, 2]}, "a.5")  -> IndexOutOfRange(segment="5", reason="Index 5 out of range")
"""

from __future__ import annotations
from typing import Optional


class ExplorerError(Exception):
    """Base class for every error raised by json_explorer."""


class NavigationError(ExplorerError):
    """A path segment could not be resolved against the current value."""

    def __init__(self, segment: str, reason: str):
        self.segment = segment
        self.reason = reason
        super().__init__(f"{reason} (segment '{segment}')")


class KeyNotFound(NavigationError):
    pass


class IndexOutOfRange(NavigationError):
    pass


class TypeMismatch(NavigationError):
    pass


class InvalidSegment(NavigationError):
    pass


class DocumentLoadError(ExplorerError):
    """File missing, unreadable, or not valid JSON."""

    def __init__(self, message: str, filepath: Optional[str] = None):
        self.filepath = filepath
        super().__init__(message)
