# /src/json_explorer/json_loader.py
"""
JSON document loader.

Purpose
-------
Read a JSON file from disk and return the parsed value, untouched.
Objects keep key insertion order (plain dicts).

Errors
------
Missing file, unreadable file, bad encoding or malformed JSON all raise
DocumentLoadError (original exception chained); callers do not retry.
"""

from __future__ import annotations
from pathlib import Path
import json
import logging

from json_explorer.errors import DocumentLoadError
from json_explorer.values import JSONValue

log = logging.getLogger("json_explorer.json_loader")


def load_document(file_path: str) -> JSONValue:
    p = Path(file_path).expanduser().resolve()
    if not p.exists():
        raise DocumentLoadError(f"JSON not found: {file_path}", filepath=file_path)
    if not p.is_file():
        raise DocumentLoadError(f"Not a file: {file_path}", filepath=file_path)

    try:
        with p.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, RecursionError) as e:
        raise DocumentLoadError(f"Failed to parse JSON {file_path}: {e}", filepath=file_path) from e
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentLoadError(f"Failed to read {file_path}: {e}", filepath=file_path) from e

    log.debug("Loaded %s (%d bytes)", p, p.stat().st_size)
    return data
