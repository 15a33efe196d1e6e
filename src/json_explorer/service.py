# /src/json_explorer/service.py
"""
Document-level operations behind the MCP tools.

  explore_json("data.json", "items[2]", verbosity=3)
      load -> resolve path -> simplify
  query_json("data.json", "user name", limit=20, case_sensitive=True)
      load -> search -> (optional) keep hits whose value contains the raw query
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional
import logging

from json_explorer.config import settings
from json_explorer.contains import contains
from json_explorer.json_loader import load_document
from json_explorer.navigator import resolve
from json_explorer.search import search
from json_explorer.simplify import simplify

log = logging.getLogger("json_explorer.service")


def explore_json(
    filepath: str,
    jsonpath: Optional[str] = None,
    verbosity: Optional[int] = None,
    list_limit: Optional[int] = None,
    object_limit: Optional[int] = None,
    char_limit: Optional[int] = None,
) -> Any:
    data = load_document(filepath)
    value = resolve(data, jsonpath or "")
    return simplify(
        value,
        settings.DEFAULT_VERBOSITY if verbosity is None else verbosity,
        settings.LIST_DISPLAY_LIMIT if list_limit is None else list_limit,
        settings.OBJECT_DISPLAY_LIMIT if object_limit is None else object_limit,
        settings.CHAR_DISPLAY_LIMIT if char_limit is None else char_limit,
    )


def query_json(
    filepath: str,
    text: str,
    limit: Optional[int] = None,
    case_sensitive: bool = False,
) -> Dict[str, List[Dict[str, Any]]]:
    """
    Returns {"results": [...]} plus "exactMatch" when case_sensitive is set and
    at least one hit contains `text` verbatim.
    """
    data = load_document(filepath)
    limit = settings.QUERY_DEFAULT_LIMIT if limit is None else limit
    results = search(data, text, limit, overfetch=settings.QUERY_OVERFETCH)
    log.info("Query %r on %s -> %d results", text, filepath, len(results))

    out: Dict[str, List[Dict[str, Any]]] = {"results": [r.model_dump() for r in results]}
    if case_sensitive:
        exact = [r.model_dump() for r in results if contains(data, r.path, text)]
        if exact:
            out["exactMatch"] = exact
    return out
