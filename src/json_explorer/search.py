# /src/json_explorer/search.py
"""
Fuzzy keyword search over a whole JSON document, returning ranked paths.

Pipeline
--------
1) Tokenization
   - split camelCase / ACRONYMWord, snake_case, kebab-case, dotted.name; lowercase
   - base tokens = runs of [a-z0-9]
   - plus every 3/4/5-char substring ("gram") of tokens longer than that size
     (e.g. "mcdonalds" -> "mcdonalds", "mcd", "cdo", ..., "mcdon", ...)

2) Indexing (rebuilt for every call, never persisted)
   token -> [Posting(path, weight)]
   - object keys weigh 2, string values weigh 1
   - numbers / booleans / null are not tokenized (their key still is)

3) Querying
   - the query is tokenized the same way
   - each query token found in the index contributes weight * similarity to every
     path in its postings; similarity compares the token with the whole query
   - paths sorted by score (stable), top `limit * overfetch` kept

4) Grouping
   - paths in the same array element (a.b[3].name, a.b[3].city) share a group key a.b[3]
   - group score = hits in group * depth of the group key
   - a lone hit keeps its own path; a multi-hit group is reported by its key

Example:
  search({"a": {"b": [{"x": "cat"}, {"x": "catalog"}]}}, "cat", 10)
    -> [SearchResult(path="a.b[0].x", score=2.0), SearchResult(path="a.b[1].x", score=2.0)]
"""

from __future__ import annotations
from difflib import SequenceMatcher
from typing import Any, Callable, Dict, List, NamedTuple, Optional
import logging
import re

from pydantic import BaseModel

from json_explorer.values import JSONValue, JsonKind, kind_of

log = logging.getLogger("json_explorer.search")

KEY_WEIGHT = 2
VALUE_WEIGHT = 1
GRAM_SIZES = (3, 4, 5)
OVERFETCH = 5

Similarity = Callable[[str, str], float]

# ------------- text utils -------------
_LOWER_UPPER = re.compile(r"([a-z])([A-Z])")
_ACRONYM_WORD = re.compile(r"([A-Z]+)([A-Z][a-z])")
_SEPARATORS = re.compile(r"[_\-.]+")
_WORD = re.compile(r"[a-z0-9]+")
_TRAILING_INDEX = re.compile(r"\[\d+\]$")


class Posting(NamedTuple):
    path: str
    weight: int


InvertedIndex = Dict[str, List[Posting]]


class SearchResult(BaseModel):
    path: str
    score: float


def sequence_similarity(a: str, b: str) -> float:
    """Default similarity: difflib ratio, 1.0 for identical strings."""
    return SequenceMatcher(None, a, b).ratio()


def normalize(text: str) -> str:
    text = _LOWER_UPPER.sub(r"\1 \2", text)     # fooBar   -> foo Bar
    text = _ACRONYM_WORD.sub(r"\1 \2", text)    # HTMLFile -> HTML File
    text = _SEPARATORS.sub(" ", text)           # a_b-c.d  -> a b c d
    return text.lower()


def tokenize(text: str) -> List[str]:
    """Deduplicated base tokens and their grams, in first-seen order."""
    if not text:
        return []

    out: Dict[str, None] = {}
    for token in _WORD.findall(normalize(text)):
        out[token] = None
        for size in GRAM_SIZES:
            if len(token) <= size:
                continue
            for i in range(len(token) - size + 1):
                out[token[i:i + size]] = None
    return list(out)


# ------------- index -------------

def build_inverted_index(document: JSONValue) -> InvertedIndex:
    index: InvertedIndex = {}

    def add(token: str, path: str, weight: int) -> None:
        index.setdefault(token, []).append(Posting(path, weight))

    def walk(node: Any, prefix: str) -> None:
        kind = kind_of(node)
        if kind is JsonKind.STRING:
            for t in tokenize(node):
                add(t, prefix, VALUE_WEIGHT)
        elif kind is JsonKind.LIST:
            for i, item in enumerate(node):
                walk(item, f"{prefix}[{i}]")
        elif kind is JsonKind.OBJECT:
            for key, item in node.items():
                path = f"{prefix}.{key}" if prefix else key
                for t in tokenize(key):
                    add(t, path, KEY_WEIGHT)
                walk(item, path)
        # null / boolean / number: nothing to index

    walk(document, "")
    return index


def query_index(
    index: InvertedIndex,
    text: str,
    limit: int,
    similarity: Optional[Similarity] = None,
) -> List[SearchResult]:
    similarity = similarity or sequence_similarity
    q_lower = text.lower()
    scores: Dict[str, float] = {}

    for token in tokenize(text):
        postings = index.get(token)
        if not postings:
            continue
        sim = similarity(token, q_lower)
        for path, weight in postings:
            scores[path] = scores.get(path, 0.0) + weight * sim

    # sorted() is stable: equal scores keep discovery order
    ranked = sorted(scores.items(), key=lambda kv: kv[1], reverse=True)
    return [SearchResult(path=p, score=s) for p, s in ranked[:limit]]


# ------------- grouping -------------

def group_key(path: str) -> str:
    """Path cut right after its first array-index segment."""
    parts: List[str] = []
    for part in path.split("."):
        parts.append(part)
        if _TRAILING_INDEX.search(part):
            break
    return ".".join(parts)


def finalize_grouping(results: List[SearchResult], limit: int) -> List[SearchResult]:
    groups: Dict[str, Dict[str, Any]] = {}

    for r in results:
        key = group_key(r.path)
        g = groups.get(key)
        if g is None:
            g = groups[key] = {
                "representative": r.path,
                "freq": 0,
                "depth": len(key.split(".")),
            }
        g["freq"] += 1

    grouped = [
        SearchResult(
            path=g["representative"] if g["freq"] == 1 else key,
            score=g["freq"] * g["depth"],
        )
        for key, g in groups.items()
    ]
    grouped.sort(key=lambda r: r.score, reverse=True)
    return grouped[:limit]


def search(
    document: JSONValue,
    text: str,
    limit: int,
    similarity: Optional[Similarity] = None,
    overfetch: int = OVERFETCH,
) -> List[SearchResult]:
    index = build_inverted_index(document)
    raw = query_index(index, text, limit * overfetch, similarity)
    results = finalize_grouping(raw, limit)
    log.debug(
        "search %r: %d tokens indexed, %d raw hits, %d groups returned",
        text, len(index), len(raw), len(results),
    )
    return results
