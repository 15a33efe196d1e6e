"""Unit tests for verbosity-controlled rendering."""

import copy
import pytest

import sys
sys.path.insert(0, 'src')
from json_explorer.simplify import simplify
from json_explorer.values import MAX_CHAR_SIZE, char_size


def test_level_5_is_identity(person):
    assert simplify(person, 5) is person


def test_level_4_expands_small_object(person):
    """Six keys fit the default object limit; children render at level 1."""
    assert simplify(person, 4) == {
        "name": "Ada",
        "age": 36,
        "active": True,
        "tags": ["a", "b"],
        "address": {"city": "string", "zip": "string"},
        "notes": None,
    }


def test_level_4_large_object_falls_back_to_level_3(person):
    out = simplify(person, 4, object_limit=2, char_limit=10)
    assert out == simplify(person, 3)


def test_level_4_small_by_chars_only(person):
    """Too many keys but short enough text still expands."""
    out = simplify(person, 4, object_limit=1, char_limit=10_000)
    assert out["address"] == {"city": "string", "zip": "string"}


def test_level_4_list_is_never_expanded():
    assert simplify([1, 2, 3], 4) == "list"


def test_level_3_sizes(person):
    out = simplify(person, 3)
    assert out["tags"] == "[list: 2 items, 9 chars]"
    assert out["address"] == "{object: 2 keys, 28 chars}"
    assert out["name"] == "Ada"
    assert out["notes"] is None


def test_level_3_list():
    assert simplify(["a", "b"], 3) == "[list: 2 items, 9 chars]"


def test_level_2_counts(person):
    assert simplify(person, 2) == {
        "name": "Ada",
        "age": 36,
        "active": True,
        "tags": "[list: 2 items]",
        "address": "[object: 2 keys]",
        "notes": None,
    }


def test_level_2_list():
    assert simplify(["a", "b"], 2) == "[list: 2 items]"


def test_level_1_type_map(person):
    assert simplify(person, 1) == {
        "name": "string",
        "age": "number",
        "active": "boolean",
        "tags": "list",
        "address": "object",
        "notes": "null",
    }


def test_level_1_expands_small_lists_recursively():
    value = [{"a": 1}, [1, 2], "x"]
    assert simplify(value, 1) == [{"a": "number"}, [1, 2], "x"]


def test_level_1_long_list_with_short_text_expands():
    assert simplify([1, 2, 3, 4], 1, list_limit=3) == [1, 2, 3, 4]


def test_level_1_falls_back_to_size_marker():
    """10 items over both limits -> size marker, not an expanded list."""
    value = list(range(10))
    out = simplify(value, 1, list_limit=3, char_limit=5)
    assert out == "[list: 10 items, 21 chars]"


def test_level_0_root_only(person):
    assert simplify(person, 0) == ["name", "age", "active", "tags", "address", "notes"]
    assert simplify([1, 2, 3], 0) == "[list: 3 items]"


@pytest.mark.parametrize("value", [None, True, 3, 2.5, "text"])
@pytest.mark.parametrize("level", range(6))
def test_primitives_pass_through(value, level):
    assert simplify(value, level) == value


def test_cyclic_value_uses_max_size():
    value = []
    value.append(value)
    assert char_size(value) == MAX_CHAR_SIZE
    assert simplify(value, 3) == f"[list: 1 items, {MAX_CHAR_SIZE} chars]"
    assert simplify(value, 1, list_limit=0, char_limit=5) == f"[list: 1 items, {MAX_CHAR_SIZE} chars]"


def test_invalid_verbosity():
    with pytest.raises(ValueError):
        simplify({"a": 1}, 6)


def test_detail_grows_with_level(person):
    """Level 0 exposes only keys, level 5 the whole value."""
    assert simplify(person, 0) == list(person)
    assert set(simplify(person, 1)) == set(person)
    assert simplify(person, 5) == person


def test_simplify_does_not_mutate(person):
    before = copy.deepcopy(person)
    for level in range(6):
        simplify(person, level)
    assert person == before
