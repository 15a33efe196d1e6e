"""Pytest configuration and shared fixtures."""

import json
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


@pytest.fixture
def person():
    """Small object with one value of every JSON kind."""
    return {
        "name": "Ada",
        "age": 36,
        "active": True,
        "tags": ["a", "b"],
        "address": {"city": "London", "zip": "N1"},
        "notes": None,
    }


@pytest.fixture
def catalog():
    """Nested document with lists of objects and a list of lists."""
    return {
        "store": {
            "name": "Corner Shop",
            "items": [
                {"itemName": "Green Apple", "price": 1.5, "inStock": True},
                {"itemName": "Apple Pie", "price": 4, "inStock": False},
                {"itemName": "Banana", "price": 0.25, "inStock": True},
            ],
        },
        "matrix": [["alpha", "beta"], ["gamma"]],
        "owner": {"firstName": "Grace", "lastName": "Hopper"},
    }


@pytest.fixture
def sample_json_path(tmp_path, person):
    """Path to a JSON file holding the `person` fixture."""
    p = tmp_path / "sample.json"
    p.write_text(json.dumps(person), encoding="utf-8")
    return p


@pytest.fixture
def catalog_json_path(tmp_path, catalog):
    """Path to a JSON file holding the `catalog` fixture."""
    p = tmp_path / "catalog.json"
    p.write_text(json.dumps(catalog), encoding="utf-8")
    return p
