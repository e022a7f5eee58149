"""Shared fixtures for the jsonlens test suite."""

import json

import pytest


@pytest.fixture
def mixed_doc():
    """Small document touching every JSON variant."""
    return {"a": 1, "b": [True, None], "c": {"d": "x"}}


@pytest.fixture
def level_doc():
    """Containers at depths 0, 1 and 2 with leaves down to depth 3."""
    return {"a": {"b": {"c": 1}}, "d": [1, 2]}


@pytest.fixture
def make_deep():
    """Factory for a document nested `levels` objects deep."""
    def _make(levels: int, leaf="leaf"):
        value = leaf
        for _ in range(levels):
            value = {"k": value}
        return value
    return _make


@pytest.fixture
def write_json(tmp_path):
    """Write a value (or raw text) to a file and return its path as str."""
    def _write(data, name="doc.json"):
        path = tmp_path / name
        path.write_text(data if isinstance(data, str) else json.dumps(data))
        return str(path)
    return _write
