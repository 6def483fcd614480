"""Pattern Cache — tests for one-time compilation and read-only lookups.

Tests cover:
    - Patterns compiled once in the constructor, same object on every lookup
    - Malformed literal raises SchemaError naming the identifier
    - Unknown identifier lookup raises SchemaError
    - Cache has no mutation surface
"""

import re

import pytest

from fieldguard.core.errors import SchemaError
from fieldguard.core.pattern_cache import PatternCache


def test_lookup_returns_compiled_pattern():
    cache = PatternCache({"digits": r"^\d+$"})
    assert isinstance(cache.get("digits"), re.Pattern)
    assert cache.get("digits").search("123")


def test_lookup_never_recompiles():
    cache = PatternCache({"digits": r"^\d+$"})
    assert cache.get("digits") is cache.get("digits")


def test_malformed_pattern_is_schema_error():
    with pytest.raises(SchemaError) as exc_info:
        PatternCache({"broken": r"([a-z"})
    assert "broken" in exc_info.value.message


def test_non_string_literal_is_schema_error():
    with pytest.raises(SchemaError):
        PatternCache({"n": 42})  # type: ignore[dict-item]


def test_unknown_identifier_is_schema_error():
    cache = PatternCache({"a": "a"})
    with pytest.raises(SchemaError):
        cache.get("missing")


def test_membership_len_and_literal():
    cache = PatternCache({"a": "a+", "b": "b+"})
    assert "a" in cache
    assert "z" not in cache
    assert len(cache) == 2
    assert sorted(cache) == ["a", "b"]
    assert cache.literal("a") == "a+"


def test_empty_cache_is_allowed():
    assert len(PatternCache()) == 0


def test_cache_exposes_no_setters():
    cache = PatternCache({"a": "a"})
    with pytest.raises(TypeError):
        cache._patterns["b"] = re.compile("b")  # type: ignore[index]
