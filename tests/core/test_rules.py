"""Rule Construction — tests for rule builders and construction-time parameter checks.

Tests cover:
    - Each builder produces the right kind, code and params
    - Default messages depend on which bounds are set
    - Invalid parameters raise SchemaError (never deferred to validation)
    - Rules are immutable
    - required() is a presence-checking custom rule
"""

import dataclasses

import pytest

from fieldguard.core.domain_types import RuleKind
from fieldguard.core.errors import SchemaError
from fieldguard.core.rules import (
    contains, custom, email, in_range, length, regex, required,
)


# ─── builders ────────────────────────────────────────────────────

def test_length_rule_carries_bounds():
    rule = length(min=3, max=10)
    assert rule.kind is RuleKind.LENGTH
    assert rule.code == "length"
    assert dict(rule.params) == {"min": 3, "max": 10}


def test_length_default_message_depends_on_bounds():
    assert "between" in length(min=1, max=5).message
    assert "at least" in length(min=1).message
    assert "at most" in length(max=5).message


def test_in_range_accepts_floats():
    rule = in_range(0.5, 1.5)
    assert rule.kind is RuleKind.RANGE
    assert dict(rule.params) == {"min": 0.5, "max": 1.5}


def test_regex_rule_stores_pattern_id():
    assert dict(regex("slug").params) == {"pattern": "slug"}


def test_contains_rule_stores_needle():
    assert dict(contains("gmail").params) == {"needle": "gmail"}


def test_email_rule_has_no_params():
    rule = email()
    assert rule.kind is RuleKind.EMAIL
    assert dict(rule.params) == {}


def test_custom_rule_code_defaults_to_custom():
    assert custom(lambda v: True).code == "custom"
    assert custom(lambda v: True, code="strength").code == "strength"


def test_message_override_is_kept():
    assert contains("x", message="nope").message == "nope"


def test_required_is_a_presence_checking_custom_rule():
    rule = required()
    assert rule.kind is RuleKind.CUSTOM
    assert rule.code == "required"
    assert rule.checks_presence
    assert not length(min=1).checks_presence


# ─── construction failures ───────────────────────────────────────

@pytest.mark.parametrize("kwargs", [
    {},
    {"min": -1},
    {"min": 5, "max": 2},
    {"min": 1.5},
    {"max": True},
])
def test_length_rejects_bad_bounds(kwargs):
    with pytest.raises(SchemaError):
        length(**kwargs)


@pytest.mark.parametrize("low, high", [
    (None, None),
    (10, 1),
    ("1", 5),
    (float("nan"), 22),
    (18, float("nan")),
    (float("-inf"), None),
    (None, float("inf")),
])
def test_in_range_rejects_bad_bounds(low, high):
    with pytest.raises(SchemaError):
        in_range(low, high)


def test_in_range_error_names_non_finite_bound():
    with pytest.raises(SchemaError, match="finite number"):
        in_range(min=float("nan"), max=22)


def test_regex_requires_pattern_id():
    with pytest.raises(SchemaError):
        regex("")


def test_contains_rejects_empty_needle():
    with pytest.raises(SchemaError):
        contains("")


def test_custom_requires_callable():
    with pytest.raises(SchemaError):
        custom("not_a_function")  # type: ignore[arg-type]


def test_custom_cannot_use_reserved_type_code():
    with pytest.raises(SchemaError) as exc_info:
        custom(lambda v: True, code="type")
    assert exc_info.value.code == "SCHEMA_ERROR"


# ─── immutability ────────────────────────────────────────────────

def test_rule_is_frozen():
    rule = length(min=1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        rule.message = "changed"  # type: ignore[misc]


def test_rule_params_are_read_only():
    rule = length(min=1)
    with pytest.raises(TypeError):
        rule.params["min"] = 99  # type: ignore[index]


def test_describe_exposes_no_predicate():
    described = custom(lambda v: True, code="c").describe()
    assert set(described) == {"kind", "code", "params", "message"}
