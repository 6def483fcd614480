"""Domain Types — verifies rule kinds, field types and runtime type naming.

Tests:
    - RuleKind is the closed set of six kinds and serializes to string
    - FieldType.accepts() respects declared types and never treats bool as a number
    - Rule kind applicability table covers every kind
    - python_type_name() uses JSON-flavored names
"""

from fieldguard.core.domain_types import (
    FieldType, RuleKind, RULE_KIND_TYPES, TYPE_MISMATCH_CODE, python_type_name,
)


def test_rule_kind_has_six_members():
    assert {k.value for k in RuleKind} == {
        "length", "range", "regex", "contains", "email", "custom",
    }


def test_rule_kind_serializes_to_string():
    assert RuleKind.EMAIL == "email"
    assert RuleKind.RANGE.value == "range"


def test_type_mismatch_code_is_not_a_rule_kind():
    assert TYPE_MISMATCH_CODE not in {k.value for k in RuleKind}


def test_every_rule_kind_has_applicable_types():
    assert set(RULE_KIND_TYPES) == set(RuleKind)
    assert all(RULE_KIND_TYPES[k] for k in RuleKind)


# ─── FieldType.accepts ───────────────────────────────────────────

def test_string_accepts_only_str():
    assert FieldType.STRING.accepts("x")
    assert not FieldType.STRING.accepts(3)


def test_integer_rejects_bool_and_float():
    assert FieldType.INTEGER.accepts(20)
    assert not FieldType.INTEGER.accepts(True)
    assert not FieldType.INTEGER.accepts(20.5)


def test_number_accepts_int_and_float_but_not_bool():
    assert FieldType.NUMBER.accepts(1)
    assert FieldType.NUMBER.accepts(1.5)
    assert not FieldType.NUMBER.accepts(False)


def test_boolean_accepts_only_bool():
    assert FieldType.BOOLEAN.accepts(True)
    assert not FieldType.BOOLEAN.accepts(1)


def test_any_accepts_everything():
    for value in ("x", 1, 1.5, True, [], {}):
        assert FieldType.ANY.accepts(value)


# ─── python_type_name ────────────────────────────────────────────

def test_python_type_name_is_json_flavored():
    assert python_type_name("x") == "string"
    assert python_type_name(1) == "integer"
    assert python_type_name(1.0) == "number"
    assert python_type_name(True) == "boolean"
    assert python_type_name(None) == "null"
    assert python_type_name([1]) == "array"
    assert python_type_name({"a": 1}) == "object"
