"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - RuleKind is a closed set — evaluators dispatch on it, nothing else
    - TYPE_MISMATCH_CODE is reserved: no rule may use it as its code
    - FieldType.accepts() never treats bool as a number (bool is an int subclass)
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - str Enums: serialize to JSON without custom encoders (ADR: report is JSON)
    - NewType for identifiers: zero runtime cost, full type-checker support
"""

from enum import Enum
from typing import Any, NewType


# ─── Identity Types ──────────────────────────────────────────────

FieldName = NewType("FieldName", str)
PatternId = NewType("PatternId", str)


# ─── Enums ───────────────────────────────────────────────────────

class RuleKind(str, Enum):
    """The closed set of rule evaluators."""
    LENGTH = "length"
    RANGE = "range"
    REGEX = "regex"
    CONTAINS = "contains"
    EMAIL = "email"
    CUSTOM = "custom"


class FieldType(str, Enum):
    """Declared value type of a field — checked before any rule runs."""
    STRING = "string"
    INTEGER = "integer"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ANY = "any"

    def accepts(self, value: Any) -> bool:
        if self is FieldType.ANY:
            return True
        if self is FieldType.STRING:
            return isinstance(value, str)
        if self is FieldType.BOOLEAN:
            return isinstance(value, bool)
        if isinstance(value, bool):
            return False
        if self is FieldType.INTEGER:
            return isinstance(value, int)
        return isinstance(value, (int, float))


# Reserved violation code for "value does not have the declared FieldType"
TYPE_MISMATCH_CODE = "type"

# Which rule kinds make sense on which declared types.
# ANY accepts only kinds whose evaluator inspects nothing type-specific.
RULE_KIND_TYPES: dict[RuleKind, frozenset[FieldType]] = {
    RuleKind.LENGTH: frozenset({FieldType.STRING}),
    RuleKind.RANGE: frozenset({FieldType.INTEGER, FieldType.NUMBER}),
    RuleKind.REGEX: frozenset({FieldType.STRING}),
    RuleKind.CONTAINS: frozenset({FieldType.STRING}),
    RuleKind.EMAIL: frozenset({FieldType.STRING}),
    RuleKind.CUSTOM: frozenset(FieldType),
}


def python_type_name(value: Any) -> str:
    """JSON-flavored type name for a runtime value (used in type-mismatch params)."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__
