"""Rules — immutable constraint definitions and the builder functions that make them.

Invariants:
    - A Rule is immutable once constructed (frozen dataclass + read-only params mapping)
    - Every parameter is checked here: bad bounds, empty needles, non-callable predicates
      raise SchemaError at construction, never during validation
    - Rule.code defaults to the kind's value; only custom rules may choose another code
    - The reserved type-mismatch code can never be used as a rule code
    - Custom predicates are direct function references (no lookup by name)

Design Decisions:
    - Builder functions (length(), in_range(), ...) over a class per kind: the schema
      reads as a declarative list, and the closed set of kinds stays in RuleKind
    - required() is an ordinary custom rule flagged checks_presence — the engine has
      no special case for presence beyond "run presence rules on absent fields"
"""

import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Mapping

from fieldguard.core.domain_types import RuleKind, TYPE_MISMATCH_CODE
from fieldguard.core.errors import SchemaError

# Predicate result: bare pass/fail, or (pass/fail, override message)
PredicateResult = bool | tuple[bool, str | None]
Predicate = Callable[[Any], PredicateResult]


@dataclass(frozen=True)
class Rule:
    """One constraint: kind + parameters + failure message template."""
    kind: RuleKind
    code: str
    params: Mapping[str, Any]
    message: str
    predicate: Predicate | None = None
    checks_presence: bool = False

    def describe(self) -> dict:
        """Public, JSON-safe view of the rule (predicates are not exposed)."""
        return {
            "kind": self.kind.value,
            "code": self.code,
            "params": dict(self.params),
            "message": self.message,
        }


# ─── Parameter checks ────────────────────────────────────────────

def _is_number(value: Any) -> bool:
    """Finite int or float; bool, NaN and infinities are not usable bounds."""
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        return False
    return math.isfinite(value)


def _check_bounds(
    kind: RuleKind, low: Any, high: Any, *, integral: bool,
) -> None:
    if low is None and high is None:
        raise SchemaError(
            f"{kind.value} rule needs at least one of min/max", rule_code=kind.value,
        )
    for name, bound in (("min", low), ("max", high)):
        if bound is None:
            continue
        if integral and (not isinstance(bound, int) or isinstance(bound, bool) or bound < 0):
            raise SchemaError(
                f"{kind.value} rule {name} must be a non-negative integer, got {bound!r}",
                rule_code=kind.value,
            )
        if not integral and not _is_number(bound):
            raise SchemaError(
                f"{kind.value} rule {name} must be a finite number, got {bound!r}",
                rule_code=kind.value,
            )
    if low is not None and high is not None and low > high:
        raise SchemaError(
            f"{kind.value} rule min ({low}) is greater than max ({high})",
            rule_code=kind.value,
        )


def _bounds_message(low: Any, high: Any, *, unit: str = "") -> str:
    if low is not None and high is not None:
        return f"{{field}} must be between {{min}} and {{max}}{unit}"
    if low is not None:
        return f"{{field}} must be at least {{min}}{unit}"
    return f"{{field}} must be at most {{max}}{unit}"


# ─── Builders ────────────────────────────────────────────────────

def length(min: int | None = None, max: int | None = None, message: str | None = None) -> Rule:
    """Character count (not bytes) within [min, max]; either bound may be omitted."""
    _check_bounds(RuleKind.LENGTH, min, max, integral=True)
    return Rule(
        kind=RuleKind.LENGTH,
        code=RuleKind.LENGTH.value,
        params=MappingProxyType({"min": min, "max": max}),
        message=message or _bounds_message(min, max, unit=" characters long"),
    )


def in_range(
    min: int | float | None = None,
    max: int | float | None = None,
    message: str | None = None,
) -> Rule:
    """Numeric value within [min, max], both bounds inclusive."""
    _check_bounds(RuleKind.RANGE, min, max, integral=False)
    return Rule(
        kind=RuleKind.RANGE,
        code=RuleKind.RANGE.value,
        params=MappingProxyType({"min": min, "max": max}),
        message=message or _bounds_message(min, max),
    )


def regex(pattern_id: str, message: str | None = None) -> Rule:
    """Matches the cached pattern anywhere in the value (unless the pattern anchors)."""
    if not isinstance(pattern_id, str) or not pattern_id.strip():
        raise SchemaError("regex rule needs a pattern identifier", rule_code=RuleKind.REGEX.value)
    return Rule(
        kind=RuleKind.REGEX,
        code=RuleKind.REGEX.value,
        params=MappingProxyType({"pattern": pattern_id}),
        message=message or "{field} does not match the required format",
    )


def contains(needle: str, message: str | None = None) -> Rule:
    """Case-sensitive substring containment."""
    if not isinstance(needle, str) or not needle:
        raise SchemaError(
            "contains rule needs a non-empty string", rule_code=RuleKind.CONTAINS.value,
        )
    return Rule(
        kind=RuleKind.CONTAINS,
        code=RuleKind.CONTAINS.value,
        params=MappingProxyType({"needle": needle}),
        message=message or "{field} must contain '{needle}'",
    )


def email(message: str | None = None) -> Rule:
    """Syntactic address shape only — no DNS, no deliverability."""
    return Rule(
        kind=RuleKind.EMAIL,
        code=RuleKind.EMAIL.value,
        params=MappingProxyType({}),
        message=message or "{field} must be a valid email address",
    )


def custom(
    predicate: Predicate,
    code: str = RuleKind.CUSTOM.value,
    message: str | None = None,
    checks_presence: bool = False,
) -> Rule:
    """Arbitrary author-supplied check for constraints the other kinds can't express.

    predicate(value) must return either a bool, or a 2-tuple (passed, message)
    where message is a str overriding the template or None to keep it. Any other
    return shape is a programming error and raises TypeError during validation.
    """
    if not callable(predicate):
        raise SchemaError("custom rule needs a callable predicate", rule_code=code)
    if not isinstance(code, str) or not code.strip():
        raise SchemaError("custom rule code must be a non-empty string")
    if code == TYPE_MISMATCH_CODE:
        raise SchemaError(
            f"rule code '{TYPE_MISMATCH_CODE}' is reserved for type mismatches", rule_code=code,
        )
    return Rule(
        kind=RuleKind.CUSTOM,
        code=code,
        params=MappingProxyType({}),
        message=message or "{field} is invalid",
        predicate=predicate,
        checks_presence=checks_presence,
    )


def _is_present(value: Any) -> bool:
    return value is not None


def required(message: str | None = None) -> Rule:
    """Presence requirement — the only kind of rule evaluated on absent fields."""
    return custom(
        _is_present,
        code="required",
        message=message or "{field} is required",
        checks_presence=True,
    )
