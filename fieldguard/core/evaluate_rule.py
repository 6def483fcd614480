"""Rule Evaluation — pure evaluators, one per RuleKind.

Invariants:
    - All functions are PURE: no IO, no logging, no mutation of rule, value or cache
    - Return FieldViolation on failure, None on success
    - Never raise on a well-typed value (type agreement is checked by the caller)
    - Length counts characters (code points), not encoded bytes
    - Range bounds are inclusive on both sides
    - Regex uses search(): matches anywhere unless the pattern itself anchors

Design Decisions:
    - Explicit kind → evaluator dict over getattr dispatch: every mapping visible
      in one place (ADR: no convention-over-config)
    - Return values (not exceptions): the caller aggregates every violation;
      exceptions would naturally short-circuit
"""

from types import MappingProxyType
from typing import Any, Callable, Mapping

from fieldguard.core.domain_types import RuleKind
from fieldguard.core.format_messages import render_message
from fieldguard.core.pattern_cache import PatternCache
from fieldguard.core.rules import Rule
from fieldguard.core.validation_report import FieldViolation


def _violation(
    rule: Rule, field: str, params: Mapping[str, Any], message: str | None = None,
) -> FieldViolation:
    return FieldViolation(
        field=field,
        code=rule.code,
        message=message or render_message(rule.message, field, params),
        params=MappingProxyType(dict(params)),
    )


def _outside(actual: Any, low: Any, high: Any) -> bool:
    return (low is not None and actual < low) or (high is not None and actual > high)


# ─── Evaluators ──────────────────────────────────────────────────

def check_length(rule: Rule, field: str, value: str, patterns: PatternCache) -> FieldViolation | None:
    low, high = rule.params["min"], rule.params["max"]
    actual = len(value)
    if not _outside(actual, low, high):
        return None
    return _violation(rule, field, {"min": low, "max": high, "actual": actual})


def check_range(rule: Rule, field: str, value: int | float, patterns: PatternCache) -> FieldViolation | None:
    low, high = rule.params["min"], rule.params["max"]
    # NaN compares false against every bound
    if value == value and not _outside(value, low, high):
        return None
    return _violation(rule, field, {"min": low, "max": high, "actual": value})


def check_regex(rule: Rule, field: str, value: str, patterns: PatternCache) -> FieldViolation | None:
    pattern_id = rule.params["pattern"]
    if patterns.get(pattern_id).search(value):
        return None
    return _violation(rule, field, {"pattern": pattern_id})


def check_contains(rule: Rule, field: str, value: str, patterns: PatternCache) -> FieldViolation | None:
    needle = rule.params["needle"]
    if needle in value:
        return None
    return _violation(rule, field, {"needle": needle})


def is_email_shaped(value: str) -> bool:
    """One '@', non-empty local part, dotted domain with no empty labels, no whitespace."""
    if any(ch.isspace() for ch in value) or value.count("@") != 1:
        return False
    local, domain = value.split("@")
    if not local or "." not in domain:
        return False
    return all(domain.split("."))


def check_email(rule: Rule, field: str, value: str, patterns: PatternCache) -> FieldViolation | None:
    if is_email_shaped(value):
        return None
    return _violation(rule, field, {})


def _unpack_predicate_result(rule: Rule, result: Any) -> tuple[bool, str | None]:
    if isinstance(result, bool):
        return result, None
    if (
        isinstance(result, tuple) and len(result) == 2
        and isinstance(result[0], bool)
        and (result[1] is None or isinstance(result[1], str))
    ):
        return result
    raise TypeError(
        f"custom rule '{rule.code}' predicate must return bool or "
        f"(bool, str | None), got {result!r}",
    )


def check_custom(rule: Rule, field: str, value: Any, patterns: PatternCache) -> FieldViolation | None:
    passed, override = _unpack_predicate_result(
        rule, rule.predicate(value),  # type: ignore[misc]
    )
    if passed:
        return None
    return _violation(rule, field, {}, message=override)


EVALUATORS: dict[RuleKind, Callable[[Rule, str, Any, PatternCache], FieldViolation | None]] = {
    RuleKind.LENGTH: check_length,
    RuleKind.RANGE: check_range,
    RuleKind.REGEX: check_regex,
    RuleKind.CONTAINS: check_contains,
    RuleKind.EMAIL: check_email,
    RuleKind.CUSTOM: check_custom,
}


def evaluate_rule(
    rule: Rule, field: str, value: Any, patterns: PatternCache,
) -> FieldViolation | None:
    """Evaluate one rule against one (well-typed) value."""
    return EVALUATORS[rule.kind](rule, field, value, patterns)
