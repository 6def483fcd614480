"""Record Validation — evaluate every FieldSpec of a Schema against one record.

Invariants:
    - Pure: mutates neither schema nor record, holds no reference to either after return
    - No short-circuit: every applicable rule of every field runs
    - Field order = schema declaration order; violation order = rule declaration order
    - Absent or None value → only presence rules run (optional fields skip entirely)
    - Present value of the wrong FieldType → exactly one TYPE_MISMATCH_CODE violation,
      the field's other rules are skipped (they would not be well-typed)
    - Record keys unknown to the schema are ignored

Design Decisions:
    - RecordValidator holds only the schema: many threads may share one instance
    - Type check before rules: keeps every evaluator free of isinstance guards
"""

from types import MappingProxyType
from typing import Any, Mapping

from fieldguard.core.domain_types import TYPE_MISMATCH_CODE, python_type_name
from fieldguard.core.evaluate_rule import evaluate_rule
from fieldguard.core.format_messages import render_message
from fieldguard.core.pattern_cache import PatternCache
from fieldguard.core.schema import FieldSpec, Schema
from fieldguard.core.validation_report import FieldViolation, ValidationReport

_TYPE_MISMATCH_MESSAGE = "{field} must be of type {expected}, got {actual}"


def _type_mismatch(spec: FieldSpec, value: Any) -> FieldViolation:
    params = {"expected": spec.field_type.value, "actual": python_type_name(value)}
    return FieldViolation(
        field=spec.name,
        code=TYPE_MISMATCH_CODE,
        message=render_message(_TYPE_MISMATCH_MESSAGE, spec.name, params),
        params=MappingProxyType(params),
    )


def evaluate_field(
    spec: FieldSpec, record: Mapping[str, Any], patterns: PatternCache,
) -> tuple[FieldViolation, ...]:
    """All violations for one field, in rule declaration order."""
    value = record.get(spec.name)
    if value is None:
        rules = spec.presence_rules()
    elif not spec.field_type.accepts(value):
        return (_type_mismatch(spec, value),)
    else:
        rules = spec.rules

    violations = []
    for rule in rules:
        violation = evaluate_rule(rule, spec.name, value, patterns)
        if violation is not None:
            violations.append(violation)
    return tuple(violations)


class RecordValidator:
    """Evaluates one immutable Schema against any number of records."""

    __slots__ = ("_schema",)

    def __init__(self, schema: Schema):
        self._schema = schema

    @property
    def schema(self) -> Schema:
        return self._schema

    def validate(self, record: Mapping[str, Any]) -> ValidationReport:
        errors: dict[str, tuple[FieldViolation, ...]] = {}
        for spec in self._schema:
            violations = evaluate_field(spec, record, self._schema.patterns)
            if violations:
                errors[spec.name] = violations
        return ValidationReport(errors)


def validate_record(schema: Schema, record: Mapping[str, Any]) -> ValidationReport:
    """Functional shortcut for RecordValidator(schema).validate(record)."""
    return RecordValidator(schema).validate(record)
