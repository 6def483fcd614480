"""Schema — ordered, immutable field → rules definitions, built once.

Invariants:
    - FieldSpec.rules order is the order violations are reported in
    - A field is optional iff none of its rules checks presence
    - Schema.fields preserves declaration order and is read-only (MappingProxyType)
    - build_schema() rejects, with SchemaError:
        duplicate field names, rule kinds not applicable to the declared FieldType,
        regex rules whose pattern id is not in the schema's PatternCache
    - A Schema that was built is fully resolvable: validation never raises SchemaError

Design Decisions:
    - Builder functions (field(), build_schema()) over class-attribute declarations:
      no metaclass magic, the schema is an ordinary value
    - field(required=True) prepends rules.required(): presence becomes a normal rule
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

from fieldguard.core.domain_types import FieldType, RuleKind, RULE_KIND_TYPES
from fieldguard.core.errors import ErrorContext, SchemaError
from fieldguard.core.pattern_cache import PatternCache
from fieldguard.core.rules import Rule, required as required_rule


@dataclass(frozen=True)
class FieldSpec:
    """Ordered rules bound to one field name."""
    name: str
    field_type: FieldType
    rules: tuple[Rule, ...]

    @property
    def optional(self) -> bool:
        return not any(r.checks_presence for r in self.rules)

    def presence_rules(self) -> tuple[Rule, ...]:
        return tuple(r for r in self.rules if r.checks_presence)

    def describe(self, patterns: PatternCache) -> dict:
        rules = []
        for rule in self.rules:
            entry = rule.describe()
            if rule.kind is RuleKind.REGEX:
                entry["params"]["literal"] = patterns.literal(rule.params["pattern"])
            rules.append(entry)
        return {
            "name": self.name,
            "type": self.field_type.value,
            "optional": self.optional,
            "rules": rules,
        }


def field(
    name: str,
    *rules: Rule,
    field_type: FieldType = FieldType.STRING,
    required: bool = False,
) -> FieldSpec:
    """Declare one field. required=True adds a presence rule ahead of the others."""
    if not isinstance(name, str) or not name:
        raise SchemaError("field name must be a non-empty string")
    for rule in rules:
        if not isinstance(rule, Rule):
            raise SchemaError(
                f"field '{name}' got a non-rule {rule!r}", field_name=name,
            )
    ordered = (required_rule(),) + tuple(rules) if required else tuple(rules)
    return FieldSpec(name=name, field_type=FieldType(field_type), rules=ordered)


class Schema:
    """Immutable ordered mapping of field name → FieldSpec plus its PatternCache."""

    __slots__ = ("_name", "_fields", "_patterns")

    def __init__(self, name: str, fields: Mapping[str, FieldSpec], patterns: PatternCache):
        self._name = name
        self._fields: Mapping[str, FieldSpec] = MappingProxyType(dict(fields))
        self._patterns = patterns

    @property
    def name(self) -> str:
        return self._name

    @property
    def fields(self) -> Mapping[str, FieldSpec]:
        return self._fields

    @property
    def patterns(self) -> PatternCache:
        return self._patterns

    def __iter__(self) -> Iterator[FieldSpec]:
        return iter(self._fields.values())

    def __len__(self) -> int:
        return len(self._fields)

    def __contains__(self, field_name: object) -> bool:
        return field_name in self._fields

    def describe(self) -> dict:
        return {
            "name": self._name,
            "fields": [spec.describe(self._patterns) for spec in self],
        }

    def __repr__(self) -> str:
        return f"Schema({self._name!r}, fields={list(self._fields)!r})"


def _check_rule_fits(spec: FieldSpec, rule: Rule, patterns: PatternCache) -> None:
    if spec.field_type not in RULE_KIND_TYPES[rule.kind]:
        raise SchemaError(
            f"{rule.kind.value} rule cannot apply to {spec.field_type.value} field '{spec.name}'",
            field_name=spec.name, rule_code=rule.code,
        )
    if rule.kind is RuleKind.REGEX and rule.params["pattern"] not in patterns:
        raise SchemaError(
            f"field '{spec.name}' references unknown pattern '{rule.params['pattern']}'",
            field_name=spec.name, rule_code=rule.code,
        )


def build_schema(
    name: str,
    specs: Iterable[FieldSpec],
    patterns: PatternCache | Mapping[str, str] | None = None,
) -> Schema:
    """Assemble and cross-check a Schema. Raises SchemaError on any inconsistency."""
    if not isinstance(patterns, PatternCache):
        try:
            patterns = PatternCache(patterns)
        except SchemaError as e:
            e.context.schema_name = name
            raise
    fields: dict[str, FieldSpec] = {}
    for spec in specs:
        if spec.name in fields:
            raise SchemaError(
                f"field '{spec.name}' declared twice",
                field_name=spec.name, context=ErrorContext(schema_name=name),
            )
        for rule in spec.rules:
            try:
                _check_rule_fits(spec, rule, patterns)
            except SchemaError as e:
                e.context.schema_name = name
                raise
        fields[spec.name] = spec
    return Schema(name, fields, patterns)
