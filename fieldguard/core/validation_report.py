"""Validation Report — plain immutable data for rule violations.

Invariants:
    - FieldViolation is data, never raised
    - ValidationReport omits fields with zero violations
    - Report is empty iff the record satisfied every rule
    - Field order follows schema declaration order; violation order follows rule order
    - to_wire() is the exact response body: {field: [{code, message, params}, ...]}

Design Decisions:
    - Named FieldViolation, not ValidationError: avoids shadowing pydantic.ValidationError
      at the API boundary where both are imported
    - Tuples + MappingProxyType: a report handed to a caller cannot be mutated under
      another reader
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterator, Mapping


@dataclass(frozen=True)
class FieldViolation:
    """One violated rule on one field."""
    field: str
    code: str
    message: str
    params: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    def to_wire(self) -> dict:
        return {
            "code": self.code,
            "message": self.message,
            "params": dict(self.params),
        }


class ValidationReport:
    """Field-keyed, ordered collection of every violation found for one record."""

    __slots__ = ("_errors",)

    def __init__(self, errors: Mapping[str, tuple[FieldViolation, ...]] | None = None):
        self._errors: Mapping[str, tuple[FieldViolation, ...]] = MappingProxyType(
            {name: tuple(v) for name, v in (errors or {}).items() if v},
        )

    @property
    def is_valid(self) -> bool:
        return not self._errors

    @property
    def error_count(self) -> int:
        return sum(len(v) for v in self._errors.values())

    @property
    def fields(self) -> list[str]:
        return list(self._errors)

    def errors_for(self, field_name: str) -> tuple[FieldViolation, ...]:
        return self._errors.get(field_name, ())

    def codes_for(self, field_name: str) -> list[str]:
        return [v.code for v in self.errors_for(field_name)]

    def violations(self) -> Iterator[FieldViolation]:
        for errors in self._errors.values():
            yield from errors

    def to_wire(self) -> dict[str, list[dict]]:
        return {
            name: [v.to_wire() for v in errors]
            for name, errors in self._errors.items()
        }

    def __len__(self) -> int:
        return len(self._errors)

    def __bool__(self) -> bool:
        return bool(self._errors)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValidationReport):
            return NotImplemented
        return list(self._errors.items()) == list(other._errors.items())

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ValidationReport({self.to_wire()!r})"
