"""Validation Schemas — Pydantic decoders and response shapes for the validation API.

Invariants:
    - RegistrationPayload checks JSON types only (strict): "20" for age is a decode error
    - Every payload field is optional at decode time — absence is reported by the
      schema's required rules, inside the ValidationReport
    - Unknown keys are ignored, matching the engine's "unknown fields are not validated"

Design Decisions:
    - strict=True over lax coercion: a coerced value would hide the client's type bug
      behind a passing validation
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, RootModel


class RegistrationPayload(BaseModel):
    """User sign-up payload — decoded, not yet validated."""
    model_config = ConfigDict(strict=True, extra="ignore")

    username: str | None = None
    email: str | None = None
    password: str | None = None
    age: int | None = None


class RegistrationAccepted(BaseModel):
    """Registration response — echoes the accepted record minus the password."""
    status: Literal["registered"] = "registered"
    username: str
    email: str
    age: int


class ViolationOut(BaseModel):
    """One entry of a field's violation list (wire shape)."""
    code: str
    message: str
    params: dict[str, Any]


class ValidationPassed(BaseModel):
    """Response for a record with an empty ValidationReport."""
    status: Literal["valid"] = "valid"
    schema_name: str


class SchemaSummary(BaseModel):
    name: str
    field_count: int


class RuleOut(BaseModel):
    kind: str
    code: str
    params: dict[str, Any]
    message: str


class FieldOut(BaseModel):
    name: str
    type: str
    optional: bool
    rules: list[RuleOut]


class SchemaDescription(BaseModel):
    """Public description of a registered schema (predicates not exposed)."""
    name: str
    fields: list[FieldOut]


class ValidationReportOut(RootModel[dict[str, list[ViolationOut]]]):
    """Rejected record: field → ordered violations (fields without violations omitted)."""
