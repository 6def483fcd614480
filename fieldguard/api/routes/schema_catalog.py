"""Schema Catalog — list, describe, and validate against registered schemas.

Invariants:
    - POST /{name}/validate accepts any JSON object; non-objects fail decoding (400)
    - Empty report → 200 {"status": "valid"}; otherwise 400 with the report body verbatim
    - Unknown schema name → 404 SCHEMA_NOT_FOUND envelope
    - Routes contain no validation logic (delegate to services)
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, status
from fastapi.responses import JSONResponse

from fieldguard.schemas.validation import (
    SchemaDescription, SchemaSummary, ValidationPassed, ValidationReportOut,
)
from fieldguard.services.handle_validation import validate_payload
from fieldguard.services.schema_registry import get_schema, schema_names

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/schemas", tags=["schemas"])


@router.get("", response_model=list[SchemaSummary])
async def list_schemas():
    """Registered schema names with their field counts."""
    return [
        SchemaSummary(name=name, field_count=len(get_schema(name)))
        for name in schema_names()
    ]


@router.get("/{schema_name}", response_model=SchemaDescription)
async def describe_schema(schema_name: str):
    """Fields, declared types and rules of one schema."""
    return get_schema(schema_name).describe()


@router.post(
    "/{schema_name}/validate",
    response_model=ValidationPassed,
    responses={400: {"model": ValidationReportOut}},
)
async def validate_against_schema(
    schema_name: str, record: dict[str, Any] = Body(...),
):
    """Validate an arbitrary JSON object against a registered schema."""
    report = validate_payload(schema_name, record)
    if not report.is_valid:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content=report.to_wire(),
        )
    return ValidationPassed(schema_name=schema_name)
