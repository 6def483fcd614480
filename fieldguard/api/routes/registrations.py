"""Registrations — typed sign-up endpoint backed by the registration schema.

Invariants:
    - Body is decoded by RegistrationPayload (strict JSON types) before validation
    - Empty report → 201 with the accepted record (password never echoed)
    - Non-empty report → 400 with the report body verbatim
    - Nothing is persisted (uniqueness and storage are out of this service's scope)
"""

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from fieldguard.schemas.validation import (
    RegistrationAccepted, RegistrationPayload, ValidationReportOut,
)
from fieldguard.services.define_registration_schema import SCHEMA_NAME
from fieldguard.services.handle_validation import validate_payload

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/registrations", tags=["registrations"])


@router.post(
    "",
    response_model=RegistrationAccepted,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ValidationReportOut}},
)
async def register(body: RegistrationPayload):
    """Validate a registration and accept it when every rule passes."""
    report = validate_payload(SCHEMA_NAME, body.model_dump())
    if not report.is_valid:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content=report.to_wire(),
        )
    logger.info("Registration accepted", extra={"schema_name": SCHEMA_NAME})
    return RegistrationAccepted(
        username=body.username, email=body.email, age=body.age,
    )
