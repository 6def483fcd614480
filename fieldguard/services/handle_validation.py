"""Validation Handling — runs a decoded record through a registered schema and logs the outcome.

Invariants:
    - Only called with an already-decoded record: decode failures never reach here
    - One log line per validation: DEBUG on pass, INFO on fail — never the record values
    - Returns the ValidationReport unchanged; mapping to a status code is the route's job
"""

import logging
from typing import Any, Mapping

from fieldguard.core.validation_report import ValidationReport
from fieldguard.services.schema_registry import get_validator

logger = logging.getLogger(__name__)


def validate_payload(schema_name: str, record: Mapping[str, Any]) -> ValidationReport:
    """Validate one record against the named schema."""
    report = get_validator(schema_name).validate(record)
    if report.is_valid:
        logger.debug(
            f"Record valid for '{schema_name}'",
            extra={"schema_name": schema_name, "error_count": 0},
        )
    else:
        logger.info(
            f"Record rejected by '{schema_name}': {', '.join(report.fields)}",
            extra={
                "schema_name": schema_name,
                "error_count": report.error_count,
                "violation_codes": sorted({v.code for v in report.violations()}),
            },
        )
    return report
