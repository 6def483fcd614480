"""Health & Readiness Checks — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 until every registered schema has been built (readiness)

Design Decisions:
    - Readiness tries to build missing schemas: with eager init disabled the first
      readiness check performs the one-time build instead of the first real request
"""

import logging
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from fieldguard.config import get_settings
from fieldguard.core.errors import SchemaError
from fieldguard.services.schema_registry import all_schemas_ready, init_all_schemas

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness check. Returns 200 if the process is up."""
    settings = get_settings()
    return {
        "status": "healthy",
        "service": settings.service_name,
        "version": settings.service_version,
    }


@router.get("/ready")
async def readiness_check():
    """Readiness check — every schema and pattern cache built."""
    if not all_schemas_ready():
        try:
            init_all_schemas()
        except SchemaError as e:
            logger.error(
                f"Schema build failed: {e.message}",
                extra={"error_code": e.code, "schema_name": e.context.schema_name},
            )
            return JSONResponse(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                content={"status": "not_ready", "reason": "schema_error"},
            )
    return {"status": "ready", "checks": {"schemas": "built"}}
