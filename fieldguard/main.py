"""FieldGuard API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map FieldGuardError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - With eager_schema_init, every schema + pattern cache is built in lifespan startup:
      a SchemaError aborts startup, so a broken schema never serves traffic

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern
    - Schemas stay lazily buildable too (Lazy): test clients that skip lifespan, and
      deployments with eager_schema_init=False, build on first use exactly once
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fieldguard.api.error_handlers import register_error_handlers
from fieldguard.api.routes import health, registrations, schema_catalog
from fieldguard.config import get_settings
from fieldguard.infrastructure.observability import setup_logging
from fieldguard.services.schema_registry import init_all_schemas, schema_names

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    if settings.eager_schema_init:
        init_all_schemas()
        logger.info(f"Schemas ready: {', '.join(schema_names())}")
    logger.info("FieldGuard API started")
    yield
    logger.info("FieldGuard API shutting down")


settings = get_settings()
app = FastAPI(
    title="FieldGuard API", version=settings.service_version, lifespan=lifespan,
)

# CORS — configured from settings, not hardcoded
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes — explicit registration
app.include_router(health.router)
app.include_router(schema_catalog.router)
app.include_router(registrations.router)

register_error_handlers(app)
