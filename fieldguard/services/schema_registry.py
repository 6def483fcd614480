"""Schema Registry — explicit name → once-only schema mapping for the process.

Invariants:
    - Every name → builder mapping is visible here — no auto-discovery
    - Each schema (and its PatternCache) is built at most once per process (Lazy)
    - get_schema() on an unknown name raises SchemaNotFoundError
    - A builder that fails raises SchemaError on every access until fixed; nothing half-built is kept

Design Decisions:
    - Explicit dict over module scanning: adding a schema requires editing this dict
      (ADR: no convention-over-config)
    - Lazy per schema over one global Lazy: a broken schema doesn't take the others down
      when eager init is disabled
"""

import logging
from typing import Callable

from fieldguard.core.errors import SchemaNotFoundError
from fieldguard.core.lazy_init import Lazy
from fieldguard.core.schema import Schema
from fieldguard.core.validate_record import RecordValidator
from fieldguard.services.define_contact_schema import (
    SCHEMA_NAME as CONTACT, build_contact_schema,
)
from fieldguard.services.define_registration_schema import (
    SCHEMA_NAME as REGISTRATION, build_registration_schema,
)

logger = logging.getLogger(__name__)


def _logged(name: str, builder: Callable[[], Schema]) -> Callable[[], RecordValidator]:
    def build() -> RecordValidator:
        schema = builder()
        logger.info(
            f"Schema '{name}' built",
            extra={
                "schema_name": name,
                "field_count": len(schema),
                "pattern_count": len(schema.patterns),
            },
        )
        return RecordValidator(schema)
    return build


# ADR: every mapping explicit — adding a schema requires editing this dict
_VALIDATORS: dict[str, Lazy[RecordValidator]] = {
    REGISTRATION: Lazy(_logged(REGISTRATION, build_registration_schema)),
    CONTACT: Lazy(_logged(CONTACT, build_contact_schema)),
}


def schema_names() -> list[str]:
    return list(_VALIDATORS)


def get_validator(name: str) -> RecordValidator:
    """Return the shared validator for a schema, building it on first use."""
    lazy = _VALIDATORS.get(name)
    if lazy is None:
        raise SchemaNotFoundError(name)
    return lazy.get()


def get_schema(name: str) -> Schema:
    return get_validator(name).schema


def init_all_schemas() -> None:
    """Eagerly build every registered schema. SchemaError propagates (startup must fail)."""
    for name in _VALIDATORS:
        get_validator(name)


def all_schemas_ready() -> bool:
    return all(lazy.initialized for lazy in _VALIDATORS.values())
