"""Services Layer — schema definitions, schema registry, validation handling.

Invariants:
    - One define_*_schema.py per built-in schema, registered explicitly in schema_registry
    - Services call core/ for all validation semantics; they add logging and lookup only

Design Decisions:
    - Schema definitions live beside the registry, not in core/: they are application
      content, core/ is the engine (ADR: impureim sandwich)
"""
