"""Pydantic Schemas — request/response contracts for API endpoints.

Invariants:
    - Schemas decode the wire payload only (shape and JSON types) — never constraint rules
    - Decode failures surface as PAYLOAD_DECODE_ERROR before the validator runs

Design Decisions:
    - Pydantic models are the deserializer; FieldGuard schemas are the validator
      (ADR: decoding and validation are distinct error categories)
"""
