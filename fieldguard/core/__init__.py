"""Core Layer — pure validation engine, no IO, no async, no framework imports.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/ or schemas/
    - All validation functions are pure and deterministic
    - Only construction (rules, schema, pattern cache) may raise — validation returns data

Design Decisions:
    - Functional core separated from imperative shell (ADR: impureim sandwich)
"""
