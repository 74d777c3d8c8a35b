"""Pydantic Schemas: request/response validation at the HTTP boundary.

Invariants:
    - Schemas validate at the system boundary, before any business logic runs
"""
