"""Core Layer: pure domain logic, no IO, no async, no HTTP.

Invariants:
    - No module in core/ imports from api/, clients/ or infrastructure/
    - All functions are pure and deterministic
"""
