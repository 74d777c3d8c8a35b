"""Arithmetic Services: add/subtract/multiply/divide as independent HTTP microservices.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""

__version__ = "1.0.0"
