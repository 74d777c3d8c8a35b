"""Route Modules: one file per concern.

Invariants:
    - Each module exposes a router factory taking the Operation it serves
    - Routes never contain arithmetic (delegate to core.operations)
"""
