"""API Layer: FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.create_app (no auto-discovery)
    - All endpoints return JSON responses
"""
