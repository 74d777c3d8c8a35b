"""Health Check: liveness endpoint for container orchestration.

Invariants:
    - GET /health always returns 200 if the process is up
    - Not part of the POST / contract; carries no result/error payload
"""

from fastapi import APIRouter, status

from arithmetic_services.core.domain_types import Operation


def build_health_router(operation: Operation) -> APIRouter:
    router = APIRouter(prefix="/health", tags=["health"])

    @router.get("", status_code=status.HTTP_200_OK)
    async def health_check():
        """Basic liveness check. Returns 200 if the process is up."""
        return {"status": "healthy", "service": operation.value}

    return router
