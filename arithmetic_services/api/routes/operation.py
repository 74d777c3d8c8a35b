"""Operation Endpoint: POST / for one arithmetic operation.

Invariants:
    - The body is validated as OperationRequest before compute() is reached
    - 200 responses always carry {"result": number}; errors go through error_handlers
    - No state between requests: identical requests give identical responses

Design Decisions:
    - One router factory parametrized by Operation instead of four copies of the handler
    - Sync handler: compute is pure CPU work, FastAPI runs it in the threadpool
"""

from fastapi import APIRouter, status

from arithmetic_services.core.domain_types import Operation
from arithmetic_services.core.errors import ArithmeticServiceError
from arithmetic_services.core.operations import get_spec
from arithmetic_services.schemas.operation import (
    ErrorResponse,
    OperationRequest,
    OperationResult,
)


def build_operation_router(operation: Operation) -> APIRouter:
    """Create the router exposing `operation` at POST /."""
    spec = get_spec(operation)
    router = APIRouter(tags=[operation.value])

    @router.post(
        "/",
        response_model=OperationResult,
        status_code=status.HTTP_200_OK,
        responses={
            status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
            status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
        },
        summary=f"{operation.display_name}: compute one {operation.name.lower()}",
    )
    def run_operation(request: OperationRequest) -> OperationResult:
        try:
            result = spec.apply(request.a, request.b)
        except ArithmeticServiceError as exc:
            exc.context.service = operation.value
            raise
        return OperationResult(result=result)

    return router
