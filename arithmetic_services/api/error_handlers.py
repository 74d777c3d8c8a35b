"""Error Handlers: global exception handlers shared by all operation services.

Invariants:
    - ArithmeticServiceError -> its http_status with {"error": message}
    - RequestValidationError -> 400 {"error": "Invalid request"}, whatever failed
      (missing body, malformed JSON, non-object body, missing or non-numeric a/b)
    - HTTPException 400 (body not UTF-8, int literal past the parser's digit limit)
      -> 400 {"error": "Invalid request"}; other statuses -> {"error": detail}
    - Exception (catch-all) -> 500 {"error": "Internal server error"}, never leaks details
    - 4xx log lines carry error_code, category and severity

Design Decisions:
    - Four-layer handler: domain (ArithmeticServiceError), framework HTTP errors,
      validation (Pydantic), catch-all
    - Validation failures reuse InvalidRequestError so the payload comes from one place
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from arithmetic_services.core.errors import (
    INTERNAL_ERROR_MESSAGE,
    ArithmeticServiceError,
    InvalidRequestError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_http_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:

    @app.exception_handler(ArithmeticServiceError)
    async def domain_error_handler(request: Request, exc: ArithmeticServiceError):
        """Handle invalid input and domain-invalid operations."""
        logger.warning(
            f"{exc.code}: {exc.message}",
            extra=_error_extras(exc, request),
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        """Reshape framework HTTP errors (unreadable body, 404, 405) as {"error": ...}."""
        if exc.status_code == status.HTTP_400_BAD_REQUEST:
            error = InvalidRequestError()
            logger.warning(
                f"Unreadable body on {request.url.path}: {exc.detail}",
                extra=_error_extras(error, request),
            )
            return JSONResponse(
                status_code=error.http_status, content=error.to_response(),
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=exc.headers,
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Collapse every schema failure into the generic invalid-request error."""
        error = InvalidRequestError()
        logger.warning(
            f"Validation error on {request.url.path}: {_summarize(exc)}",
            extra=_error_extras(error, request),
        )
        return JSONResponse(
            status_code=error.http_status, content=error.to_response(),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": INTERNAL_ERROR_MESSAGE},
        )


def _summarize(exc: RequestValidationError) -> list[str]:
    """field: message pairs for the log line."""
    return [
        f"{'.'.join(str(loc) for loc in e['loc'])}: {e['msg']}"
        for e in exc.errors()
    ]


def _error_extras(error: ArithmeticServiceError, request: Request) -> dict:
    """Log extras shared by the 4xx handlers."""
    return {
        "error_code": error.code,
        "category": error.category.value,
        "severity": error.severity.value,
        "path": request.url.path,
        "service": error.context.service,
    }
