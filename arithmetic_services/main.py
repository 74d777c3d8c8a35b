"""Arithmetic Services: FastAPI application factory and ASGI entry points.

Invariants:
    - One app per Operation; apps share code, never state
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map every failure to {"error": message}
    - Settings resolved once, in the lifespan, unless injected by the caller

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern
    - Module-level apps so `uvicorn arithmetic_services.main:divider_app` works
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from arithmetic_services import __version__
from arithmetic_services.api.error_handlers import register_error_handlers
from arithmetic_services.api.routes.health import build_health_router
from arithmetic_services.api.routes.operation import build_operation_router
from arithmetic_services.config import ServiceSettings, get_settings
from arithmetic_services.core.domain_types import Operation
from arithmetic_services.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def create_app(
    operation: Operation, settings: ServiceSettings | None = None,
) -> FastAPI:
    """Build the FastAPI app serving a single operation."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        resolved = settings or get_settings(operation)
        setup_logging(resolved.log_level, resolved.log_format)
        logger.info(
            f"{operation.display_name} listening on port {resolved.port}",
            extra={"service": operation.value, "port": resolved.port},
        )
        yield
        logger.info(
            f"{operation.display_name} shutting down",
            extra={"service": operation.value},
        )

    app = FastAPI(
        title=operation.display_name, version=__version__, lifespan=lifespan,
    )
    app.state.operation = operation

    app.include_router(build_health_router(operation))
    app.include_router(build_operation_router(operation))

    register_error_handlers(app)
    return app


adder_app = create_app(Operation.ADD)
subtractor_app = create_app(Operation.SUBTRACT)
multiplier_app = create_app(Operation.MULTIPLY)
divider_app = create_app(Operation.DIVIDE)
