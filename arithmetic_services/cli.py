"""Command-line entry points: run one operation service under uvicorn."""

import argparse

import uvicorn

from arithmetic_services.config import get_settings
from arithmetic_services.core.domain_types import Operation
from arithmetic_services.main import create_app


def serve(
    operation: Operation, host: str | None = None, port: int | None = None,
) -> None:
    """Start the service for `operation`, overriding configured host/port if given."""
    settings = get_settings(operation)
    overrides = {
        key: value
        for key, value in (("host", host), ("port", port))
        if value is not None
    }
    if overrides:
        settings = settings.model_copy(update=overrides)

    app = create_app(operation, settings=settings)
    # log_config=None keeps the handler installed by setup_logging
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="arithmetic-service",
        description="Run a single-operation arithmetic HTTP service",
    )
    parser.add_argument(
        "operation",
        choices=[op.value for op in Operation],
        help="Which service to run",
    )
    parser.add_argument("--host", help="Bind address (default from settings)")
    parser.add_argument(
        "--port", type=int, help="Listening port (default <OPERATION>_SERVICE_PORT)",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    serve(Operation(args.operation), host=args.host, port=args.port)


def run_adder() -> None:
    serve(Operation.ADD)


def run_subtractor() -> None:
    serve(Operation.SUBTRACT)


def run_multiplier() -> None:
    serve(Operation.MULTIPLY)


def run_divider() -> None:
    serve(Operation.DIVIDE)
