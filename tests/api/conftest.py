"""API test fixtures: in-process FastAPI apps behind an httpx client.

Invariants:
    - Apps are built fresh per test from create_app, with explicit settings
    - No sockets: httpx ASGITransport drives the app directly
"""

import pytest
from httpx import ASGITransport, AsyncClient

from arithmetic_services.config import SETTINGS_CLASSES
from arithmetic_services.core.domain_types import Operation
from arithmetic_services.main import create_app


@pytest.fixture
def make_client():
    """Return an async context manager factory: make_client(operation) -> AsyncClient."""

    def _make(operation: Operation, raise_app_exceptions: bool = True):
        app = create_app(operation, settings=SETTINGS_CLASSES[operation]())
        return AsyncClient(
            transport=ASGITransport(
                app=app, raise_app_exceptions=raise_app_exceptions,
            ),
            base_url="http://test",
        )

    return _make


@pytest.fixture(params=list(Operation), ids=lambda op: op.value)
async def any_service(request, make_client):
    """Client for each of the four services in turn."""
    async with make_client(request.param) as c:
        yield c


@pytest.fixture
async def adder(make_client):
    async with make_client(Operation.ADD) as c:
        yield c


@pytest.fixture
async def subtractor(make_client):
    async with make_client(Operation.SUBTRACT) as c:
        yield c


@pytest.fixture
async def multiplier(make_client):
    async with make_client(Operation.MULTIPLY) as c:
        yield c


@pytest.fixture
async def divider(make_client):
    async with make_client(Operation.DIVIDE) as c:
        yield c
