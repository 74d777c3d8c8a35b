"""Root conftest: shared test configuration.

Invariants:
    - Service env vars never leak from the developer's shell into tests
    - Cached settings are rebuilt for every test
    - Root logging handlers restored after each test
"""

import logging

import pytest

from arithmetic_services.config import get_settings
from arithmetic_services.core.domain_types import Operation


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Run each test from an empty directory (no .env) with a clean environment."""
    monkeypatch.chdir(tmp_path)
    for operation in Operation:
        monkeypatch.delenv(operation.port_env_var, raising=False)
        monkeypatch.delenv(f"{operation.value.upper()}_SERVICE_HOST", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("LOG_FORMAT", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def restore_root_logging():
    handlers = list(logging.root.handlers)
    level = logging.root.level
    yield
    logging.root.handlers[:] = handlers
    logging.root.setLevel(level)
