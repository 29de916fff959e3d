"""Pytest configuration and fixtures."""

from collections.abc import Iterator

import pytest
import structlog
from fastapi.testclient import TestClient

from bignum.api.main import app
from bignum.number import D, DecimalValue
from tests.helpers import SAMPLE_VALUES


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Undo structlog.configure() calls made by the CLI.

    The CLI binds the current sys.stderr, which pytest closes after each
    capturing test.
    """
    yield
    structlog.reset_defaults()


@pytest.fixture
def sample_values() -> list[DecimalValue]:
    """Parsed SAMPLE_VALUES."""
    return [D(s) for s in SAMPLE_VALUES]


@pytest.fixture
def client() -> Iterator[TestClient]:
    """Create a test client for the API."""
    yield TestClient(app)
    app.dependency_overrides.clear()
