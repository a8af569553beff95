"""Shared pytest fixtures for the schemabound test-suite."""
from __future__ import annotations

import pytest

from schemabound.fixtures import FixtureSuite, load_builtin_fixture


@pytest.fixture()
def maximum_suite() -> FixtureSuite:  # noqa: D401
    """Return the bundled maximum/exclusiveMaximum fixture suite."""
    return load_builtin_fixture("maximum")


@pytest.fixture(autouse=True)
def _silence_logging(caplog):  # noqa: D401
    """Reduce noise – most tests assert behaviour, not log output."""
    caplog.set_level("WARNING")
    yield


@pytest.fixture()
def anyio_backend():  # noqa: D401
    """Force *anyio* tests to use the standard asyncio backend only."""
    return "asyncio"
