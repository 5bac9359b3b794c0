"""Pytest configuration and shared fixtures for the fpkit test suite."""

import logging
import os
from collections.abc import Generator

import pytest

from fpkit.config import ENV_PREFIX, Settings, reset_settings
from fpkit.core.task import Task
from fpkit.types.semigroup import monoid_string


# Pytest configuration
def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "property: mark test as a property-based test")


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)

        if "property" in str(item.fspath):
            item.add_marker(pytest.mark.property)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Give every test default settings and a clean FPKIT_* environment."""
    for name in Settings.model_fields:
        monkeypatch.delenv(ENV_PREFIX + name.upper(), raising=False)
    reset_settings(Settings())
    yield
    reset_settings()
    # load_dotenv writes to os.environ directly
    for name in Settings.model_fields:
        os.environ.pop(ENV_PREFIX + name.upper(), None)


@pytest.fixture
def fpkit_logger() -> Generator[logging.Logger, None, None]:
    """The package logger, restored to its original state afterwards."""
    logger = logging.getLogger("fpkit")
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)


@pytest.fixture
def string_monoid():
    """Non-commutative monoid, so concatenation order is observable."""
    return monoid_string


@pytest.fixture
def call_log() -> list[str]:
    """Shared log that effects append to when they actually run."""
    return []


@pytest.fixture
def recording_task(call_log):
    """Factory for tasks that record their label when executed."""

    def make(label: str, value=None) -> Task:
        async def run():
            call_log.append(label)
            return label if value is None else value

        return Task(run)

    return make
