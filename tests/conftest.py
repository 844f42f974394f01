# tests/conftest.py

"""Pytest configuration and fixtures for test suite"""

# Standard library imports
from logging import WARNING
from logging import getLogger

# Third party imports
import pytest

# Local imports
from unserialize_tool.adapters.api import _unserializer
from unserialize_tool.application.processing import ValueParser
from unserialize_tool.infrastructure.config import _loader


# Custom markers
def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line("markers", "slow: mark test as slow running")


@pytest.fixture(autouse=True, scope="function")
def basic_isolation():
    """Minimal isolation for most tests - reset logging and shared defaults"""
    # Reset logging to avoid handler conflicts
    root_logger = getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()
    root_logger.setLevel(WARNING)

    # Drop cached default configuration and unserializer
    _loader._default_config = None
    _unserializer._default_unserializer = None

    yield

    _loader._default_config = None
    _unserializer._default_unserializer = None


@pytest.fixture
def parser():
    """Value parser with default configuration"""
    return ValueParser()
