"""Shared fixtures for the mapguard test suite."""

import pytest
import structlog

from mapguard.config import get_settings
from mapguard.mapper import Mapper


@pytest.fixture(autouse=True)
def fresh_settings():
    """Settings are cached; make every test read its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def default_logging():
    yield
    structlog.reset_defaults()


@pytest.fixture
def mapper():
    """A mapper that builds descriptors without validating on map."""
    return Mapper(validate_on_map=False)
