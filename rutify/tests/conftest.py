"""
Pytest fixtures for rutify tests.
"""

import pytest
import structlog

from rutify.settings import get_settings


@pytest.fixture(autouse=True)
def reset_logging_and_settings():
    """
    Restore structlog defaults and drop cached settings after each test.

    CLI tests call ``configure_logging`` and may set RUTIFY_* variables;
    neither should leak into other tests.
    """
    get_settings.cache_clear()
    yield
    structlog.reset_defaults()
    get_settings.cache_clear()
