"""
Fixtures for offline unit tests
"""
from unittest.mock import MagicMock

import pytest

from healthcare_e2e.config import ENV_VARS, reset_config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Unset every suite env var and drop cached config around each test."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def mock_page():
    """Mock Playwright Page; the side menu starts closed."""
    page = MagicMock()
    page.locator.return_value.count.return_value = 0
    return page
