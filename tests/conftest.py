"""
Pytest configuration for the healthcare E2E suite
"""
import importlib.util
from pathlib import Path

import pytest

from healthcare_e2e.config import TAG_DESCRIPTIONS, Config, marker_names

# Directory under tests/e2e -> markers applied to every test in it
SUITE_MARKERS = {
    "ui": ["ui"],
    "shop": ["ui", "shop"],
    "api": ["api"],
    "examples": ["example"],
}


def pytest_configure(config):
    """Register the suite tags as markers."""
    config.addinivalue_line("markers", "e2e: live end-to-end tests (RUN_E2E_TESTS=1)")
    for name in marker_names():
        config.addinivalue_line("markers", f"{name}: {TAG_DESCRIPTIONS.get(name, name)}")


def pytest_collection_modifyitems(config, items):
    """Mark live tests by location and skip them unless enabled."""
    playwright_missing = importlib.util.find_spec("playwright.sync_api") is None
    run_e2e = Config.RUN_E2E_TESTS

    if playwright_missing:
        skip_e2e = pytest.mark.skip(reason="Playwright not installed")
    else:
        skip_e2e = pytest.mark.skip(reason="Set RUN_E2E_TESTS=1 to run live tests")

    for item in items:
        parts = Path(str(item.fspath)).parts
        if "e2e" not in parts:
            continue

        item.add_marker(pytest.mark.e2e)
        for suite, markers in SUITE_MARKERS.items():
            if suite in parts:
                for marker in markers:
                    item.add_marker(getattr(pytest.mark, marker))

        if playwright_missing or not run_e2e:
            item.add_marker(skip_e2e)
