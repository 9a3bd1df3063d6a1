"""
Base Page Object

Provides common functionality for all page objects.
"""
import re
from typing import Optional

from playwright.sync_api import Locator, Page, expect

from ..config import get_app_config
from ..helpers import element_exists, get_element_text, take_screenshot


class BasePage:
    """Base class for all page objects."""

    # Key in APP_CONFIG that supplies the default base URL
    APP_SECTION = "healthcare_app"

    def __init__(self, page: Page, base_url: Optional[str] = None):
        self.page = page
        self.app_config = get_app_config()[self.APP_SECTION]
        self.base_url = base_url or self.app_config["base_url"]

    # =========================================================================
    # Navigation
    # =========================================================================

    def goto(self, path: str = "/") -> None:
        """Navigate to a path relative to base URL and wait for the network to settle."""
        self.page.goto(f"{self.base_url}{path}")
        self.wait_for_network_idle()

    def reload(self) -> None:
        """Reload the current page."""
        self.page.reload()

    def go_back(self) -> None:
        """Go back in browser history."""
        self.page.go_back()
        self.wait_for_network_idle()

    def current_url(self) -> str:
        """Get current page URL."""
        return self.page.url

    # =========================================================================
    # Element State
    # =========================================================================

    def is_visible(self, selector: str) -> bool:
        """Check if element is visible."""
        return self.page.is_visible(selector)

    def exists(self, selector: str) -> bool:
        """Check if any element matches."""
        return element_exists(self.page, selector)

    def get_text(self, selector: str) -> str:
        """Get stripped element text content."""
        return get_element_text(self.page, selector)

    def get_value(self, selector: str) -> str:
        """Get input value."""
        return self.page.input_value(selector)

    def count(self, selector: str) -> int:
        """Count matching elements."""
        return self.page.locator(selector).count()

    def content(self) -> str:
        """Full HTML of the current page."""
        return self.page.content()

    def locator(self, selector: str) -> Locator:
        """Get a locator for the selector."""
        return self.page.locator(selector)

    # =========================================================================
    # Waiting
    # =========================================================================

    def wait_for_network_idle(self) -> None:
        """Wait for network to be idle."""
        self.page.wait_for_load_state("networkidle")

    # =========================================================================
    # Assertions
    # =========================================================================

    def expect_visible(self, selector: str) -> None:
        """Assert element is visible."""
        expect(self.locator(selector)).to_be_visible()

    def expect_hidden(self, selector: str) -> None:
        """Assert element is hidden or absent."""
        expect(self.locator(selector)).to_be_hidden()

    def expect_enabled(self, selector: str) -> None:
        """Assert element is visible and enabled."""
        expect(self.locator(selector)).to_be_visible()
        expect(self.locator(selector)).to_be_enabled()

    def expect_text(self, selector: str, text: str) -> None:
        """Assert element contains text."""
        expect(self.locator(selector)).to_contain_text(text)

    def expect_value(self, selector: str, value: str) -> None:
        """Assert input has value."""
        expect(self.locator(selector)).to_have_value(value)

    def expect_url(self, pattern: str) -> None:
        """Assert URL matches pattern."""
        expect(self.page).to_have_url(re.compile(pattern))

    # =========================================================================
    # Screenshots
    # =========================================================================

    def screenshot(self, name: str):
        """Save a screenshot under the artifacts directory."""
        return take_screenshot(self.page, name)
