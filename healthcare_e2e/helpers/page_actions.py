"""
Page Interaction Helpers

Small wrappers that add a descriptive message to Playwright failures.
"""
import logging
from pathlib import Path
from typing import Optional, Union

from playwright.sync_api import Page

from ..config import TIMEOUTS, Config
from .exceptions import HelperError

logger = logging.getLogger(__name__)


def wait_for_element(page: Page, selector: str, timeout: int = TIMEOUTS["element_wait"]) -> None:
    """Wait until ``selector`` is visible."""
    try:
        page.wait_for_selector(selector, timeout=timeout)
    except Exception as e:
        raise HelperError(f"Element not found within timeout: {selector}") from e

    logger.debug(f"Element visible: {selector}")


def get_element_text(page: Page, selector: str) -> str:
    """Return the stripped text content of ``selector``."""
    try:
        text = page.locator(selector).text_content()
        return (text or "").strip()
    except Exception as e:
        raise HelperError(f"Failed to get text from element: {selector}") from e


def element_exists(page: Page, selector: str) -> bool:
    """Return True if at least one element matches. Never raises."""
    try:
        return page.locator(selector).count() > 0
    except Exception:
        return False


def fill_form_field(page: Page, selector: str, value: str) -> None:
    """Fill an input field."""
    try:
        page.fill(selector, value)
    except Exception as e:
        raise HelperError(f"Failed to fill field {selector}: {e}") from e

    logger.debug(f"Field filled: {selector}")


def click_element(page: Page, selector: str) -> None:
    """Click an element."""
    try:
        page.click(selector)
    except Exception as e:
        raise HelperError(f"Failed to click element {selector}: {e}") from e

    logger.debug(f"Element clicked: {selector}")


def take_screenshot(
    page: Page, filename: str, directory: Optional[Union[str, Path]] = None
) -> Path:
    """
    Capture a screenshot of the current page.

    Args:
        page: Playwright page
        filename: File name without extension
        directory: Output directory (default: <E2E_ARTIFACTS_DIR>/screenshots)

    Returns:
        Path of the written PNG
    """
    out_dir = Path(directory) if directory else Path(Config.E2E_ARTIFACTS_DIR) / "screenshots"
    path = out_dir / f"{filename}.png"
    try:
        out_dir.mkdir(parents=True, exist_ok=True)
        page.screenshot(path=str(path))
    except Exception as e:
        raise HelperError(f"Failed to take screenshot: {e}") from e

    logger.info(f"Screenshot taken: {path}")
    return path
