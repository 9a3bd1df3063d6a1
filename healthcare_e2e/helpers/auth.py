"""
Authentication Helpers

Login and logout on the healthcare demo site. The login and logout links
live in an off-canvas side menu, so both helpers open it first.
"""
import logging

from playwright.sync_api import Page

from ..config import SELECTORS
from .exceptions import HelperError

logger = logging.getLogger(__name__)

NAV = SELECTORS["navigation"]
LOGIN = SELECTORS["login"]


def open_side_menu(page: Page) -> None:
    """Open the side menu and wait until it has slid in."""
    if page.locator(NAV["sidebar_open"]).count() > 0:
        return
    page.click(NAV["menu_toggle"])
    page.wait_for_selector(NAV["sidebar_open"])


def login_user(page: Page, username: str, password: str) -> None:
    """
    Log in through the login form.

    Args:
        page: Playwright page on any healthcare site page
        username: Login username
        password: Login password

    Raises:
        HelperError: If any step fails
    """
    try:
        open_side_menu(page)
        page.click(NAV["login_link"])
        page.wait_for_load_state("networkidle")

        page.fill(LOGIN["username_input"], username)
        page.fill(LOGIN["password_input"], password)

        page.click(LOGIN["login_button"])
        page.wait_for_load_state("networkidle")
    except Exception as e:
        raise HelperError(f"Login failed: {e}") from e

    logger.info(f"Submitted login for: {username}")


def logout_user(page: Page) -> None:
    """
    Log out the current user.

    Raises:
        HelperError: If any step fails
    """
    try:
        open_side_menu(page)
        page.click(NAV["logout_link"])
        page.wait_for_load_state("networkidle")
    except Exception as e:
        raise HelperError(f"Logout failed: {e}") from e

    logger.info("Logged out")
