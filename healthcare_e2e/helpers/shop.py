"""
E-commerce Helpers

Login, logout and checkout on the Sauce Labs demo shop. Same contracts as
the healthcare helpers: every failure is re-raised as a HelperError.
"""
import logging
from typing import Any, Dict

from playwright.sync_api import Page

from ..config import SHOP_SELECTORS
from .exceptions import HelperError

logger = logging.getLogger(__name__)

LOGIN = SHOP_SELECTORS["login"]
MENU = SHOP_SELECTORS["menu"]
INVENTORY = SHOP_SELECTORS["inventory"]
CART = SHOP_SELECTORS["cart"]
CHECKOUT = SHOP_SELECTORS["checkout"]


def shop_login(page: Page, username: str, password: str) -> None:
    """Fill and submit the shop login form (page must show the form)."""
    try:
        page.fill(LOGIN["username_input"], username)
        page.fill(LOGIN["password_input"], password)
        page.click(LOGIN["login_button"])
        page.wait_for_load_state("networkidle")
    except Exception as e:
        raise HelperError(f"Shop login failed: {e}") from e

    logger.info(f"Submitted shop login for: {username}")


def shop_logout(page: Page) -> None:
    """Log out via the burger menu."""
    try:
        page.click(MENU["open_button"])
        page.wait_for_selector(MENU["logout_link"], state="visible")
        page.click(MENU["logout_link"])
        page.wait_for_load_state("networkidle")
    except Exception as e:
        raise HelperError(f"Shop logout failed: {e}") from e

    logger.info("Logged out of shop")


def add_to_cart(page: Page, item_name: str) -> None:
    """Add a single inventory item to the cart by its display name."""
    item = page.locator(INVENTORY["item_by_name"].format(name=item_name))
    item.locator(INVENTORY["add_button"]).click()


def place_order(page: Page, order: Dict[str, Any]) -> None:
    """
    Add items to the cart and complete checkout.

    Args:
        page: Playwright page showing the inventory
        order: Dict with keys items (list of names), and optional
            first_name, last_name, postal_code

    Raises:
        HelperError: If any step fails
    """
    try:
        for item_name in order.get("items", []):
            add_to_cart(page, item_name)

        page.click(INVENTORY["cart_link"])
        page.click(CART["checkout_button"])

        if order.get("first_name"):
            page.fill(CHECKOUT["first_name_input"], order["first_name"])
        if order.get("last_name"):
            page.fill(CHECKOUT["last_name_input"], order["last_name"])
        if order.get("postal_code"):
            page.fill(CHECKOUT["postal_code_input"], order["postal_code"])

        page.click(CHECKOUT["continue_button"])
        page.click(CHECKOUT["finish_button"])
        page.wait_for_load_state("networkidle")
    except Exception as e:
        raise HelperError(f"Placing order failed: {e}") from e

    logger.info(f"Order placed for {len(order.get('items', []))} item(s)")
