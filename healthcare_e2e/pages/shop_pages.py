"""
E-commerce Page Objects

Login, inventory and checkout pages of the Sauce Labs demo shop.
"""
from typing import Any, Dict

from playwright.sync_api import expect

from ..config import ORDER_CONFIRMATION_TEXT, SHOP_SELECTORS
from ..helpers import add_to_cart, place_order, shop_login, shop_logout
from .base_page import BasePage

LOGIN = SHOP_SELECTORS["login"]
INVENTORY = SHOP_SELECTORS["inventory"]
CART = SHOP_SELECTORS["cart"]
CHECKOUT = SHOP_SELECTORS["checkout"]


class ShopLoginPage(BasePage):
    """Page object for the shop login form."""

    APP_SECTION = "shop_app"

    USERNAME_INPUT = LOGIN["username_input"]
    PASSWORD_INPUT = LOGIN["password_input"]
    SUBMIT_BUTTON = LOGIN["login_button"]
    ERROR_MESSAGE = LOGIN["error_message"]

    def navigate(self) -> "ShopLoginPage":
        """Open the login form."""
        self.goto(self.app_config["homepage"])
        return self

    def login(self, username: str, password: str) -> "InventoryPage":
        """Log in and return the inventory page."""
        shop_login(self.page, username, password)
        return InventoryPage(self.page, self.base_url)

    def submit(self) -> None:
        """Click the login button without filling anything."""
        self.page.click(self.SUBMIT_BUTTON)

    # Assertions
    def expect_login_form_visible(self) -> None:
        """Assert login form is visible."""
        self.expect_visible(self.USERNAME_INPUT)
        self.expect_visible(self.PASSWORD_INPUT)
        self.expect_visible(self.SUBMIT_BUTTON)

    def expect_error_contains(self, text: str) -> None:
        """Assert the error banner contains text."""
        self.expect_text(self.ERROR_MESSAGE, text)


class InventoryPage(BasePage):
    """Page object for the product listing."""

    APP_SECTION = "shop_app"

    TITLE = INVENTORY["title"]
    ITEM = INVENTORY["item"]
    CART_BADGE = INVENTORY["cart_badge"]

    def navigate(self) -> "InventoryPage":
        """Open the inventory (requires an authenticated session)."""
        self.goto(self.app_config["inventory_path"])
        return self

    def add_item(self, name: str) -> None:
        """Add one item to the cart."""
        add_to_cart(self.page, name)

    def order(self, order: Dict[str, Any]) -> "CheckoutPage":
        """Run the whole checkout for ``order``."""
        place_order(self.page, order)
        return CheckoutPage(self.page, self.base_url)

    def logout(self) -> None:
        """Log out via the burger menu."""
        shop_logout(self.page)

    def open_checkout(self) -> "CheckoutPage":
        """Go to the cart and start checkout."""
        self.page.click(INVENTORY["cart_link"])
        self.page.click(CART["checkout_button"])
        return CheckoutPage(self.page, self.base_url)

    # Assertions
    def expect_loaded(self) -> None:
        """Assert the product list is shown."""
        self.expect_visible(self.TITLE)
        expect(self.locator(self.ITEM).first).to_be_visible()

    def expect_cart_count(self, count: int) -> None:
        """Assert the cart badge shows ``count``."""
        self.expect_text(self.CART_BADGE, str(count))


class CheckoutPage(BasePage):
    """Page object for the checkout steps and completion view."""

    APP_SECTION = "shop_app"

    FIRST_NAME = CHECKOUT["first_name_input"]
    LAST_NAME = CHECKOUT["last_name_input"]
    POSTAL_CODE = CHECKOUT["postal_code_input"]
    CONTINUE_BUTTON = CHECKOUT["continue_button"]
    ERROR_MESSAGE = CHECKOUT["error_message"]
    COMPLETE_HEADER = CHECKOUT["complete_header"]

    def continue_checkout(self) -> None:
        """Submit the customer information step."""
        self.page.click(self.CONTINUE_BUTTON)

    # Assertions
    def expect_information_form(self) -> None:
        """Assert the customer information form is usable."""
        self.expect_enabled(self.FIRST_NAME)
        self.expect_enabled(self.LAST_NAME)
        self.expect_enabled(self.POSTAL_CODE)
        self.expect_enabled(self.CONTINUE_BUTTON)

    def expect_error_contains(self, text: str) -> None:
        """Assert the checkout error banner contains text."""
        self.expect_text(self.ERROR_MESSAGE, text)

    def expect_complete(self) -> None:
        """Assert the order completion message is shown."""
        self.expect_text(self.COMPLETE_HEADER, ORDER_CONFIRMATION_TEXT)
