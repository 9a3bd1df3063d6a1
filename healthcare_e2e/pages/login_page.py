"""
Login Page Object

Encapsulates the healthcare site's home page, side menu and login form.
"""
from playwright.sync_api import expect

from ..config import SELECTORS
from ..helpers import login_user, logout_user, open_side_menu
from .base_page import BasePage


class LoginPage(BasePage):
    """Page object for the healthcare login flow."""

    # Selectors
    USERNAME_INPUT = SELECTORS["login"]["username_input"]
    PASSWORD_INPUT = SELECTORS["login"]["password_input"]
    SUBMIT_BUTTON = SELECTORS["login"]["login_button"]
    ERROR_MESSAGE = SELECTORS["login"]["error_message"]
    LOGIN_LINK = SELECTORS["navigation"]["login_link"]
    LOGOUT_LINK = SELECTORS["navigation"]["logout_link"]
    APPOINTMENT_HEADER = SELECTORS["headers"]["appointment_header"]

    def navigate_home(self) -> "LoginPage":
        """Open the home page."""
        self.goto(self.app_config["homepage"])
        return self

    def open_login_form(self) -> "LoginPage":
        """Open the login form from the side menu."""
        open_side_menu(self.page)
        self.page.click(self.LOGIN_LINK)
        self.wait_for_network_idle()
        return self

    def submit(self) -> None:
        """Click the login button without filling anything."""
        self.page.click(self.SUBMIT_BUTTON)
        self.wait_for_network_idle()

    def login(self, username: str, password: str) -> None:
        """Complete login flow from any page."""
        login_user(self.page, username, password)

    def logout(self) -> None:
        """Log out from any page."""
        logout_user(self.page)

    def open_menu(self) -> None:
        """Open the side menu so its links can be inspected."""
        open_side_menu(self.page)

    def get_error_message(self) -> str:
        """Get login error message if present."""
        if self.exists(self.ERROR_MESSAGE):
            return self.get_text(self.ERROR_MESSAGE)
        return ""

    # Assertions
    def expect_login_form_visible(self) -> None:
        """Assert login form is visible."""
        self.expect_visible(self.USERNAME_INPUT)
        self.expect_visible(self.PASSWORD_INPUT)
        self.expect_visible(self.SUBMIT_BUTTON)

    def expect_error_visible(self) -> None:
        """Assert error message is visible."""
        self.expect_visible(self.ERROR_MESSAGE)

    def expect_error_contains(self, text: str) -> None:
        """Assert error message contains text."""
        self.expect_text(self.ERROR_MESSAGE, text)

    def expect_logged_in(self) -> None:
        """Assert the appointment header and logout link are visible."""
        self.expect_visible(self.APPOINTMENT_HEADER)
        open_side_menu(self.page)
        self.expect_visible(self.LOGOUT_LINK)

    def expect_logged_out(self) -> None:
        """Assert the menu offers Login and no longer offers Logout."""
        open_side_menu(self.page)
        expect(self.locator(self.LOGOUT_LINK)).to_have_count(0)
        self.expect_visible(self.LOGIN_LINK)
