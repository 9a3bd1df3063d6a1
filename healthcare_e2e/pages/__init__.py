"""
Page Object Models

Page objects wrap the helpers and add assertions, giving test code a
clean API for both target sites.
"""

from .appointment_page import AppointmentPage, ConfirmationPage
from .base_page import BasePage
from .login_page import LoginPage
from .shop_pages import CheckoutPage, InventoryPage, ShopLoginPage

__all__ = [
    "BasePage",
    "LoginPage",
    "AppointmentPage",
    "ConfirmationPage",
    "ShopLoginPage",
    "InventoryPage",
    "CheckoutPage",
]
