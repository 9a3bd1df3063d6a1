"""
Test Helpers

Reusable functions for common test operations:

    from healthcare_e2e.helpers import login_user, book_appointment

    login_user(page, username, password)
"""

from .api import (
    api_delete_request,
    api_get_request,
    api_patch_request,
    api_post_request,
    api_put_request,
)
from .appointment import book_appointment, program_radio_index
from .auth import login_user, logout_user, open_side_menu
from .exceptions import ApiValidationError, HelperError
from .page_actions import (
    click_element,
    element_exists,
    fill_form_field,
    get_element_text,
    take_screenshot,
    wait_for_element,
)
from .shop import add_to_cart, place_order, shop_login, shop_logout
from .validation import validate_api_response_fields, validate_api_status

__all__ = [
    # Errors
    "HelperError",
    "ApiValidationError",
    # Authentication
    "login_user",
    "logout_user",
    "open_side_menu",
    # Appointment
    "book_appointment",
    "program_radio_index",
    # Shop
    "shop_login",
    "shop_logout",
    "add_to_cart",
    "place_order",
    # API
    "api_get_request",
    "api_post_request",
    "api_put_request",
    "api_patch_request",
    "api_delete_request",
    # Page interaction
    "wait_for_element",
    "get_element_text",
    "element_exists",
    "fill_form_field",
    "click_element",
    "take_screenshot",
    # Validation
    "validate_api_status",
    "validate_api_response_fields",
]
