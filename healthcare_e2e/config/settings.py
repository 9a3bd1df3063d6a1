"""
Application Settings

Static configuration shared by helpers, page objects and test suites:
target URLs, timeouts, HTTP status codes, assertion messages, test tags
and browser options.

Environment-specific values are resolved by ``get_app_config()`` in the
package ``__init__``; the dicts here are the defaults.
"""
from typing import Any, Dict, List

# =============================================================================
# Application URLs
# =============================================================================

APP_CONFIG: Dict[str, Any] = {
    # Healthcare demo website (CURA)
    "healthcare_app": {
        "base_url": "https://katalon-demo-cura.herokuapp.com",
        "homepage": "/",
        "login_path": "/profile.php#login",
        "appointment_path": "/#appointment",
    },
    # E-commerce demo website (Sauce Labs)
    "shop_app": {
        "base_url": "https://www.saucedemo.com",
        "homepage": "/",
        "inventory_path": "/inventory.html",
    },
    # JSONPlaceholder API
    "api": {
        "base_url": "https://jsonplaceholder.typicode.com",
        "endpoints": {
            "users": "/users",
        },
    },
}

# =============================================================================
# Timeouts (milliseconds)
# =============================================================================

TIMEOUTS: Dict[str, int] = {
    "element_wait": 5000,
    "api_request": 5000,
    "api_response_budget": 2000,
    "expect": 10000,
}

# =============================================================================
# HTTP Status Codes
# =============================================================================

HTTP_STATUS: Dict[str, int] = {
    "OK": 200,
    "CREATED": 201,
    "NO_CONTENT": 204,
    "BAD_REQUEST": 400,
    "UNAUTHORIZED": 401,
    "FORBIDDEN": 403,
    "NOT_FOUND": 404,
    "INTERNAL_SERVER_ERROR": 500,
    "BAD_GATEWAY": 502,
    "SERVICE_UNAVAILABLE": 503,
}

# =============================================================================
# Assertion Messages
# =============================================================================

ASSERTION_MESSAGES: Dict[str, str] = {
    "login_success": "User should be logged in successfully",
    "login_failure": "Login should fail with invalid credentials",
    "appointment_booked": "Appointment should be booked successfully",
    "appointment_confirmed": "Appointment confirmation should be displayed",
    "order_completed": "Order should be completed successfully",
    "logout_success": "User should be logged out successfully",
    "session_ended": "User session should end after logout",
    "api_response_ok": "API response status should be 200",
    "api_data_valid": "API response data should be valid",
}

# =============================================================================
# Test Tags (registered as pytest markers)
# =============================================================================

TEST_TAGS: Dict[str, str] = {
    # Test type
    "UI": "@ui",
    "API": "@api",
    "SMOKE": "@smoke",
    "REGRESSION": "@regression",
    "CRITICAL": "@critical",
    # Feature
    "LOGIN": "@login",
    "APPOINTMENT": "@appointment",
    "LOGOUT": "@logout",
    "PATIENT": "@patient",
    "SHOP": "@shop",
    "CHECKOUT": "@checkout",
    "EXAMPLE": "@example",
    # Priority
    "HIGH": "@high",
    "MEDIUM": "@medium",
    "LOW": "@low",
}

TAG_DESCRIPTIONS: Dict[str, str] = {
    "ui": "browser UI tests",
    "api": "REST API tests",
    "smoke": "fast checks of the critical path",
    "regression": "full regression coverage",
    "critical": "failures block a release",
    "login": "login flow",
    "appointment": "appointment booking flow",
    "logout": "logout and session termination",
    "patient": "patient API resource",
    "shop": "e-commerce demo site",
    "checkout": "e-commerce checkout flow",
    "example": "helper usage examples (RUN_EXAMPLE_TESTS=1)",
    "high": "high priority",
    "medium": "medium priority",
    "low": "low priority",
}


def marker_names() -> List[str]:
    """Return TEST_TAGS as pytest marker names (without the leading @)."""
    return [tag.lstrip("@") for tag in TEST_TAGS.values()]


# =============================================================================
# Browser Options
# =============================================================================

BROWSER_OPTIONS: Dict[str, Any] = {
    "viewport": {"width": 1280, "height": 720},
    "chromium": {
        "args": [
            "--no-sandbox",
            "--disable-setuid-sandbox",
            "--disable-dev-shm-usage",
        ],
    },
    "firefox": {"firefox_user_prefs": {}},
    "webkit": {},
}
