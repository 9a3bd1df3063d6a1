"""
Healthcare E2E Suite

Playwright UI and API tests for the CURA healthcare demo, the Sauce Labs
demo shop and the JSONPlaceholder REST API.

Packages:
    config/        - URLs, selectors, credentials, timeouts, env vars
    helpers/       - login/logout, form filling, API request wrappers
    pages/         - Page Object Models built on the helpers
    verify_setup   - environment readiness check (``verify-setup``)
"""

__version__ = "1.0.0"
