"""
Playwright E2E Test Configuration and Fixtures

Shared fixtures, configuration and hooks for the live browser and API
suites. Browsers come from pytest-playwright (``--browser``, ``--headed``);
this module layers the suite's env-var settings on top.
"""
from datetime import datetime
from typing import Any, Dict, Generator

import pytest

# Skip entire directory if playwright not installed
pytest.importorskip("playwright")

from playwright.sync_api import APIRequestContext, Browser, BrowserContext, Page, Playwright, expect

from healthcare_e2e.config import (
    BROWSER_OPTIONS,
    SHOP_CREDENTIALS,
    TIMEOUTS,
    Config,
    get_app_config,
    get_valid_credentials,
)
from healthcare_e2e.pages import AppointmentPage, InventoryPage, LoginPage, ShopLoginPage

# =============================================================================
# Configuration
# =============================================================================


class E2EConfig:
    """E2E test configuration."""

    APP_CONFIG = get_app_config()

    HEALTHCARE_URL = APP_CONFIG["healthcare_app"]["base_url"]
    SHOP_URL = APP_CONFIG["shop_app"]["base_url"]
    API_URL = APP_CONFIG["api"]["base_url"]

    # Timeouts (milliseconds)
    DEFAULT_TIMEOUT = Config.E2E_DEFAULT_TIMEOUT
    NAVIGATION_TIMEOUT = Config.E2E_NAVIGATION_TIMEOUT
    EXPECT_TIMEOUT = TIMEOUTS["expect"]

    # Browser settings
    HEADLESS = Config.E2E_HEADLESS
    SLOW_MO = Config.E2E_SLOW_MO

    # Screenshots and videos
    SCREENSHOT_ON_FAILURE = True
    ARTIFACTS_DIR = Config.E2E_ARTIFACTS_DIR
    RECORD_VIDEO = Config.E2E_RECORD_VIDEO

    @classmethod
    def to_dict(cls) -> Dict[str, Any]:
        return {
            "healthcare_url": cls.HEALTHCARE_URL,
            "shop_url": cls.SHOP_URL,
            "api_url": cls.API_URL,
            "headless": cls.HEADLESS,
            "slow_mo": cls.SLOW_MO,
            "default_timeout": cls.DEFAULT_TIMEOUT,
        }


expect.set_options(timeout=E2EConfig.EXPECT_TIMEOUT)


# =============================================================================
# Browser Fixtures
# =============================================================================


@pytest.fixture(scope="session")
def browser_type_launch_args(browser_type_launch_args, browser_name) -> Dict[str, Any]:
    """Browser launch arguments."""
    args = {**browser_type_launch_args, "slow_mo": E2EConfig.SLOW_MO}
    if not E2EConfig.HEADLESS:
        args["headless"] = False
    if browser_name == "chromium":
        args.setdefault("args", BROWSER_OPTIONS["chromium"]["args"])
    return args


@pytest.fixture(scope="session")
def browser_context_args(browser_context_args) -> Dict[str, Any]:
    """Browser context arguments."""
    args = {
        **browser_context_args,
        "viewport": BROWSER_OPTIONS["viewport"],
        "ignore_https_errors": True,
    }

    if E2EConfig.RECORD_VIDEO:
        E2EConfig.ARTIFACTS_DIR.mkdir(parents=True, exist_ok=True)
        args["record_video_dir"] = str(E2EConfig.ARTIFACTS_DIR / "videos")

    return args


@pytest.fixture
def context(browser: Browser, browser_context_args: Dict) -> Generator[BrowserContext, None, None]:
    """Create a new browser context for each test."""
    context = browser.new_context(**browser_context_args)
    context.set_default_timeout(E2EConfig.DEFAULT_TIMEOUT)
    context.set_default_navigation_timeout(E2EConfig.NAVIGATION_TIMEOUT)

    yield context

    context.close()


# =============================================================================
# Healthcare Fixtures
# =============================================================================


@pytest.fixture(scope="session")
def valid_credentials() -> Dict[str, str]:
    """Valid healthcare login (CURA_USERNAME/CURA_PASSWORD override the default)."""
    return get_valid_credentials()


@pytest.fixture
def login_page(page: Page) -> LoginPage:
    """Healthcare home page with the login flow available."""
    return LoginPage(page).navigate_home()


@pytest.fixture
def authenticated_page(login_page: LoginPage, valid_credentials: Dict[str, str]) -> Page:
    """Return a page that's logged in and showing the appointment form."""
    login_page.login(valid_credentials["username"], valid_credentials["password"])
    login_page.expect_visible(login_page.APPOINTMENT_HEADER)
    return login_page.page


@pytest.fixture
def appointment_page(authenticated_page: Page) -> AppointmentPage:
    """Appointment form of an authenticated session."""
    page = AppointmentPage(authenticated_page)
    page.expect_loaded()
    return page


# =============================================================================
# Shop Fixtures
# =============================================================================


@pytest.fixture
def shop_login_page(page: Page) -> ShopLoginPage:
    """Shop login form."""
    return ShopLoginPage(page).navigate()


@pytest.fixture
def inventory_page(shop_login_page: ShopLoginPage) -> InventoryPage:
    """Product listing of a logged-in shop session."""
    creds = SHOP_CREDENTIALS["standard_user"]
    inventory = shop_login_page.login(creds["username"], creds["password"])
    inventory.expect_loaded()
    return inventory


# =============================================================================
# API Fixtures
# =============================================================================


@pytest.fixture(scope="session")
def api_base_url() -> str:
    return E2EConfig.API_URL


@pytest.fixture(scope="session")
def api_request(playwright: Playwright) -> Generator[APIRequestContext, None, None]:
    """Request context shared by the API suite."""
    request_context = playwright.request.new_context(
        extra_http_headers={"Accept": "application/json"},
        timeout=TIMEOUTS["api_request"],
    )

    yield request_context

    request_context.dispose()


# =============================================================================
# Utility Fixtures
# =============================================================================


@pytest.fixture
def screenshot_on_failure(request, page: Page):
    """Capture screenshot on test failure."""
    yield

    report = getattr(request.node, "rep_call", None)
    if report is not None and report.failed and E2EConfig.SCREENSHOT_ON_FAILURE:
        E2EConfig.ARTIFACTS_DIR.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        test_name = request.node.name.replace("/", "_").replace(":", "_")
        screenshot_path = E2EConfig.ARTIFACTS_DIR / f"failure_{test_name}_{timestamp}.png"
        page.screenshot(path=str(screenshot_path))
        print(f"\n[E2E] Screenshot saved: {screenshot_path}")


# =============================================================================
# Hooks
# =============================================================================


@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Store test results for use in fixtures."""
    outcome = yield
    rep = outcome.get_result()
    setattr(item, f"rep_{rep.when}", rep)
