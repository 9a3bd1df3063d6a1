# Configuration module
import copy
from functools import lru_cache
from typing import Any, Dict

from .config_loader import ConfigLoader
from .data import (
    APPOINTMENT_DATA,
    ORDER_CONFIRMATION_TEXT,
    ORDER_DATA,
    PATIENT_DATA,
    PATIENT_DETAIL_FIELDS,
    PATIENT_REQUIRED_FIELDS,
    SHOP_CREDENTIALS,
    TEST_CREDENTIALS,
)
from .env_config import (
    ENV_VARS,
    Config,
    ConfigError,
    EnvVar,
    configure_logging,
    get_env_var_docs,
    validate_config,
)
from .selectors import SELECTORS, SHOP_SELECTORS
from .settings import (
    APP_CONFIG,
    ASSERTION_MESSAGES,
    BROWSER_OPTIONS,
    HTTP_STATUS,
    TAG_DESCRIPTIONS,
    TEST_TAGS,
    TIMEOUTS,
    marker_names,
)

_URL_OVERRIDES = {
    "healthcare_app": "HEALTHCARE_BASE_URL",
    "shop_app": "SHOP_BASE_URL",
    "api": "API_BASE_URL",
}


@lru_cache(maxsize=None)
def _resolve_app_config(environment: str) -> Dict[str, Any]:
    config = ConfigLoader(environment=environment).load("app", APP_CONFIG)

    for section, var_name in _URL_OVERRIDES.items():
        url = Config.get(var_name)
        if url:
            config[section]["base_url"] = url.rstrip("/")

    return config


def get_app_config() -> Dict[str, Any]:
    """
    Return APP_CONFIG resolved for the current E2E_ENV.

    Order: settings defaults, environment YAML, local YAML, *_BASE_URL vars.
    The result is a copy; callers may mutate it.
    """
    return copy.deepcopy(_resolve_app_config(Config.E2E_ENV))


def get_valid_credentials() -> Dict[str, str]:
    """Valid healthcare credentials, honoring CURA_USERNAME/CURA_PASSWORD."""
    creds = dict(TEST_CREDENTIALS["valid_user"])
    if Config.CURA_USERNAME:
        creds["username"] = Config.CURA_USERNAME
    if Config.CURA_PASSWORD:
        creds["password"] = Config.CURA_PASSWORD
    return creds


def reset_config() -> None:
    """Drop cached env values and resolved configs (useful for testing)."""
    Config.clear_cache()
    _resolve_app_config.cache_clear()


__all__ = [
    "APP_CONFIG",
    "APPOINTMENT_DATA",
    "ASSERTION_MESSAGES",
    "BROWSER_OPTIONS",
    "Config",
    "ConfigError",
    "ConfigLoader",
    "ENV_VARS",
    "EnvVar",
    "HTTP_STATUS",
    "ORDER_CONFIRMATION_TEXT",
    "ORDER_DATA",
    "PATIENT_DATA",
    "PATIENT_DETAIL_FIELDS",
    "PATIENT_REQUIRED_FIELDS",
    "SELECTORS",
    "SHOP_CREDENTIALS",
    "SHOP_SELECTORS",
    "TAG_DESCRIPTIONS",
    "TEST_CREDENTIALS",
    "TEST_TAGS",
    "TIMEOUTS",
    "configure_logging",
    "get_app_config",
    "get_env_var_docs",
    "get_valid_credentials",
    "marker_names",
    "reset_config",
    "validate_config",
]
