"""
Environment Variable Configuration with Validation

Provides centralized environment variable management with:
- Type validation (str, int, bool, path, list)
- Default values
- Validation rules (min/max, choices, patterns)
- Sensitive value masking

Usage:
    from healthcare_e2e.config.env_config import Config, validate_config

    headless = Config.E2E_HEADLESS
    env = Config.E2E_ENV

    # Validate all at once (raises ConfigError if invalid)
    validate_config()
"""

import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

logger = logging.getLogger(__name__)

# Project root for relative paths
BASE_DIR = Path(__file__).resolve().parent.parent.parent

URL_PATTERN = r"^https?://[^\s/$.?#][^\s]*$"


class ConfigError(Exception):
    """Raised when configuration validation fails."""

    pass


@dataclass
class EnvVar:
    """Environment variable definition with validation."""

    name: str
    default: Any = None
    var_type: str = "str"  # str, int, bool, path, list
    required: bool = False
    description: str = ""
    min_value: Optional[Union[int, float]] = None
    max_value: Optional[Union[int, float]] = None
    choices: Optional[List[Any]] = None
    pattern: Optional[str] = None
    sensitive: bool = False

    def parse(self, value: str) -> Any:
        """Parse string value to target type."""
        if value is None:
            return None

        if self.var_type == "str":
            return value
        elif self.var_type == "int":
            try:
                return int(value)
            except ValueError:
                raise ConfigError(f"{self.name}: '{value}' is not a valid integer")
        elif self.var_type == "bool":
            return value.strip().lower() in ("true", "1", "yes", "on")
        elif self.var_type == "path":
            path = Path(value)
            if not path.is_absolute():
                path = BASE_DIR / path
            return path
        elif self.var_type == "list":
            return [item.strip() for item in value.split(",") if item.strip()]
        else:
            return value

    def validate(self, value: Any) -> tuple[bool, str]:
        """Validate parsed value. Returns (is_valid, error_message)."""
        if value is None:
            if self.required:
                return False, f"{self.name} is required but not set"
            return True, ""

        if self.var_type == "int":
            if self.min_value is not None and value < self.min_value:
                return False, f"{self.name}: value {value} is below minimum {self.min_value}"
            if self.max_value is not None and value > self.max_value:
                return False, f"{self.name}: value {value} exceeds maximum {self.max_value}"

        if self.choices is not None and value not in self.choices:
            return (
                False,
                f"{self.name}: '{value}' is not a valid choice. Must be one of: {self.choices}",
            )

        if self.pattern and self.var_type == "str":
            if not re.match(self.pattern, value):
                return False, f"{self.name}: '{value}' does not match required pattern"

        return True, ""

    def get_value(self) -> Any:
        """Get validated value from environment."""
        raw_value = os.environ.get(self.name)

        if raw_value is None or raw_value == "":
            if self.required:
                raise ConfigError(f"Required environment variable {self.name} is not set")
            return self.default

        parsed = self.parse(raw_value)
        is_valid, error = self.validate(parsed)

        if not is_valid:
            raise ConfigError(error)

        return parsed


ENV_VARS: Dict[str, EnvVar] = {
    # Run control
    "E2E_ENV": EnvVar(
        name="E2E_ENV",
        default="prod",
        choices=["prod", "local"],
        description="Target environment (selects config/environments/<env>.yaml)",
    ),
    "RUN_E2E_TESTS": EnvVar(
        name="RUN_E2E_TESTS",
        default=False,
        var_type="bool",
        description="Run live browser/API suites against the target sites",
    ),
    "RUN_EXAMPLE_TESTS": EnvVar(
        name="RUN_EXAMPLE_TESTS",
        default=False,
        var_type="bool",
        description="Also run the helper usage examples",
    ),
    "E2E_LOG_LEVEL": EnvVar(
        name="E2E_LOG_LEVEL",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        description="Log level for helpers and scripts",
    ),
    # Browser settings
    "E2E_HEADLESS": EnvVar(
        name="E2E_HEADLESS",
        default=True,
        var_type="bool",
        description="Run the browser headless",
    ),
    "E2E_SLOW_MO": EnvVar(
        name="E2E_SLOW_MO",
        default=0,
        var_type="int",
        min_value=0,
        max_value=10000,
        description="Delay between browser operations (ms)",
    ),
    "E2E_DEFAULT_TIMEOUT": EnvVar(
        name="E2E_DEFAULT_TIMEOUT",
        default=30000,
        var_type="int",
        min_value=1000,
        max_value=600000,
        description="Default action timeout (ms)",
    ),
    "E2E_NAVIGATION_TIMEOUT": EnvVar(
        name="E2E_NAVIGATION_TIMEOUT",
        default=60000,
        var_type="int",
        min_value=1000,
        max_value=600000,
        description="Navigation timeout (ms)",
    ),
    "E2E_RECORD_VIDEO": EnvVar(
        name="E2E_RECORD_VIDEO",
        default=False,
        var_type="bool",
        description="Record a video of every test",
    ),
    "E2E_ARTIFACTS_DIR": EnvVar(
        name="E2E_ARTIFACTS_DIR",
        default=BASE_DIR / "test-results",
        var_type="path",
        description="Directory for screenshots and videos",
    ),
    # Target URLs
    "HEALTHCARE_BASE_URL": EnvVar(
        name="HEALTHCARE_BASE_URL",
        default=None,
        pattern=URL_PATTERN,
        description="Override the healthcare site base URL",
    ),
    "SHOP_BASE_URL": EnvVar(
        name="SHOP_BASE_URL",
        default=None,
        pattern=URL_PATTERN,
        description="Override the e-commerce site base URL",
    ),
    "API_BASE_URL": EnvVar(
        name="API_BASE_URL",
        default=None,
        pattern=URL_PATTERN,
        description="Override the REST API base URL",
    ),
    # Credentials
    "CURA_USERNAME": EnvVar(
        name="CURA_USERNAME",
        default=None,
        description="Override the valid healthcare username",
    ),
    "CURA_PASSWORD": EnvVar(
        name="CURA_PASSWORD",
        default=None,
        sensitive=True,
        description="Override the valid healthcare password",
    ),
}


class ConfigMeta(type):
    """Metaclass to provide attribute access to config values."""

    _cache: Dict[str, Any] = {}

    def __getattr__(cls, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)

        if name in cls._cache:
            return cls._cache[name]

        if name in ENV_VARS:
            value = ENV_VARS[name].get_value()
            cls._cache[name] = value
            return value

        raise AttributeError(f"Unknown config variable: {name}")


class Config(metaclass=ConfigMeta):
    """
    Configuration class with environment variable access.

    Access config values as class attributes:
        Config.E2E_HEADLESS  # Returns bool
        Config.E2E_SLOW_MO  # Returns int
        Config.E2E_ENV  # Returns str
    """

    @classmethod
    def get(cls, name: str, default: Any = None) -> Any:
        """Get config value with optional default."""
        try:
            return getattr(cls, name)
        except AttributeError:
            return default

    @classmethod
    def to_dict(cls, include_sensitive: bool = False) -> Dict[str, Any]:
        """Get all config values as dictionary."""
        result = {}
        for name, env_var in ENV_VARS.items():
            try:
                value = env_var.get_value()
                if env_var.sensitive and not include_sensitive:
                    value = "***" if value else None
                result[name] = value
            except ConfigError:
                result[name] = None
        return result

    @classmethod
    def clear_cache(cls) -> None:
        """Clear the config cache (useful for testing)."""
        cls._cache.clear()


def validate_config() -> Dict[str, Any]:
    """
    Validate all environment variables.

    Returns:
        Dict of validated config values

    Raises:
        ConfigError: listing every invalid variable
    """
    errors = []
    validated = {}

    for name, env_var in ENV_VARS.items():
        try:
            value = env_var.get_value()
            validated[name] = value

            log_value = ("***" if value else "not set") if env_var.sensitive else value
            logger.debug(f"Config: {name} = {log_value}")
        except ConfigError as e:
            errors.append(str(e))

    if errors:
        error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        logger.error(error_msg)
        raise ConfigError(error_msg)

    logger.info(f"Configuration validated: {len(validated)} variables loaded")
    return validated


def get_env_var_docs() -> str:
    """Generate a markdown table documenting every environment variable."""
    lines = ["# Environment Variables\n"]
    lines.append("| Variable | Type | Default | Description |")
    lines.append("|----------|------|---------|-------------|")

    for name, ev in ENV_VARS.items():
        default = "***" if ev.sensitive else (ev.default if ev.default is not None else "-")
        if isinstance(default, Path):
            default = default.name
        lines.append(f"| `{name}` | {ev.var_type} | {default} | {ev.description} |")

    return "\n".join(lines)


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging for scripts run outside pytest."""
    logging.basicConfig(
        level=getattr(logging, level or Config.E2E_LOG_LEVEL),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
