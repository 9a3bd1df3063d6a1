"""
Configuration Loader

Merges per-environment YAML overrides over the static defaults in
settings.py, so the same suites can run against the public demo sites or
a local mirror.

Loading order:
1. base dict (APP_CONFIG)
2. config/environments/{environment}.yaml (optional)
3. config/local/overrides.yaml (optional, gitignored)
"""

import copy
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .env_config import ConfigError

logger = logging.getLogger(__name__)

CONFIG_DIR = Path(__file__).resolve().parent


class ConfigLoader:
    """Load and merge configuration overrides from YAML files."""

    def __init__(self, config_dir: Optional[Path] = None, environment: str = "prod"):
        self.config_dir = Path(config_dir) if config_dir else CONFIG_DIR
        self.environment = environment
        self._cache: Dict[str, Dict[str, Any]] = {}

    def load(self, section: str, base: Dict[str, Any]) -> Dict[str, Any]:
        """
        Return ``base`` with the ``section`` key of each override file merged in.

        Args:
            section: Top-level key to read from the YAML files
            base: Default configuration (not modified)

        Returns:
            Merged configuration dictionary
        """
        if section in self._cache:
            return self._cache[section]

        config = copy.deepcopy(base)

        env_path = self.config_dir / "environments" / f"{self.environment}.yaml"
        if env_path.exists():
            config = self._merge_config(config, self._section(env_path, section))
            logger.debug(f"Applied {self.environment} overrides from {env_path}")

        local_path = self.config_dir / "local" / "overrides.yaml"
        if local_path.exists():
            config = self._merge_config(config, self._section(local_path, section))
            logger.debug(f"Applied local overrides from {local_path}")

        self._cache[section] = config
        return config

    def _read(self, path: Path) -> Dict[str, Any]:
        """Read a YAML mapping; an empty file is an empty mapping."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(f"{path} must contain a mapping, got {type(data).__name__}")
        return data

    def _section(self, path: Path, section: str) -> Dict[str, Any]:
        """Read one top-level section; a missing or empty section is an empty mapping."""
        value = self._read(path).get(section)
        if value is None:
            return {}
        if not isinstance(value, dict):
            raise ConfigError(f"{path}: '{section}' must be a mapping")
        return value

    def _merge_config(self, base: Dict, override: Dict) -> Dict:
        """Deep merge override config into base config."""
        result = base.copy()
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge_config(result[key], value)
            else:
                result[key] = value
        return result
