"""
Configuration module for the hospital auth client.

Loads configuration from JSON file and environment variables.
"""

import copy
import json
import os
from typing import Dict, Any, Optional
from pathlib import Path

from . import constants


DEFAULT_CONFIG: Dict[str, Any] = {
    "api": {
        "base_url": constants.DEFAULT_API_BASE_URL,
        "timeout": constants.DEFAULT_API_TIMEOUT,
        "max_retries": constants.DEFAULT_API_MAX_RETRIES,
        "verify_ssl": constants.DEFAULT_VERIFY_SSL,
    },
    "logging": {
        "level": constants.DEFAULT_LOG_LEVEL,
    },
}

_TRUE_VALUES = {"1", "true", "yes", "on"}


class Config:
    """Configuration manager for the auth client."""

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to configuration JSON file. If None, uses CONFIG_FILE env var
                        or defaults to 'config.json'. Only an explicitly named file
                        has to exist.
        """
        self._explicit = bool(config_file or os.getenv("CONFIG_FILE"))
        self.config_file = config_file or os.getenv("CONFIG_FILE", constants.DEFAULT_CONFIG_FILE)
        self.config: Dict[str, Any] = copy.deepcopy(DEFAULT_CONFIG)
        self._load_config()
        self._override_from_env()
        self._validate_config()

    def _load_config(self) -> None:
        """Load configuration from JSON file and merge it over the defaults."""
        config_path = Path(self.config_file)
        if not config_path.exists():
            if self._explicit:
                raise FileNotFoundError(f"Configuration file not found: {self.config_file}")
            return

        with open(config_path, "r", encoding="utf-8") as f:
            loaded = json.load(f)

        for section, values in loaded.items():
            if isinstance(values, dict) and isinstance(self.config.get(section), dict):
                self.config[section].update(values)
            else:
                self.config[section] = values

    def _override_from_env(self) -> None:
        """Override configuration with environment variables."""
        # API configuration
        if os.getenv("API_BASE_URL"):
            self.config["api"]["base_url"] = os.getenv("API_BASE_URL")

        if os.getenv("API_TIMEOUT"):
            self.config["api"]["timeout"] = self._parse_number("API_TIMEOUT", float)

        if os.getenv("API_MAX_RETRIES"):
            self.config["api"]["max_retries"] = self._parse_number("API_MAX_RETRIES", int)

        if os.getenv("API_VERIFY_SSL"):
            self.config["api"]["verify_ssl"] = os.getenv("API_VERIFY_SSL", "").lower() in _TRUE_VALUES

        # Logging
        if os.getenv("LOG_LEVEL"):
            self.config["logging"]["level"] = os.getenv("LOG_LEVEL")

        # Environment
        if os.getenv("ENVIRONMENT"):
            self.config["environment"] = os.getenv("ENVIRONMENT")

    @staticmethod
    def _parse_number(env_var: str, cast):
        raw = os.getenv(env_var, "")
        try:
            return cast(raw)
        except ValueError:
            raise ValueError(f"Invalid value for {env_var}: {raw!r}") from None

    def _validate_config(self) -> None:
        """Validate that required configuration keys hold usable values."""
        api = self.config.get("api")
        if not isinstance(api, dict):
            raise ValueError("Missing required configuration section: api")

        if not api.get("base_url"):
            raise ValueError("Missing required configuration key: api.base_url")

        timeout = api.get("timeout")
        if not isinstance(timeout, (int, float)) or isinstance(timeout, bool) or timeout <= 0:
            raise ValueError(f"api.timeout must be a positive number, got {timeout!r}")

        max_retries = api.get("max_retries")
        if not isinstance(max_retries, int) or isinstance(max_retries, bool) or max_retries < 0:
            raise ValueError(f"api.max_retries must be a non-negative integer, got {max_retries!r}")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key (supports dot notation).

        Args:
            key: Configuration key (e.g., 'api.base_url')
            default: Default value if key not found

        Returns:
            Configuration value
        """
        keys = key.split(".")
        value = self.config

        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
                if value is None:
                    return default
            else:
                return default

        return value

    @property
    def api_base_url(self) -> str:
        """Get API base URL."""
        return self.get("api.base_url", constants.DEFAULT_API_BASE_URL)

    @property
    def api_timeout(self) -> float:
        """Get API timeout in seconds."""
        return self.get("api.timeout", constants.DEFAULT_API_TIMEOUT)

    @property
    def api_max_retries(self) -> int:
        """Get maximum API retry attempts."""
        return self.get("api.max_retries", constants.DEFAULT_API_MAX_RETRIES)

    @property
    def api_verify_ssl(self) -> bool:
        """Get API SSL verification setting."""
        return self.get("api.verify_ssl", constants.DEFAULT_VERIFY_SSL)

    @property
    def log_level(self) -> str:
        """Get logging level."""
        return self.get("logging.level", constants.DEFAULT_LOG_LEVEL)

    @property
    def log_file(self) -> Optional[str]:
        """Get log file path, if file logging is configured."""
        return self.get("logging.file")

    def __repr__(self) -> str:
        """String representation of config."""
        return f"Config(file={self.config_file}, env={self.get('environment')})"
