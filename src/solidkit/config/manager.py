"""Configuration management for the application."""
import json
import logging
import os
import threading
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from solidkit.domain.base.exceptions import ConfigurationError
from solidkit.config.schemas import AppConfig, LoggingConfig, PersistenceConfig, validate_config

logger = logging.getLogger(__name__)

ENV_PREFIX = "SOLIDKIT_"

# Environment variable -> (section, key); section None means top level
ENV_OVERRIDES = {
    "DATABASE_BACKEND": ("persistence", "backend"),
    "DATABASE_HOST": ("persistence", "host"),
    "DATABASE_PORT": ("persistence", "port"),
    "DATABASE_NAME": ("persistence", "database"),
    "LOG_LEVEL": ("logging", "level"),
    "LOG_DESTINATION": ("logging", "destination"),
    "LOG_FILE": ("logging", "file_path"),
    "OUTPUT_FORMAT": (None, "output_format"),
}

SECTIONS = sorted({section for section, _ in ENV_OVERRIDES.values() if section})


class ConfigurationManager:
    """
    Single source of truth for configuration.

    Configuration is read lazily from an optional JSON or YAML file, then
    ``SOLIDKIT_*`` environment variables are applied on top, and the result
    is validated against ``AppConfig``.
    """

    def __init__(self, config_file: Optional[str] = None,
                 environ: Optional[Dict[str, str]] = None):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file
        self._environ = environ if environ is not None else os.environ
        self._lock = threading.RLock()
        self._app_config: Optional[AppConfig] = None

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._load_app_config()
        return self._app_config

    def get_logging_config(self) -> LoggingConfig:
        return self.app_config.logging

    def get_persistence_config(self) -> PersistenceConfig:
        return self.app_config.persistence

    def reload(self) -> AppConfig:
        with self._lock:
            self._app_config = None
        return self.app_config

    def _load_app_config(self) -> AppConfig:
        """Load application configuration from file and environment."""
        config_data: Dict[str, Any] = {}
        if self._config_file:
            config_data = self.load_from_file(self._config_file)
        config_data = self.apply_environment_overrides(config_data)
        return validate_config(config_data)

    @staticmethod
    def load_from_file(config_file: str) -> Dict[str, Any]:
        """
        Read a configuration file.

        Args:
            config_file: Path to a .json, .yaml or .yml file

        Returns:
            Raw configuration mapping

        Raises:
            ConfigurationError: If the file is missing, unreadable or not a mapping
        """
        path = Path(config_file)
        if not path.exists():
            raise ConfigurationError(f"Configuration file not found: {config_file}")

        try:
            with path.open("r", encoding="utf-8") as f:
                if path.suffix.lower() in (".yaml", ".yml"):
                    data = yaml.safe_load(f)
                else:
                    data = json.load(f)
        except (json.JSONDecodeError, yaml.YAMLError, UnicodeDecodeError) as e:
            raise ConfigurationError(f"Failed to parse configuration file {config_file}: {e}") from e
        except OSError as e:
            raise ConfigurationError(f"Failed to read configuration file {config_file}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {config_file} must contain a mapping")

        logger.debug(f"Loaded configuration from {config_file}")
        return data

    def apply_environment_overrides(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        """Overlay ``SOLIDKIT_*`` environment variables onto raw configuration."""
        result = {key: (dict(value) if isinstance(value, dict) else value)
                  for key, value in config_data.items()}

        # An empty section in YAML loads as None and means "use the defaults"
        for section in SECTIONS:
            if section in result and result[section] is None:
                result[section] = {}

        for suffix, (section, key) in ENV_OVERRIDES.items():
            value = self._environ.get(ENV_PREFIX + suffix)
            if value is None:
                continue
            if section is None:
                result[key] = value
            else:
                target = result.setdefault(section, {})
                if not isinstance(target, dict):
                    raise ConfigurationError(f"Section '{section}' must be a mapping", [section])
                target[key] = value
            logger.debug(f"Applied environment override {ENV_PREFIX}{suffix}")

        return result
