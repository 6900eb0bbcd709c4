"""Configuration schemas package."""

from .app_schema import AppConfig, validate_config
from .logging_schema import LoggingConfig
from .persistence_schema import PersistenceConfig

__all__ = [
    "AppConfig",
    "validate_config",
    "LoggingConfig",
    "PersistenceConfig",
]
