"""Configuration package with clean public API."""

from .schemas import AppConfig, LoggingConfig, PersistenceConfig, validate_config
from .manager import ConfigurationManager

__all__ = [
    'AppConfig',
    'LoggingConfig',
    'PersistenceConfig',
    'validate_config',
    'ConfigurationManager',
]
