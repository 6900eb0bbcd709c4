"""Registries mapping names to factories."""
from .database_registry import DatabaseRegistry, get_database_registry

__all__ = ["DatabaseRegistry", "get_database_registry"]
