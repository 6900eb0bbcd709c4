"""Dependency injection: container and service registrations."""
from .container import DIContainer, get_container, reset_container
from .exceptions import CircularDependencyError, DependencyResolutionError, FactoryError
from .services import register_services

__all__ = [
    "DIContainer",
    "get_container",
    "reset_container",
    "register_services",
    "DependencyResolutionError",
    "CircularDependencyError",
    "FactoryError",
]
