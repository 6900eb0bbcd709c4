"""Shared kernel for the domain layer."""
from .entity import Entity
from .exceptions import (
    ConfigurationError,
    DomainException,
    MissingCapabilityError,
    ResourceNotFoundError,
    UnknownBackendError,
    UnsupportedOperationError,
    UnsupportedShapeError,
    ValidationError,
)
from .value_object import ValueObject

__all__ = [
    "Entity",
    "ValueObject",
    "DomainException",
    "ValidationError",
    "ResourceNotFoundError",
    "UnsupportedOperationError",
    "UnsupportedShapeError",
    "ConfigurationError",
    "MissingCapabilityError",
    "UnknownBackendError",
]
