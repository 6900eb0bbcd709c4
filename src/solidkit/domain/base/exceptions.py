# solidkit/domain/base/exceptions.py
from typing import Any, Optional, List


class DomainException(Exception):
    """Base exception for all domain-specific errors."""
    pass


class ValidationError(DomainException):
    """Raised when domain validation fails."""
    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.details = details


class ResourceNotFoundError(DomainException):
    """Raised when a requested resource cannot be found."""
    def __init__(self, resource_type: str, resource_id: str):
        super().__init__(f"{resource_type} with ID {resource_id} not found")
        self.resource_type = resource_type
        self.resource_id = resource_id


class UnsupportedOperationError(DomainException):
    """Raised when a type is asked for behavior it inherited but cannot perform."""
    def __init__(self, type_name: str, operation: str):
        super().__init__(f"{type_name} does not support {operation}()")
        self.type_name = type_name
        self.operation = operation


class UnsupportedShapeError(DomainException):
    """Raised when a type-switching calculator meets a shape it has no branch for."""
    def __init__(self, shape_type: str):
        super().__init__(f"Cannot calculate area of unsupported shape: {shape_type}")
        self.shape_type = shape_type


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []


class UnknownBackendError(ConfigurationError):
    """Raised when a persistence backend name has no registration."""
    def __init__(self, backend: str, available: List[str]):
        super().__init__(
            f"Unknown database backend '{backend}'. Available: {', '.join(available) or 'none'}"
        )
        self.backend = backend
        self.available = available


class MissingCapabilityError(DomainException, TypeError):
    """Raised when a group operation is handed members lacking the capability it needs."""
    def __init__(self, capability: str, members: List[str]):
        super().__init__(
            f"Members without {capability} capability: {', '.join(members)}"
        )
        self.capability = capability
        self.members = members
