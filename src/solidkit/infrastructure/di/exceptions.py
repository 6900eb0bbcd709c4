"""Dependency injection errors."""
from typing import List, Optional, Type

from solidkit.domain.base.exceptions import DomainException


def _type_name(cls: Type) -> str:
    return cls.__name__ if hasattr(cls, '__name__') else str(cls)


class DependencyResolutionError(DomainException):
    """Raised when the container cannot produce a requested type."""
    def __init__(self, dependency_type: Type, message: str,
                 cause: Optional[Exception] = None):
        super().__init__(f"Cannot resolve {_type_name(dependency_type)}: {message}")
        self.dependency_type = dependency_type
        self.cause = cause


class CircularDependencyError(DependencyResolutionError):
    """Raised when resolving a type requires the type itself."""
    def __init__(self, chain: List[Type]):
        path = " -> ".join(_type_name(cls) for cls in chain)
        super().__init__(chain[-1], f"circular dependency {path}")
        self.chain = chain


class FactoryError(DependencyResolutionError):
    """Raised when a registered factory fails."""
    def __init__(self, dependency_type: Type, message: str, cause: Optional[Exception] = None):
        super().__init__(dependency_type, message, cause)
