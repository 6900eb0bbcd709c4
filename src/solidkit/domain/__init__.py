"""
Domain Layer - one bounded context per principle

- base/: shared kernel with base classes and the exception hierarchy
- employees/: Single Responsibility
- shapes/: Open/Closed
- birds/: Liskov Substitution
- workers/: Interface Segregation
- orders/: Dependency Inversion

Each context holds a violating ("legacy") design next to the compliant one.
"""
from .base import DomainException, Entity, ValueObject

__all__ = ["DomainException", "Entity", "ValueObject"]
