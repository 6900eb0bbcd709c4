"""
Dependency Injection Container implementation.

Types are resolved from, in order: pre-registered instances, singletons and
factories. A singleton registered as a class is built on first use with its
constructor parameters resolved from the container by type annotation.
"""
from typing import Any, Callable, Dict, List, Optional, Type, TypeVar, cast, get_type_hints
import inspect
import threading
import time
from contextlib import contextmanager
from typing import Iterator

from solidkit.domain.base.exceptions import DomainException
from solidkit.infrastructure.di.exceptions import (
    CircularDependencyError,
    DependencyResolutionError,
    FactoryError,
)
from solidkit.infrastructure.logging.logger import get_logger

T = TypeVar('T')
logger = get_logger(__name__)


@contextmanager
def timed_operation(operation_name: str) -> Iterator[None]:
    """Context manager to time and log an operation."""
    start_time = time.time()
    try:
        yield
    finally:
        elapsed_time = time.time() - start_time
        logger.debug(f"{operation_name} completed in {elapsed_time:.4f}s")


def _name(cls: Type) -> str:
    return cls.__name__ if hasattr(cls, '__name__') else str(cls)


class DIContainer:
    """Dependency injection container."""

    def __init__(self):
        self._singletons: Dict[Type, Any] = {}
        self._factories: Dict[Type, Callable[['DIContainer'], Any]] = {}
        self._instances: Dict[Type, Any] = {}

    def is_registered(self, cls: Type) -> bool:
        """
        Check if a type is registered with the container.

        Args:
            cls: Class type to check

        Returns:
            True if the type is registered, False otherwise
        """
        return (
            cls in self._singletons or
            cls in self._factories or
            cls in self._instances
        )

    def has(self, service_type: Type[T]) -> bool:
        return self.is_registered(service_type)

    def register_singleton(self, cls: Type[T], instance_or_factory: Any = None) -> None:
        """
        Register a singleton type.

        Args:
            cls: Class type to register
            instance_or_factory: Optional implementation class, pre-created
                instance or factory function taking the container
        """
        if instance_or_factory is None:
            self._singletons[cls] = cls
            logger.debug(f"Registered singleton type {_name(cls)}")
        elif isinstance(instance_or_factory, type):
            self._singletons[cls] = instance_or_factory
            logger.debug(f"Registered singleton {_name(instance_or_factory)} for {_name(cls)}")
        elif callable(instance_or_factory):
            try:
                self._singletons[cls] = instance_or_factory(self)
                logger.debug(f"Registered singleton from factory for {_name(cls)}")
            except DomainException:
                raise
            except Exception as e:
                logger.error(f"Failed to create singleton from factory for {_name(cls)}: {str(e)}")
                raise FactoryError(cls, f"Factory function failed: {str(e)}", e) from e
        else:
            self._singletons[cls] = instance_or_factory
            logger.debug(f"Registered pre-created singleton for {_name(cls)}")

    def register_factory(self, cls: Type[T], factory: Callable[['DIContainer'], T]) -> None:
        """Register a factory called on every ``get``."""
        self._factories[cls] = factory
        logger.debug(f"Registered factory for {_name(cls)}")

    def register_instance(self, cls: Type[T], instance: T) -> None:
        self._instances[cls] = instance
        logger.debug(f"Registered instance for {_name(cls)}")

    def get(self, cls: Type[T], _chain: Optional[List[Type]] = None) -> T:
        """
        Get an instance of the specified type.

        Args:
            cls: Class type to get

        Returns:
            Instance of the requested type

        Raises:
            DependencyResolutionError: If the type is not registered or cannot be built
            CircularDependencyError: If the type depends on itself
        """
        chain = list(_chain or [])
        if cls in chain:
            raise CircularDependencyError(chain + [cls])
        chain.append(cls)

        with timed_operation(f"Resolve {_name(cls)}"):
            if cls in self._instances:
                return cast(T, self._instances[cls])

            if cls in self._singletons:
                registered = self._singletons[cls]
                if isinstance(registered, type):
                    instance = self._create_instance(registered, chain)
                    self._singletons[cls] = instance
                    return cast(T, instance)
                return cast(T, registered)

            if cls in self._factories:
                try:
                    return cast(T, self._factories[cls](self))
                except DomainException:
                    raise
                except Exception as e:
                    logger.error(f"Factory failed to create instance of {_name(cls)}: {str(e)}")
                    raise FactoryError(cls, f"Factory function failed: {str(e)}", e) from e

        raise DependencyResolutionError(cls, "type is not registered")

    def _create_instance(self, cls: Type[T], chain: List[Type]) -> T:
        """Build ``cls`` resolving annotated constructor parameters from the container."""
        try:
            hints = get_type_hints(cls.__init__)
            params = list(inspect.signature(cls.__init__).parameters.values())[1:]
        except (TypeError, ValueError, NameError) as e:
            raise DependencyResolutionError(cls, f"cannot inspect constructor: {e}", e) from e

        kwargs = {}
        for param in params:
            if param.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD):
                continue
            annotation = hints.get(param.name)
            if annotation is not None and self.is_registered(annotation):
                kwargs[param.name] = self.get(annotation, chain)
            elif param.default is inspect.Parameter.empty:
                raise DependencyResolutionError(
                    cls, f"parameter '{param.name}' has no registered type and no default"
                )

        logger.debug(f"Creating instance of {_name(cls)} with {sorted(kwargs)}")
        return cls(**kwargs)

    def clear(self) -> None:
        self._singletons.clear()
        self._factories.clear()
        self._instances.clear()


_container: Optional[DIContainer] = None
_container_lock = threading.Lock()


def get_container() -> DIContainer:
    """Get the global container, creating it on first use."""
    global _container
    if _container is None:
        with _container_lock:
            if _container is None:
                _container = DIContainer()
    return _container


def reset_container() -> None:
    global _container
    with _container_lock:
        _container = None
