"""Database Registry - Registry pattern for persistence backend factories.

New backends are added by registering a factory under a name; code that picks
a backend from configuration never grows another conditional.
"""

from typing import Callable, Dict, List, Optional
import threading

from solidkit.config.schemas.persistence_schema import PersistenceConfig
from solidkit.domain.base.exceptions import UnknownBackendError
from solidkit.domain.orders.ports import Database
from solidkit.infrastructure.logging.logger import get_logger
from solidkit.infrastructure.persistence.mysql_database import MySQLDatabase
from solidkit.infrastructure.persistence.postgresql_database import PostgreSQLDatabase

DatabaseFactory = Callable[[PersistenceConfig], Database]


class DatabaseRegistry:
    """
    Registry for database backend factories.

    Thread-safe singleton implementation.
    """

    _instance: Optional['DatabaseRegistry'] = None
    _lock = threading.RLock()

    def __init__(self):
        """Initialize database registry."""
        self._factories: Dict[str, DatabaseFactory] = {}
        self._logger = get_logger(__name__)
        self._registration_lock = threading.RLock()

    @classmethod
    def get_instance(cls) -> 'DatabaseRegistry':
        """Get singleton instance of database registry."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
                    cls._instance.register_defaults()
        return cls._instance

    def register(self, backend: str, factory: DatabaseFactory) -> None:
        """
        Register a backend factory.

        Args:
            backend: Backend name used in configuration (e.g., 'mysql')
            factory: Callable building the backend from persistence config

        Raises:
            ValueError: If backend is already registered
        """
        key = backend.lower()
        with self._registration_lock:
            if key in self._factories:
                raise ValueError(f"Database backend '{backend}' is already registered")
            self._factories[key] = factory
            self._logger.debug(f"Registered database backend: {key}")

    def unregister(self, backend: str) -> bool:
        """
        Unregister a backend.

        Returns:
            True if backend was unregistered, False if not found
        """
        with self._registration_lock:
            return self._factories.pop(backend.lower(), None) is not None

    def is_registered(self, backend: str) -> bool:
        return backend.lower() in self._factories

    def available(self) -> List[str]:
        return sorted(self._factories)

    def create(self, backend: str, config: Optional[PersistenceConfig] = None) -> Database:
        """
        Build a backend by name.

        Args:
            backend: Registered backend name, case-insensitive
            config: Persistence configuration passed to the factory

        Returns:
            Database instance

        Raises:
            UnknownBackendError: If no factory is registered under ``backend``
        """
        factory = self._factories.get(backend.lower())
        if factory is None:
            raise UnknownBackendError(backend, self.available())
        database = factory(config or PersistenceConfig(backend=backend.lower()))
        self._logger.debug(f"Created database backend: {database.name}")
        return database

    def register_defaults(self) -> None:
        """Register the built-in MySQL and PostgreSQL backends."""
        self.register(
            "mysql",
            lambda config: MySQLDatabase(host=config.host, database=config.database, port=config.port)
        )
        self.register(
            "postgresql",
            lambda config: PostgreSQLDatabase(host=config.host, database=config.database, port=config.port)
        )


def get_database_registry() -> DatabaseRegistry:
    """Get the process-wide database registry."""
    return DatabaseRegistry.get_instance()
