"""Service registrations for the order context."""
from typing import Optional

from solidkit.config.schemas import AppConfig
from solidkit.domain.orders.ports import Database
from solidkit.domain.orders.service import OrderService
from solidkit.infrastructure.di.container import DIContainer
from solidkit.infrastructure.logging.logger import get_logger
from solidkit.infrastructure.registry.database_registry import (
    DatabaseRegistry,
    get_database_registry,
)

logger = get_logger(__name__)


def register_services(container: DIContainer, config: AppConfig,
                      registry: Optional[DatabaseRegistry] = None) -> DIContainer:
    """
    Wire the Database port and OrderService.

    The configured backend name picks the Database implementation; the
    OrderService is built against the port and never sees the choice.

    Args:
        container: Container to populate
        config: Application configuration
        registry: Backend registry, the global one by default

    Returns:
        The populated container
    """
    registry = registry or get_database_registry()
    persistence = config.persistence

    container.register_instance(AppConfig, config)
    container.register_singleton(
        Database, lambda c: registry.create(persistence.backend, persistence)
    )
    container.register_singleton(OrderService)

    logger.debug(f"Registered order services with backend {persistence.backend}")
    return container
