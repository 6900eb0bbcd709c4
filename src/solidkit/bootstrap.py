"""Application bootstrap - DI-based architecture."""

from typing import Dict, Optional

from solidkit.application.principles import PrincipleCatalog, get_catalog
from solidkit.config import AppConfig, ConfigurationManager
from solidkit.domain.orders.service import OrderService
from solidkit.infrastructure.di.container import DIContainer
from solidkit.infrastructure.di.services import register_services
from solidkit.infrastructure.logging.logger import get_logger, setup_logging


class Application:
    """Application context: configuration, logging and a wired container."""

    def __init__(self, config_path: Optional[str] = None,
                 environ: Optional[Dict[str, str]] = None) -> None:
        self.config_path = config_path
        self._config_manager = ConfigurationManager(config_path, environ=environ)
        self._container: Optional[DIContainer] = None
        self.logger = get_logger(__name__)

    @property
    def config(self) -> AppConfig:
        return self._config_manager.app_config

    @property
    def container(self) -> DIContainer:
        if self._container is None:
            self._container = register_services(DIContainer(), self.config)
        return self._container

    @property
    def catalog(self) -> PrincipleCatalog:
        return get_catalog()

    def initialize(self, log_level: Optional[str] = None) -> "Application":
        """
        Configure logging from configuration, optionally overriding the level.

        Args:
            log_level: Level taking precedence over the configured one

        Returns:
            The application itself
        """
        logging_config = self.config.logging
        if log_level:
            logging_config = logging_config.model_copy(update={"level": log_level.upper()})
        setup_logging(logging_config)
        self.logger.debug(f"Application initialized with backend {self.config.persistence.backend}")
        return self

    def order_service(self) -> OrderService:
        return self.container.get(OrderService)


def create_application(config_path: Optional[str] = None,
                       log_level: Optional[str] = None) -> Application:
    """Create and initialize the application."""
    return Application(config_path).initialize(log_level)
