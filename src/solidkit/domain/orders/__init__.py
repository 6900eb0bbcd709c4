"""Orders bounded context - Dependency Inversion Principle."""
from .order import Order
from .ports import Database
from .service import OrderService
from .legacy import LegacyMySQLDatabase, LegacyOrderService

__all__ = ["Order", "Database", "OrderService", "LegacyMySQLDatabase", "LegacyOrderService"]
