"""Order service welded to one concrete database."""
from solidkit.domain.orders.order import Order
import structlog

logger = structlog.get_logger(__name__)


class LegacyMySQLDatabase:
    """Concrete low-level class with no abstraction in front of it."""

    def connect(self) -> str:
        return "Connected to MySQL at localhost:3306/orders"

    def save(self, order: Order) -> str:
        message = f"Saving order {order.order_id} to MySQL database"
        logger.debug(message)
        return message


class LegacyOrderService:
    """
    Builds its own LegacyMySQLDatabase.

    Moving to another backend means editing this class.
    """

    def __init__(self):
        self.database = LegacyMySQLDatabase()
        self.database.connect()

    def place_order(self, order: Order) -> str:
        return self.database.save(order)
