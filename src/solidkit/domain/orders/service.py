"""High-level order orchestration, written against the Database port only."""
from solidkit.domain.base.exceptions import ResourceNotFoundError
from solidkit.domain.orders.order import Order
from solidkit.domain.orders.ports import Database
import structlog

logger = structlog.get_logger(__name__)


class OrderService:
    """
    Places and looks up orders.

    The backend is handed in; this class never names a concrete database, so
    swapping MySQL for PostgreSQL is a wiring change, not an edit here.
    """

    def __init__(self, database: Database):
        self._database = database
        self._connected = False

    @property
    def database(self) -> Database:
        return self._database

    def place_order(self, order: Order) -> str:
        """
        Persist an order, connecting to the backend on first use.

        Args:
            order: Order to place

        Returns:
            Backend confirmation message
        """
        if not self._connected:
            self._database.connect()
            self._connected = True
        confirmation = self._database.save(order)
        logger.info(f"Order {order.order_id} placed via {self._database.name}")
        return confirmation

    def get_order(self, order_id: str) -> Order:
        order = self._database.find(order_id)
        if order is None:
            raise ResourceNotFoundError("Order", order_id)
        return order
