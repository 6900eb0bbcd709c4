"""Shared behavior for the simulated SQL backends."""
from typing import Dict, Optional

from solidkit.domain.orders.order import Order
from solidkit.domain.orders.ports import Database
from solidkit.infrastructure.logging.logger import get_logger


class SimulatedDatabase(Database):
    """
    Database that only pretends to talk to a server.

    Rows are kept in a dict for the lifetime of the object and every
    operation is reported as a message. No I/O is performed.
    """

    backend_name = "database"
    default_port = 0

    def __init__(self, host: str = "localhost", database: str = "orders",
                 port: Optional[int] = None):
        self.host = host
        self.database = database
        self.port = port or self.default_port
        self.connected = False
        self._rows: Dict[str, Order] = {}
        self._logger = get_logger(type(self).__module__)

    @property
    def name(self) -> str:
        return self.backend_name

    @property
    def dsn(self) -> str:
        return f"{self.host}:{self.port}/{self.database}"

    def connect(self) -> str:
        self.connected = True
        message = f"Connected to {self.backend_name} at {self.dsn}"
        self._logger.debug(message)
        return message

    def save(self, order: Order) -> str:
        self._rows[order.order_id] = order
        message = f"Saving order {order.order_id} to {self.backend_name} database"
        self._logger.debug(message, customer=order.customer, amount=order.amount)
        return message

    def find(self, order_id: str) -> Optional[Order]:
        return self._rows.get(order_id)

    def __len__(self) -> int:
        return len(self._rows)
