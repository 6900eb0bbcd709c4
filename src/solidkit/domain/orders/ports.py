"""Domain port for order persistence."""
from abc import ABC, abstractmethod
from typing import Optional

from solidkit.domain.orders.order import Order


class Database(ABC):
    """Abstraction the order service depends on; backends implement it."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human readable backend name."""

    @abstractmethod
    def connect(self) -> str:
        """Open the connection and describe it."""

    @abstractmethod
    def save(self, order: Order) -> str:
        """Persist an order and return a confirmation message."""

    @abstractmethod
    def find(self, order_id: str) -> Optional[Order]:
        """Look up an order, None when absent."""
