"""Order entity."""
from pydantic import Field

from solidkit.domain.base.entity import Entity


class Order(Entity):
    """A customer order identified by ``order_id``."""

    order_id: str = Field(..., min_length=1)
    customer: str = Field(..., min_length=1)
    amount: float = Field(..., gt=0)

    def __init__(self, **data):
        data["id"] = data.get("order_id")
        super().__init__(**data)
