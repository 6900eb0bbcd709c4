"""Area calculator closed for modification, open for new shapes."""
from typing import Iterable

from solidkit.domain.shapes.shape import Shape
import structlog

logger = structlog.get_logger(__name__)


class AreaCalculator:
    """Delegates to ``Shape.area``; knows no concrete shape."""

    def area(self, shape: Shape) -> float:
        result = shape.area()
        logger.debug(f"Area of {shape.name}: {result}")
        return result

    def total_area(self, shapes: Iterable[Shape]) -> float:
        return sum(self.area(shape) for shape in shapes)
