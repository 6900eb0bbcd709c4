"""Calculator that switches on concrete shape types."""
import math

from solidkit.domain.base.exceptions import UnsupportedShapeError
from solidkit.domain.shapes.shape import Circle, Rectangle, Triangle


class LegacyShapeCalculator:
    """
    Every new shape needs another branch here.

    Shapes the calculator was never taught about fail at runtime.
    """

    def calculate_area(self, shape) -> float:
        if isinstance(shape, Circle):
            return math.pi * shape.radius * shape.radius
        elif isinstance(shape, Rectangle):
            return shape.width * shape.height
        elif isinstance(shape, Triangle):
            return 0.5 * shape.base * shape.height
        raise UnsupportedShapeError(type(shape).__name__)
