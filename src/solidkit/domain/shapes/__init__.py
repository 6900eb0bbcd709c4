"""Shapes bounded context - Open/Closed Principle."""
from .calculator import AreaCalculator
from .legacy import LegacyShapeCalculator
from .shape import (
    Circle,
    Rectangle,
    Shape,
    Triangle,
    available_shapes,
    register_shape,
    shape_from_dict,
)

__all__ = [
    "Shape",
    "Circle",
    "Rectangle",
    "Triangle",
    "AreaCalculator",
    "LegacyShapeCalculator",
    "register_shape",
    "shape_from_dict",
    "available_shapes",
]
