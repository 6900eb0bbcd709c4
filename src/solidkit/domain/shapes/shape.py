"""
Shape value objects.

Every shape knows its own area. Concrete shapes register under a type name so
they can be built from plain data (``shape_from_dict``); a new shape is added
by defining and registering a subclass, with no edits to existing code.
"""
import math
from abc import ABC, abstractmethod
from typing import Any, Callable, ClassVar, Dict, List, Type, TypeVar

from pydantic import Field

from solidkit.domain.base.exceptions import UnsupportedShapeError, ValidationError
from solidkit.domain.base.value_object import ValueObject

S = TypeVar("S", bound="Shape")

_SHAPE_TYPES: Dict[str, Type["Shape"]] = {}


class Shape(ValueObject, ABC):
    """Base class for shapes with a closed-form area."""

    kind: ClassVar[str] = "shape"

    @abstractmethod
    def area(self) -> float:
        """Area of the shape."""

    @property
    def name(self) -> str:
        return type(self).__name__


def register_shape(kind: str) -> Callable[[Type[S]], Type[S]]:
    """
    Class decorator registering a shape under a type name.

    Args:
        kind: Type name used in ``shape_from_dict`` payloads

    Returns:
        Decorator that records the class and returns it unchanged
    """
    def decorator(cls: Type[S]) -> Type[S]:
        cls.kind = kind
        _SHAPE_TYPES[kind] = cls
        return cls
    return decorator


def available_shapes() -> List[str]:
    return sorted(_SHAPE_TYPES)


def shape_from_dict(data: Dict[str, Any]) -> "Shape":
    """
    Build a shape from a mapping with a ``type`` key.

    Args:
        data: e.g. ``{"type": "circle", "radius": 2}``

    Returns:
        Shape instance

    Raises:
        ValidationError: If ``type`` is missing
        UnsupportedShapeError: If no shape is registered under ``type``
    """
    fields = dict(data)
    kind = fields.pop("type", None)
    if not kind:
        raise ValidationError("Shape data requires a 'type' field", data)
    if kind not in _SHAPE_TYPES:
        raise UnsupportedShapeError(kind)
    return _SHAPE_TYPES[kind](**fields)


@register_shape("circle")
class Circle(Shape):
    radius: float = Field(..., gt=0)

    def area(self) -> float:
        return math.pi * self.radius ** 2


@register_shape("rectangle")
class Rectangle(Shape):
    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)

    def area(self) -> float:
        return self.width * self.height


@register_shape("triangle")
class Triangle(Shape):
    base: float = Field(..., gt=0)
    height: float = Field(..., gt=0)

    def area(self) -> float:
        return 0.5 * self.base * self.height
