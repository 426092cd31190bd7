"""
Geometry value types: canvas points and axis-aligned bounds.
"""

from typing import Any, Dict, Tuple
from pydantic import Field

from .base import BaseModel


class Point(BaseModel):
    """An immutable (x, y) position on the canvas."""

    x: float = Field(..., description="Horizontal coordinate")
    y: float = Field(..., description="Vertical coordinate")

    def __init__(self, x: float, y: float, **data: Any) -> None:
        super().__init__(x=x, y=y, **data)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Point":
        """Build a point from a ``{"x": ..., "y": ...}`` mapping."""
        return cls.model_validate(data)

    def to_dict(self) -> Dict[str, float]:
        return {'x': self.x, 'y': self.y}

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


class Bounds(BaseModel):
    """
    Rectangle spanned by two corner points.

    No ordering between the corners is enforced: a lower-right corner above
    or left of the upper-left corner gives a negative width or height.
    """

    upper_left: Point = Field(..., alias="upperLeft", description="Upper-left corner")
    lower_right: Point = Field(..., alias="lowerRight", description="Lower-right corner")

    def __init__(self, upper_left: Point = None, lower_right: Point = None, **data: Any) -> None:
        if upper_left is not None:
            data['upper_left'] = upper_left
        if lower_right is not None:
            data['lower_right'] = lower_right
        super().__init__(**data)

    @classmethod
    def from_coordinates(cls, x1: float, y1: float, x2: float, y2: float) -> "Bounds":
        """Build bounds from upper-left (x1, y1) and lower-right (x2, y2)."""
        return cls(Point(x1, y1), Point(x2, y2))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Bounds":
        """Build bounds from the editor's ``upperLeft``/``lowerRight`` mapping."""
        return cls.model_validate(data)

    def to_dict(self) -> Dict[str, Dict[str, float]]:
        return {
            'upperLeft': self.upper_left.to_dict(),
            'lowerRight': self.lower_right.to_dict(),
        }

    @property
    def width(self) -> float:
        return self.lower_right.x - self.upper_left.x

    @property
    def height(self) -> float:
        return self.lower_right.y - self.upper_left.y

    @property
    def center(self) -> Point:
        """Center point of the rectangle."""
        return Point(
            (self.upper_left.x + self.lower_right.x) / 2,
            (self.upper_left.y + self.lower_right.y) / 2,
        )
