"""
Shared data models for shapegraph.
"""

from .base import BaseModel
from .geometry import Point, Bounds
from .stencil import StencilType, StencilSet
from .shape import Shape
from .diagram import Diagram

__all__ = [
    # Value types
    "BaseModel",
    "Point",
    "Bounds",
    "StencilType",
    "StencilSet",
    # Graph model
    "Shape",
    "Diagram",
]
