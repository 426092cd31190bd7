"""
shapegraph - shape graph model for a diagram-editing server.
"""

__version__ = "1.0.0"

# Re-export main components for easy access
from .shared.config.settings import get_settings
from .shared.models import Point, Bounds, StencilType, StencilSet, Shape, Diagram
from .shared.exceptions import ShapeGraphError, PreconditionError, MissingBoundsError

__all__ = [
    "get_settings",
    "Point",
    "Bounds",
    "StencilType",
    "StencilSet",
    "Shape",
    "Diagram",
    "ShapeGraphError",
    "PreconditionError",
    "MissingBoundsError",
]
