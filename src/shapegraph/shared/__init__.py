"""
Shared components for shapegraph.

Contains the shape graph model, configuration, the exception hierarchy and
logging infrastructure used by every service.
"""

from .models import *
from .config import *
from .exceptions import *
from .infrastructure import *

__all__ = [
    # From models
    "BaseModel", "Point", "Bounds", "StencilType", "StencilSet",
    "Shape", "Diagram",

    # From config
    "Settings", "get_settings", "XPDL_21_NAMESPACE",

    # From exceptions
    "ShapeGraphError", "ConfigurationError", "PreconditionError",
    "MissingBoundsError", "DiagramImportError", "MalformedGeometryError",
    "UnresolvedReferenceError", "DuplicateResourceIdError",
    "ExportError", "XPDLConversionError",

    # From infrastructure
    "get_logger", "setup_logging",
]
