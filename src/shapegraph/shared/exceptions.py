"""
Common exceptions for shapegraph.
"""


class ShapeGraphError(Exception):
    """Base exception for all shapegraph errors."""
    pass


class ConfigurationError(ShapeGraphError):
    """Raised when there are configuration issues."""
    pass


class PreconditionError(ShapeGraphError, ValueError):
    """Raised when a caller violates a model precondition (e.g. empty resource id)."""
    pass


class MissingBoundsError(PreconditionError):
    """Raised when geometry is requested from a shape without bounds."""
    pass


class DiagramImportError(ShapeGraphError):
    """Raised when an external diagram description cannot be imported."""
    pass


class MalformedGeometryError(DiagramImportError):
    """Raised when bounds or dockers in a diagram description are malformed."""
    pass


class UnresolvedReferenceError(DiagramImportError):
    """Raised when an edge or target reference names an unknown resource id."""
    pass


class DuplicateResourceIdError(DiagramImportError):
    """Raised when two shapes of one diagram share a resource id."""
    pass


class ExportError(ShapeGraphError):
    """Raised when a diagram cannot be exported."""
    pass


class XPDLConversionError(ExportError):
    """Raised when XPDL elements cannot be read or written."""
    pass
