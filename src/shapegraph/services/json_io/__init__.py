"""
JSON import and export for the editor's diagram format.
"""

from .builder import DiagramBuilder
from .serializer import DiagramSerializer

__all__ = ["DiagramBuilder", "DiagramSerializer"]
