"""
Services built on the shape graph model.

- json_io: import from and export to the editor's JSON diagram format
- xpdl: XPDL attribute adapters and fragment export
- analysis: networkx view and diagram summaries
"""

from .json_io import DiagramBuilder, DiagramSerializer
from .xpdl import XPDLAssociation, XPDLMultiInstance, XPDLExporter
from .analysis import to_networkx, summarize

__all__ = [
    "DiagramBuilder",
    "DiagramSerializer",
    "XPDLAssociation",
    "XPDLMultiInstance",
    "XPDLExporter",
    "to_networkx",
    "summarize",
]
