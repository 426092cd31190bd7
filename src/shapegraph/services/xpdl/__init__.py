"""
XPDL adapters for the shape graph model.
"""

from .base import XMLConvertable, XPDLThing, XPDLThingConnectorGraphics
from .association import XPDLAssociation, ASSOCIATION_STENCILS
from .multi_instance import XPDLMultiInstance
from .exporter import XPDLExporter, shape_model_element

__all__ = [
    "XMLConvertable",
    "XPDLThing",
    "XPDLThingConnectorGraphics",
    "XPDLAssociation",
    "ASSOCIATION_STENCILS",
    "XPDLMultiInstance",
    "XPDLExporter",
    "shape_model_element",
]
