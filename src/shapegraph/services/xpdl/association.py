"""
XPDL association adapter.
"""

from typing import Any, Dict, Optional

from lxml import etree

from ...shared import XPDLConversionError
from .base import XPDLThingConnectorGraphics, set_attribute, opt_string


ASSOCIATION_STENCILS = (
    "Association_Undirected",
    "Association_Unidirectional",
    "Association_Bidirectional",
)


class XPDLAssociation(XPDLThingConnectorGraphics):
    """``<Association Direction=... Source=... Target=...>`` connector."""

    ELEMENT_NAME = "Association"

    def __init__(
        self,
        id: Optional[str] = None,
        name: Optional[str] = None,
        direction: Optional[str] = None,
        source: Optional[str] = None,
        target: Optional[str] = None,
    ):
        super().__init__(id, name)
        self.direction = direction
        self.source = source
        self.target = target

    @staticmethod
    def handles_stencil(stencil: Optional[str]) -> bool:
        return stencil in ASSOCIATION_STENCILS

    # ========== JSON ==========

    def read_json(self, model_element: Dict[str, Any]) -> None:
        super().read_json(model_element)
        if 'direction' in model_element:
            self.read_json_direction(model_element)
        if 'source' in model_element:
            self.read_json_source(model_element)
        if 'target' in model_element:
            self.read_json_target(model_element)

    def read_json_direction(self, model_element: Dict[str, Any]) -> None:
        self.direction = opt_string(model_element, 'direction')

    def read_json_source(self, model_element: Dict[str, Any]) -> None:
        self.source = opt_string(model_element, 'source')

    def read_json_target(self, model_element: Dict[str, Any]) -> None:
        """
        Read the target shape's resource id.

        Raises:
            XPDLConversionError: If the element has no ``target`` object
        """
        target = model_element.get('target')
        if not isinstance(target, dict):
            raise XPDLConversionError(f"Association target must be a JSON object, got {target!r}")
        self.target = opt_string(target, 'resourceId')

    # ========== XML ==========

    def _write_attributes(self, element: etree._Element) -> None:
        super()._write_attributes(element)
        set_attribute(element, 'Direction', self.direction)
        set_attribute(element, 'Source', self.source)
        set_attribute(element, 'Target', self.target)

    def _read_attributes(self, element: etree._Element) -> None:
        super()._read_attributes(element)
        self.direction = element.get('Direction')
        self.source = element.get('Source')
        self.target = element.get('Target')
