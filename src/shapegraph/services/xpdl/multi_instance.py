"""
XPDL multi-instance loop adapter.
"""

from typing import Any, Dict, Optional

from lxml import etree

from .base import XMLConvertable, set_attribute, opt_string


class XPDLMultiInstance(XMLConvertable):
    """Looping attributes of a multi-instance activity."""

    ELEMENT_NAME = "MultiInstance"

    def __init__(
        self,
        mi_condition: Optional[str] = None,
        loop_counter: Optional[str] = None,
        mi_ordering: Optional[str] = None,
        mi_flow_condition: Optional[str] = None,
        complex_mi_flow_condition: Optional[str] = None,
    ):
        self.mi_condition = mi_condition
        self.loop_counter = loop_counter
        self.mi_ordering = mi_ordering
        self.mi_flow_condition = mi_flow_condition
        self.complex_mi_flow_condition = complex_mi_flow_condition

    # ========== JSON ==========

    def read_json(self, model_element: Dict[str, Any]) -> None:
        super().read_json(model_element)
        if 'complex_micondition' in model_element:
            self.read_json_complex_micondition(model_element)
        if 'loopcounter' in model_element:
            self.read_json_loopcounter(model_element)
        if 'mi_condition' in model_element:
            self.read_json_mi_condition(model_element)
        if 'mi_flowcondition' in model_element:
            self.read_json_mi_flowcondition(model_element)
        if 'mi_ordering' in model_element:
            self.read_json_mi_ordering(model_element)

    def read_json_complex_micondition(self, model_element: Dict[str, Any]) -> None:
        self.complex_mi_flow_condition = opt_string(model_element, 'complex_micondition')

    def read_json_loopcounter(self, model_element: Dict[str, Any]) -> None:
        self.loop_counter = opt_string(model_element, 'loopcounter')

    def read_json_mi_condition(self, model_element: Dict[str, Any]) -> None:
        self.mi_condition = opt_string(model_element, 'mi_condition')

    def read_json_mi_flowcondition(self, model_element: Dict[str, Any]) -> None:
        self.mi_flow_condition = opt_string(model_element, 'mi_flowcondition')

    def read_json_mi_ordering(self, model_element: Dict[str, Any]) -> None:
        self.mi_ordering = opt_string(model_element, 'mi_ordering')

    # ========== XML ==========

    def _write_attributes(self, element: etree._Element) -> None:
        set_attribute(element, 'MI_Condition', self.mi_condition)
        set_attribute(element, 'LoopCounter', self.loop_counter)
        set_attribute(element, 'MI_Ordering', self.mi_ordering)
        set_attribute(element, 'MI_FlowCondition', self.mi_flow_condition)
        set_attribute(element, 'ComplexMI_FlowCondition', self.complex_mi_flow_condition)

    def _read_attributes(self, element: etree._Element) -> None:
        self.mi_condition = element.get('MI_Condition')
        self.loop_counter = element.get('LoopCounter')
        self.mi_ordering = element.get('MI_Ordering')
        self.mi_flow_condition = element.get('MI_FlowCondition')
        self.complex_mi_flow_condition = element.get('ComplexMI_FlowCondition')
