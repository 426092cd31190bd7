"""
XPDL export of a shape graph.

Only the parts of the process definition the adapters cover are written:
associations between shapes, and the multi-instance loop attributes of
activities. The result is a ``Package`` element:

    <Package Id="...">
      <Associations><Association .../></Associations>
      <Activities>
        <Activity Id="..." Name="...">
          <Loop LoopType="MultiInstance"><MultiInstance .../></Loop>
        </Activity>
      </Activities>
    </Package>
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from lxml import etree

from ...shared import get_logger, get_settings, Diagram, Shape, ExportError
from .association import XPDLAssociation
from .base import qualify, set_attribute
from .multi_instance import XPDLMultiInstance


MULTI_INSTANCE_LOOP_TYPE = "MultiInstance"


def shape_model_element(shape: Shape) -> Dict[str, Any]:
    """
    Flatten a shape into the JSON model element the adapters read.

    Properties are merged with the shape's id, its routing dockers, its
    ``target`` (falling back to the first outgoing shape) and its ``source``
    (the first incoming shape).
    """
    element: Dict[str, Any] = dict(shape.properties)
    # References come from the graph, never from free-form properties
    element.pop('target', None)
    element.pop('source', None)
    element['resourceId'] = shape.resource_id
    element['dockers'] = list(shape.dockers)

    target = shape.target or (shape.outgoings[0] if shape.outgoings else None)
    if target is not None:
        element['target'] = {'resourceId': target.resource_id}
    if shape.incomings:
        element['source'] = shape.incomings[0].resource_id
    return element


class XPDLExporter:
    """Builds XPDL fragments from a diagram."""

    def __init__(self, namespace: Optional[str] = None):
        """
        Initialize the exporter.

        Args:
            namespace: XPDL namespace for every written element. Defaults to
                the configured namespace.
        """
        self.logger = get_logger(__name__)
        self.settings = get_settings()
        self.namespace = namespace if namespace is not None else self.settings.xpdl_namespace_or_none

    # ========== Adapters ==========

    def associations(self, diagram: Diagram) -> List[XPDLAssociation]:
        """One association per shape drawn with an association stencil."""
        result = []
        for shape in diagram.iter_shapes():
            if not XPDLAssociation.handles_stencil(shape.stencil_id):
                continue
            association = XPDLAssociation()
            association.read_json(shape_model_element(shape))
            result.append(association)
        return result

    def multi_instance(self, shape: Shape) -> Optional[XPDLMultiInstance]:
        """Loop attributes of a shape whose ``looptype`` is ``MultiInstance``."""
        if shape.get_property('looptype') != MULTI_INSTANCE_LOOP_TYPE:
            return None
        multi_instance = XPDLMultiInstance()
        multi_instance.read_json(shape.properties)
        return multi_instance

    # ========== Document ==========

    def export(self, diagram: Diagram) -> etree._Element:
        """Build the ``Package`` element for a diagram."""
        ns = self.namespace
        package = etree.Element(qualify('Package', ns), nsmap={None: ns} if ns else None)
        set_attribute(package, 'Id', diagram.resource_id)
        set_attribute(package, 'Name', diagram.get_property('name'))

        associations_element = etree.SubElement(package, qualify('Associations', ns))
        associations = self.associations(diagram)
        for association in associations:
            associations_element.append(association.to_element(ns))

        activities_element = etree.SubElement(package, qualify('Activities', ns))
        activity_count = 0
        for shape in diagram.iter_shapes():
            multi_instance = self.multi_instance(shape)
            if multi_instance is None:
                continue
            activity = etree.SubElement(activities_element, qualify('Activity', ns))
            set_attribute(activity, 'Id', shape.resource_id)
            set_attribute(activity, 'Name', shape.get_property('name'))
            loop = etree.SubElement(activity, qualify('Loop', ns))
            loop.set('LoopType', MULTI_INSTANCE_LOOP_TYPE)
            loop.append(multi_instance.to_element(ns))
            activity_count += 1

        self.logger.debug(
            f"Exported diagram {diagram.resource_id} to XPDL: "
            f"{len(associations)} associations, {activity_count} multi-instance activities"
        )
        return package

    def to_xml(self, diagram: Diagram) -> bytes:
        return etree.tostring(
            self.export(diagram),
            pretty_print=self.settings.xml_pretty_print,
            encoding=self.settings.xml_encoding,
            xml_declaration=True,
        )

    def write_file(self, diagram: Diagram, path: Union[str, Path]) -> Path:
        """
        Write the XPDL fragment of a diagram.

        Raises:
            ExportError: If the file cannot be written
        """
        path = Path(path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(self.to_xml(diagram))
        except OSError as e:
            raise ExportError(f"Cannot write XPDL to {path}: {e}") from e
        return path
