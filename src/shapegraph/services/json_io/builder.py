"""
JSON importer: builds a shape graph from the editor's diagram description.

The editor sends one nested object per diagram. Every node carries a
``resourceId``, a ``stencil`` descriptor, free-form ``properties``,
``childShapes`` and, for connectors, ``outgoing``/``target`` references by
id plus routing ``dockers``. Building happens in two passes: shapes and
containment first, then edge references resolved through the diagram's id
table.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pydantic import ValidationError

from ...shared import (
    get_logger, get_settings,
    Diagram, Shape, Bounds, Point, StencilSet, StencilType,
    DiagramImportError, MalformedGeometryError, UnresolvedReferenceError,
)


class DiagramBuilder:
    """
    Builds ``Diagram`` instances from JSON payloads.

    The builder wires both sides of every relation it creates: a child gets
    its ``parent`` set, and every resolved outgoing edge is mirrored in the
    target's ``incomings``.
    """

    def __init__(self, strict_references: Optional[bool] = None):
        """
        Initialize the builder.

        Args:
            strict_references: Fail on unknown edge references instead of
                skipping them. Defaults to the configured value.
        """
        self.logger = get_logger(__name__)
        if strict_references is None:
            strict_references = get_settings().strict_references
        self.strict_references = strict_references

    # ========== Public Interface ==========

    def parse_json(self, text: Union[str, bytes]) -> Diagram:
        """Parse a JSON document into a diagram."""
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise DiagramImportError(f"Invalid diagram JSON: {e}") from e
        return self.build(data)

    def parse_file(self, path: Union[str, Path]) -> Diagram:
        """Read and parse a JSON diagram file."""
        path = Path(path)
        self.logger.debug(f"Reading diagram from {path}")
        return self.parse_json(path.read_text(encoding='utf-8'))

    def build(self, data: Dict[str, Any]) -> Diagram:
        """
        Build a diagram from an already decoded JSON object.

        Raises:
            DiagramImportError: If the payload is not a valid diagram description
        """
        if not isinstance(data, dict):
            raise DiagramImportError(f"Diagram description must be a JSON object, got {type(data).__name__}")

        diagram = Diagram(self._read_resource_id(data), self._read_stencil(data))
        diagram.stencilset = self._read_stencilset(data)
        diagram.ssextensions = [str(ext) for ext in self._read_list(data, 'ssextensions')]
        self._populate(diagram, data)

        # Pass 1: shapes and containment
        pending: List[tuple] = [(diagram, data)]
        self._build_children(diagram, diagram, data, pending)

        # Pass 2: edges and targets
        edge_count = 0
        for shape, shape_data in pending:
            edge_count += self._wire_references(diagram, shape, shape_data)

        self.logger.debug(
            f"Imported diagram {diagram.resource_id}: "
            f"{len(diagram)} shapes, {edge_count} edges"
        )
        return diagram

    # ========== Pass 1 ==========

    def _build_children(self, diagram: Diagram, parent: Shape, data: Dict[str, Any], pending: List[tuple]) -> None:
        for child_data in self._read_list(data, 'childShapes'):
            if not isinstance(child_data, dict):
                raise DiagramImportError(
                    f"Child shapes of {parent.resource_id!r} must be JSON objects"
                )
            child = Shape(self._read_resource_id(child_data), self._read_stencil(child_data))
            self._populate(child, child_data)

            diagram.register(child)
            parent.child_shapes.append(child)
            child.parent = parent

            pending.append((child, child_data))
            self._build_children(diagram, child, child_data, pending)

    def _populate(self, shape: Shape, data: Dict[str, Any]) -> None:
        shape.properties = self._read_properties(data)
        shape.bounds = self._read_bounds(shape, data)
        shape.dockers = self._read_dockers(shape, data)
        shape.glossary_ids = [str(gid) for gid in self._read_list(data, 'glossaryIds')]

    def _read_resource_id(self, data: Dict[str, Any]) -> str:
        resource_id = data.get('resourceId')
        if not isinstance(resource_id, str) or not resource_id:
            raise DiagramImportError(f"Shape without a valid resourceId: {resource_id!r}")
        return resource_id

    def _read_stencil(self, data: Dict[str, Any]) -> Optional[StencilType]:
        stencil = data.get('stencil')
        if stencil is None:
            return None
        if not isinstance(stencil, dict) or not stencil.get('id'):
            raise DiagramImportError(f"Invalid stencil descriptor: {stencil!r}")
        return StencilType(str(stencil['id']))

    def _read_stencilset(self, data: Dict[str, Any]) -> Optional[StencilSet]:
        stencilset = data.get('stencilset')
        if stencilset is None:
            return None
        try:
            return StencilSet.model_validate(stencilset)
        except ValidationError as e:
            raise DiagramImportError(f"Invalid stencilset: {e}") from e

    def _read_properties(self, data: Dict[str, Any]) -> Dict[str, str]:
        raw = data.get('properties') or {}
        if not isinstance(raw, dict):
            raise DiagramImportError(f"Properties must be a JSON object, got {type(raw).__name__}")
        return {str(name): self._property_value(value) for name, value in raw.items()}

    @staticmethod
    def _property_value(value: Any) -> str:
        if isinstance(value, str):
            return value
        if value is None:
            return ""
        # Nested objects, numbers and booleans are kept as their JSON text
        return json.dumps(value)

    def _read_bounds(self, shape: Shape, data: Dict[str, Any]) -> Optional[Bounds]:
        raw = data.get('bounds')
        if raw is None:
            return None
        try:
            return Bounds.from_dict(raw)
        except ValidationError as e:
            raise MalformedGeometryError(f"Malformed bounds on {shape.resource_id!r}: {e}") from e

    def _read_dockers(self, shape: Shape, data: Dict[str, Any]) -> List[Point]:
        try:
            return [Point.from_dict(raw) for raw in self._read_list(data, 'dockers')]
        except ValidationError as e:
            raise MalformedGeometryError(f"Malformed docker on {shape.resource_id!r}: {e}") from e

    @staticmethod
    def _read_list(data: Dict[str, Any], key: str) -> List[Any]:
        value = data.get(key)
        if value is None:
            return []
        if not isinstance(value, list):
            raise DiagramImportError(f"'{key}' must be a JSON array, got {type(value).__name__}")
        return value

    # ========== Pass 2 ==========

    def _wire_references(self, diagram: Diagram, shape: Shape, data: Dict[str, Any]) -> int:
        edges = 0
        for reference in self._read_list(data, 'outgoing'):
            target = self._resolve(diagram, shape, reference, 'outgoing')
            if target is None:
                continue
            shape.add_outgoing(target)
            target.add_incoming(shape)
            edges += 1

        if data.get('target') is not None:
            shape.target = self._resolve(diagram, shape, data['target'], 'target')
        return edges

    def _resolve(self, diagram: Diagram, shape: Shape, reference: Any, kind: str) -> Optional[Shape]:
        if not isinstance(reference, dict) or not reference.get('resourceId'):
            raise DiagramImportError(f"Invalid {kind} reference on {shape.resource_id!r}: {reference!r}")

        resource_id = reference['resourceId']
        resolved = diagram.get_shape(resource_id)
        if resolved is None:
            message = f"Shape {shape.resource_id!r} has {kind} reference to unknown id {resource_id!r}"
            if self.strict_references:
                raise UnresolvedReferenceError(message)
            self.logger.warning(f"{message}, skipping")
        return resolved
