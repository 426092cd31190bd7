"""
JSON serializer: writes a shape graph back into the editor's diagram format.
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ...shared import get_logger, get_settings, Diagram, Shape, ExportError


class DiagramSerializer:
    """
    Serializes diagrams to the nested JSON structure the editor reads.

    Property values are written as strings: the importer keeps non-string
    JSON values as their JSON text, so `false` comes back as `"false"`.
    """

    def __init__(self, indent: Optional[int] = None):
        self.logger = get_logger(__name__)
        self.indent = indent if indent is not None else get_settings().json_indent

    def shape_to_dict(self, shape: Shape) -> Dict[str, Any]:
        """Convert one shape and its descendants to a JSON-ready dict."""
        data: Dict[str, Any] = {
            'resourceId': shape.resource_id,
            'properties': dict(shape.properties),
            'childShapes': [self.shape_to_dict(child) for child in shape.child_shapes],
            'outgoing': [{'resourceId': out.resource_id} for out in shape.outgoings],
        }
        if shape.stencil is not None:
            data['stencil'] = shape.stencil.to_dict()
        if shape.bounds is not None:
            data['bounds'] = shape.bounds.to_dict()
        if shape.dockers:
            data['dockers'] = [docker.to_dict() for docker in shape.dockers]
        if shape.target is not None:
            data['target'] = {'resourceId': shape.target.resource_id}
        if shape.glossary_ids:
            data['glossaryIds'] = list(shape.glossary_ids)
        return data

    def to_dict(self, diagram: Diagram) -> Dict[str, Any]:
        """Convert a whole diagram, including stencil set information."""
        data = self.shape_to_dict(diagram)
        if diagram.stencilset is not None:
            data['stencilset'] = diagram.stencilset.to_dict()
        data['ssextensions'] = list(diagram.ssextensions)
        return data

    def to_json(self, diagram: Diagram, indent: Optional[int] = None) -> str:
        indent = indent if indent is not None else self.indent
        return json.dumps(self.to_dict(diagram), indent=indent, ensure_ascii=False)

    def write_file(self, diagram: Diagram, path: Union[str, Path]) -> Path:
        """
        Write a diagram as JSON.

        Returns:
            Path of the written file

        Raises:
            ExportError: If the file cannot be written
        """
        path = Path(path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(self.to_json(diagram), encoding='utf-8')
        except OSError as e:
            raise ExportError(f"Cannot write diagram to {path}: {e}") from e

        self.logger.debug(f"Wrote diagram {diagram.resource_id} to {path}")
        return path
