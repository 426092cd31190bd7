"""
Diagram root shape and its resource id table.
"""

from typing import Dict, Iterator, List, Optional

from ..exceptions import DuplicateResourceIdError
from .shape import Shape
from .stencil import StencilSet, StencilType


class Diagram(Shape):
    """
    The canvas: root of the containment tree.

    A diagram owns the table of every shape drawn on it, keyed by resource
    id. Importers register shapes as they create them and resolve edge
    references through ``get_shape``. The diagram itself is not in its table.
    """

    def __init__(
        self,
        resource_id: str,
        stencil: Optional[StencilType] = None,
        stencilset: Optional[StencilSet] = None,
    ):
        super().__init__(resource_id, stencil)
        self.stencilset = stencilset
        self.ssextensions: List[str] = []
        self._shapes: Dict[str, Shape] = {}

    def register(self, shape: Shape) -> Shape:
        """
        Add a shape to the id table.

        Registering the same shape object twice is a no-op. The diagram's own
        resource id is reserved.

        Raises:
            DuplicateResourceIdError: If a different shape already holds the id
        """
        existing = self._shapes.get(shape.resource_id)
        if shape.resource_id == self.resource_id or (existing is not None and existing is not shape):
            raise DuplicateResourceIdError(
                f"Resource id {shape.resource_id!r} is used by more than one shape"
            )
        self._shapes[shape.resource_id] = shape
        return shape

    def get_shape(self, resource_id: str) -> Optional[Shape]:
        return self._shapes.get(resource_id)

    @property
    def shapes(self) -> List[Shape]:
        """Registered shapes in registration order."""
        return list(self._shapes.values())

    def __contains__(self, resource_id: object) -> bool:
        return resource_id in self._shapes

    def __len__(self) -> int:
        return len(self._shapes)

    def iter_shapes(self) -> Iterator[Shape]:
        """Walk the containment tree in pre-order, the diagram itself excluded."""
        stack = list(reversed(self.child_shapes))
        while stack:
            shape = stack.pop()
            yield shape
            stack.extend(reversed(shape.child_shapes))

    def shapes_with_stencil(self, stencil_id: str) -> List[Shape]:
        return [shape for shape in self.iter_shapes() if shape.stencil_id == stencil_id]
