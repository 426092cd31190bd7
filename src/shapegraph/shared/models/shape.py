"""
Shape graph model.

A ``Shape`` is one element of a diagram canvas: a task, an event, a gateway,
a connector. Shapes form a containment tree through ``child_shapes`` and a
directed graph through ``outgoings``/``incomings`` and ``target``. The two
relations are independent, and neither is kept in sync automatically:
whoever builds the graph wires both sides.
"""

import warnings
from typing import Dict, Iterable, List, Optional

from ..exceptions import MissingBoundsError, PreconditionError
from .geometry import Bounds, Point
from .stencil import StencilType


def _require_resource_id(resource_id: str) -> str:
    if not isinstance(resource_id, str) or not resource_id:
        raise PreconditionError(f"Shape resource id must be a non-empty string, got {resource_id!r}")
    return resource_id


class Shape:
    """
    An element of the canvas, independent of any stencil set.

    Identity is the resource id: two shapes with the same id compare equal
    and hash alike, whatever their other fields hold. Collection-valued
    fields are never ``None``.
    """

    def __init__(self, resource_id: str, stencil: Optional[StencilType] = None):
        """
        Construct a new shape.

        Args:
            resource_id: Unique shape id, generated by the editor
            stencil: Stencil descriptor of the shape, if known

        Raises:
            PreconditionError: If resource_id is empty
        """
        self._resource_id = _require_resource_id(resource_id)
        self.stencil = stencil
        self._properties: Dict[str, str] = {}
        self._child_shapes: List["Shape"] = []
        self._outgoings: List["Shape"] = []
        self._incomings: List["Shape"] = []
        self._dockers: List[Point] = []
        self._glossary_ids: List[str] = []
        self.bounds: Optional[Bounds] = None
        self.target: Optional["Shape"] = None
        self.parent: Optional["Shape"] = None

    # --- identity -----------------------------------------------------------
    @property
    def resource_id(self) -> str:
        return self._resource_id

    @resource_id.setter
    def resource_id(self, resource_id: str) -> None:
        self._resource_id = _require_resource_id(resource_id)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Shape):
            return NotImplemented
        return self._resource_id == other._resource_id

    def __hash__(self) -> int:
        return hash(self._resource_id)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(resource_id={self._resource_id!r}, stencil_id={self.stencil_id!r})"

    # --- stencil ------------------------------------------------------------
    @property
    def stencil_id(self) -> Optional[str]:
        """Stencil id of the shape, or None if the stencil is undefined."""
        if self.stencil is not None:
            return self.stencil.id
        return None

    # --- properties ---------------------------------------------------------
    @property
    def properties(self) -> Dict[str, str]:
        return self._properties

    @properties.setter
    def properties(self, properties: Optional[Dict[str, str]]) -> None:
        self._properties = properties if properties is not None else {}

    def get_property(self, name: str) -> Optional[str]:
        """Value of the named property, or None if it is unset."""
        return self._properties.get(name)

    def put_property(self, name: str, value: str) -> Optional[str]:
        """
        Set or overwrite a property.

        Returns:
            The previous value, or None if the property was unset
        """
        previous = self._properties.get(name)
        self._properties[name] = value
        return previous

    # --- containment --------------------------------------------------------
    @property
    def child_shapes(self) -> List["Shape"]:
        """
        Shapes directly contained in this shape.

        Appending a shape here does not set its ``parent``.
        """
        return self._child_shapes

    @child_shapes.setter
    def child_shapes(self, child_shapes: Optional[Iterable["Shape"]]) -> None:
        self._child_shapes = list(child_shapes) if child_shapes is not None else []

    # --- adjacency ----------------------------------------------------------
    @property
    def outgoings(self) -> List["Shape"]:
        return self._outgoings

    @outgoings.setter
    def outgoings(self, outgoings: Optional[Iterable["Shape"]]) -> None:
        self._outgoings = list(outgoings) if outgoings is not None else []

    def add_outgoing(self, shape: "Shape") -> bool:
        """Append a shape to the outgoings. The other side's incomings are untouched."""
        self._outgoings.append(shape)
        return True

    @property
    def outgoing(self) -> List["Shape"]:
        """Deprecated alias of ``outgoings``."""
        warnings.warn("Shape.outgoing is deprecated, use Shape.outgoings", DeprecationWarning, stacklevel=2)
        return self.outgoings

    @outgoing.setter
    def outgoing(self, outgoing: Optional[Iterable["Shape"]]) -> None:
        warnings.warn("Shape.outgoing is deprecated, use Shape.outgoings", DeprecationWarning, stacklevel=2)
        self.outgoings = outgoing

    @property
    def incomings(self) -> List["Shape"]:
        return self._incomings

    @incomings.setter
    def incomings(self, incomings: Optional[Iterable["Shape"]]) -> None:
        self._incomings = list(incomings) if incomings is not None else []

    def add_incoming(self, shape: "Shape") -> bool:
        self._incomings.append(shape)
        return True

    # --- dockers ------------------------------------------------------------
    @property
    def dockers(self) -> List[Point]:
        """Routing waypoints; usually only edges have dockers."""
        return self._dockers

    @dockers.setter
    def dockers(self, dockers: Optional[Iterable[Point]]) -> None:
        # Always a fresh list, never the caller's sequence
        self._dockers = list(dockers) if dockers is not None else []

    # --- glossary -----------------------------------------------------------
    @property
    def glossary_ids(self) -> List[str]:
        return self._glossary_ids

    @glossary_ids.setter
    def glossary_ids(self, glossary_ids: Optional[Iterable[str]]) -> None:
        self._glossary_ids = list(glossary_ids) if glossary_ids is not None else []

    def add_glossary_id(self, glossary_id: str) -> bool:
        self._glossary_ids.append(glossary_id)
        return True

    # --- geometry -----------------------------------------------------------
    @property
    def upper_left(self) -> Optional[Point]:
        if self.bounds is not None:
            return self.bounds.upper_left
        return None

    @property
    def lower_right(self) -> Optional[Point]:
        if self.bounds is not None:
            return self.bounds.lower_right
        return None

    def _require_bounds(self) -> Bounds:
        if self.bounds is None:
            raise MissingBoundsError(f"Shape {self._resource_id!r} has no bounds")
        return self.bounds

    @property
    def height(self) -> float:
        """
        Height of the shape's bounds.

        Raises:
            MissingBoundsError: If the shape has no bounds
        """
        return self._require_bounds().height

    @property
    def width(self) -> float:
        """
        Width of the shape's bounds.

        Raises:
            MissingBoundsError: If the shape has no bounds
        """
        return self._require_bounds().width
