"""
NetworkX view of a shape graph.

Builds a directed graph from a diagram for analysis and reporting: flow
edges from ``outgoings`` and, optionally, containment edges from
``child_shapes``.
"""

from collections import Counter
from typing import Any, Dict, List, Tuple

import networkx as nx

from ...shared import Diagram, Shape


def to_networkx(diagram: Diagram, include_containment: bool = False) -> nx.DiGraph:
    """Directed graph keyed by resource id, with a ``stencil`` node attribute."""
    graph = nx.DiGraph(resource_id=diagram.resource_id)
    for shape in diagram.iter_shapes():
        graph.add_node(shape.resource_id, stencil=shape.stencil_id)

    for shape in diagram.iter_shapes():
        for out in shape.outgoings:
            graph.add_edge(shape.resource_id, out.resource_id, kind="flow")
        if include_containment:
            for child in shape.child_shapes:
                graph.add_edge(shape.resource_id, child.resource_id, kind="containment")
    return graph


def find_asymmetric_edges(diagram: Diagram) -> List[Tuple[str, str]]:
    """
    Flow edges not mirrored on the other side.

    Returns ``(a, b)`` for every ``b`` in ``a.outgoings`` where ``a`` is not in
    ``b.incomings``. Nothing is repaired.
    """
    pairs = []
    for shape in diagram.iter_shapes():
        for out in shape.outgoings:
            if shape not in out.incomings:
                pairs.append((shape.resource_id, out.resource_id))
    return pairs


def _depth(shape: Shape) -> int:
    if not shape.child_shapes:
        return 0
    return 1 + max(_depth(child) for child in shape.child_shapes)


def summarize(diagram: Diagram) -> Dict[str, Any]:
    """Counts describing a diagram: shapes, flow edges, stencils, nesting depth."""
    graph = to_networkx(diagram)
    stencils = Counter(shape.stencil_id or "<none>" for shape in diagram.iter_shapes())
    return {
        'resource_id': diagram.resource_id,
        'shape_count': graph.number_of_nodes(),
        'flow_edge_count': graph.number_of_edges(),
        'stencils': dict(sorted(stencils.items())),
        'max_depth': _depth(diagram),
        'is_acyclic': nx.is_directed_acyclic_graph(graph),
        'weakly_connected_components': nx.number_weakly_connected_components(graph) if graph.number_of_nodes() else 0,
        'asymmetric_edges': find_asymmetric_edges(diagram),
    }
