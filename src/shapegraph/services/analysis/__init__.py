"""
Graph analysis over the shape graph model.
"""

from .graph_view import to_networkx, find_asymmetric_edges, summarize

__all__ = ["to_networkx", "find_asymmetric_edges", "summarize"]
