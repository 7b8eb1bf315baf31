"""Pairwise edge generation and ordering.

The edge generator derives the complete squared-distance graph over a
point store; the selector orders it, either fully or by keeping only the
k shortest edges.
"""

from pointlink.edges.generator import generate_edges, squared_distance
from pointlink.edges.models import Edge, EdgeSet, edge_count
from pointlink.edges.selector import order_all, select_smallest

__all__ = [
    "Edge",
    "EdgeSet",
    "edge_count",
    "generate_edges",
    "squared_distance",
    "order_all",
    "select_smallest",
]
