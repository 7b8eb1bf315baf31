"""Disjoint-set clustering over nearest point pairs.

This module merges the shortest edges of the complete point graph using a
Union-Find (DSU) forest, either for a fixed budget of edges or until the
whole point set is connected.
"""

from pointlink.clustering.driver import (
    DEFAULT_BUDGET,
    bounded_clustering,
    complete_connectivity,
    completing_x_product,
    largest_clusters_product,
)
from pointlink.clustering.models import ClusterSummary, CompletingMerge
from pointlink.clustering.union_find import DisjointSetForest

__all__ = [
    "DEFAULT_BUDGET",
    "ClusterSummary",
    "CompletingMerge",
    "DisjointSetForest",
    "bounded_clustering",
    "complete_connectivity",
    "completing_x_product",
    "largest_clusters_product",
]
