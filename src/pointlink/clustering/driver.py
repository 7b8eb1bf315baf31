"""Cluster driver: turns ordered edges into clusters.

Two variants share the same forest:

- bounded clustering unions a fixed budget of the globally shortest edges
  and reports the largest cluster sizes;
- completion detection unions edges shortest first until a single
  component remains and reports the pair that completed it.
"""

from __future__ import annotations

import time

from pointlink.audit.logger import AuditLogger
from pointlink.clustering.models import ClusterSummary, CompletingMerge
from pointlink.clustering.union_find import DisjointSetForest
from pointlink.edges import generate_edges, order_all, select_smallest
from pointlink.models import PointStore

__all__ = [
    "DEFAULT_BUDGET",
    "bounded_clustering",
    "complete_connectivity",
    "largest_clusters_product",
    "completing_x_product",
]

DEFAULT_BUDGET = 1000


def bounded_clustering(
    store: PointStore,
    budget: int = DEFAULT_BUDGET,
    *,
    logger: AuditLogger | None = None,
) -> ClusterSummary:
    """Union the ``budget`` shortest edges and summarise the clusters.

    Every selected edge is unioned whether or not its endpoints are
    already joined.

    Parameters
    ----------
    store : PointStore
        Input points.
    budget : int, optional
        Number of shortest edges to union, clamped to the edge count.
    logger : AuditLogger | None, optional
        Audit logger for observability events.

    Returns
    -------
    ClusterSummary
        Final cluster sizes, largest first.
    """
    edges = generate_edges(store, logger=logger)
    selected = select_smallest(edges, budget, logger=logger)

    start = time.perf_counter()
    if logger:
        logger.stage_started("clustering", expected_items=len(selected))

    forest = DisjointSetForest(len(store))
    merges = 0
    for u, v in selected.pairs():
        if forest.union(u, v):
            merges += 1

    sizes = sorted(forest.component_sizes(), reverse=True)
    summary = ClusterSummary(
        sizes=tuple(sizes),
        edges_considered=len(selected),
        merges=merges,
    )

    if logger:
        logger.stage_finished(
            stage="clustering",
            duration_seconds=time.perf_counter() - start,
            counters={
                "edges_considered": summary.edges_considered,
                "merges": merges,
                "components": forest.num_components,
            },
        )

    return summary


def complete_connectivity(
    store: PointStore,
    *,
    logger: AuditLogger | None = None,
) -> CompletingMerge | None:
    """Union edges shortest first until every point is in one component.

    Parameters
    ----------
    store : PointStore
        Input points.
    logger : AuditLogger | None, optional
        Audit logger for observability events.

    Returns
    -------
    CompletingMerge | None
        The union that left a single component, or None when the store
        has fewer than two points and no union can complete it.
    """
    n = len(store)
    if n < 2:
        if logger:
            logger.event(
                "completion_not_applicable",
                data={"points": n},
                level="WARN",
                stage="connectivity",
            )
        return None

    edges = order_all(generate_edges(store, logger=logger), logger=logger)

    start = time.perf_counter()
    if logger:
        logger.stage_started("connectivity", expected_items=len(edges))

    forest = DisjointSetForest(n)
    completing: CompletingMerge | None = None
    for examined, edge in enumerate(edges, start=1):
        if forest.union(edge.u, edge.v) and forest.num_components == 1:
            completing = CompletingMerge(
                edge=edge,
                first=store[edge.u],
                second=store[edge.v],
                edges_examined=examined,
            )
            break

    if logger:
        logger.stage_finished(
            stage="connectivity",
            duration_seconds=time.perf_counter() - start,
            counters={
                "edges_examined": completing.edges_examined if completing else 0,
                "components": forest.num_components,
            },
        )

    return completing


def largest_clusters_product(store: PointStore, budget: int = DEFAULT_BUDGET) -> int:
    """Product of the three largest cluster sizes after bounded clustering."""
    return bounded_clustering(store, budget).product


def completing_x_product(store: PointStore) -> int | None:
    """Product of the completing pair's x coordinates, None if not applicable."""
    merge = complete_connectivity(store)
    return merge.x_product if merge is not None else None
