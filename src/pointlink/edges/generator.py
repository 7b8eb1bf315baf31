"""Complete pairwise edge generation.

Every unordered pair of points becomes one edge weighted by squared
Euclidean distance. This is the O(n^2) stage of the pipeline in both time
and memory, so the output arrays are allocated once at their final size
``n(n-1)/2`` and filled row by row.
"""

from __future__ import annotations

import time

import numpy as np

from pointlink.audit.logger import AuditLogger
from pointlink.edges.models import EdgeSet, edge_count
from pointlink.models import Point, PointStore

__all__ = ["generate_edges", "squared_distance"]

STAGE_NAME = "edge_generation"


def squared_distance(a: Point, b: Point) -> int:
    """Squared Euclidean distance between two points.

    No square root is taken; only the ordering of distances matters.
    """
    dx = a.x - b.x
    dy = a.y - b.y
    dz = a.z - b.z
    return dx * dx + dy * dy + dz * dz


def generate_edges(
    store: PointStore,
    *,
    logger: AuditLogger | None = None,
) -> EdgeSet:
    """Generate one edge per unordered pair ``(i, j)``, ``i < j``.

    Parameters
    ----------
    store : PointStore
        Input points.
    logger : AuditLogger | None, optional
        Audit logger for observability events.

    Returns
    -------
    EdgeSet
        Exactly ``n(n-1)/2`` edges in lexicographic ``(i, j)`` order.
    """
    start = time.perf_counter()
    n = len(store)
    total = edge_count(n)

    if logger:
        logger.stage_started(STAGE_NAME, expected_items=total)

    u = np.empty(total, dtype=np.intp)
    v = np.empty(total, dtype=np.intp)
    dist = np.empty(total, dtype=np.int64)

    coords = store.coordinates
    offset = 0
    for i in range(n - 1):
        # Row i holds pairs (i, i+1) .. (i, n-1)
        width = n - 1 - i
        row = slice(offset, offset + width)
        diff = coords[i + 1 :] - coords[i]
        u[row] = i
        v[row] = np.arange(i + 1, n, dtype=np.intp)
        dist[row] = np.einsum("ij,ij->i", diff, diff)
        offset += width

    edges = EdgeSet(u=u, v=v, dist=dist)

    if logger:
        logger.stage_finished(
            stage=STAGE_NAME,
            duration_seconds=time.perf_counter() - start,
            counters={"points": n, "edges_total": total},
        )

    return edges
