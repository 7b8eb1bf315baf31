"""Edge ordering policies.

Both policies order edges by ascending distance and break ties by the
ascending ``(u, v)`` pair, so results never depend on how an edge set
happens to be laid out in memory.
"""

from __future__ import annotations

import time

import numpy as np

from pointlink.audit.logger import AuditLogger
from pointlink.edges.models import EdgeSet

__all__ = ["select_smallest", "order_all"]

STAGE_NAME = "edge_selection"


def _stable_order(edges: EdgeSet) -> EdgeSet:
    """Sort by distance, then ``(u, v)``."""
    order = np.lexsort((edges.v, edges.u, edges.dist))
    return edges.take(order)


def select_smallest(
    edges: EdgeSet,
    k: int,
    *,
    logger: AuditLogger | None = None,
) -> EdgeSet:
    """Select the ``k`` shortest edges without sorting the whole set.

    A linear-time partition finds the k-th smallest distance; every edge
    below it is kept, plus as many edges tied at it as needed, taken in
    ``(u, v)`` order. Only that prefix is then sorted. The result is
    identical to the first ``k`` entries of :func:`order_all`.

    Parameters
    ----------
    edges : EdgeSet
        All candidate edges.
    k : int
        Number of edges wanted; clamped to ``[0, len(edges)]``.
    logger : AuditLogger | None, optional
        Audit logger for observability events.

    Returns
    -------
    EdgeSet
        The ``min(k, len(edges))`` shortest edges, ascending.
    """
    start = time.perf_counter()
    total = len(edges)
    k = max(0, min(k, total))

    if logger:
        logger.stage_started(STAGE_NAME, expected_items=total)

    if k == total:
        selected = _stable_order(edges)
    elif k == 0:
        selected = EdgeSet.empty()
    else:
        kth = np.partition(edges.dist, k - 1)[k - 1]
        below = np.flatnonzero(edges.dist < kth)
        tied = np.flatnonzero(edges.dist == kth)
        tied = tied[np.lexsort((edges.v[tied], edges.u[tied]))]
        keep = np.concatenate((below, tied[: k - len(below)]))
        selected = _stable_order(edges.take(keep))

    if logger:
        logger.stage_finished(
            stage=STAGE_NAME,
            duration_seconds=time.perf_counter() - start,
            counters={"edges_total": total, "edges_selected": len(selected)},
        )

    return selected


def order_all(
    edges: EdgeSet,
    *,
    logger: AuditLogger | None = None,
) -> EdgeSet:
    """Sort every edge ascending by distance.

    Parameters
    ----------
    edges : EdgeSet
        All candidate edges.
    logger : AuditLogger | None, optional
        Audit logger for observability events.

    Returns
    -------
    EdgeSet
        All edges, ascending by distance then ``(u, v)``.
    """
    start = time.perf_counter()

    if logger:
        logger.stage_started(STAGE_NAME, expected_items=len(edges))

    ordered = _stable_order(edges)

    if logger:
        logger.stage_finished(
            stage=STAGE_NAME,
            duration_seconds=time.perf_counter() - start,
            counters={"edges_total": len(edges), "edges_selected": len(ordered)},
        )

    return ordered
