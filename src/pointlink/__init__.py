"""Nearest-pair clustering of 3-D integer point clouds.

This package provides:
- Data models (pointlink.models) — points and the point store
- Parsing (pointlink.parse) — ``x,y,z`` point list ingestion
- Edges (pointlink.edges) — pairwise edge generation and selection
- Clustering (pointlink.clustering) — disjoint-set forest and drivers
- Engine (pointlink.engine) — timed runs with audit logging
- Audit (pointlink.audit) — structured JSONL event logging
- CLI (pointlink.cli) — command-line interface
- Public API (pointlink.api) — high-level convenience functions
"""

__version__ = "0.1.0"
__license__ = "MIT"

from pointlink.api import (
    PointParseError,
    cluster_product,
    connect_product,
    load_points,
)
from pointlink.models import Point, PointStore

__all__ = [
    "__version__",
    "__license__",
    "Point",
    "PointStore",
    "PointParseError",
    "load_points",
    "cluster_product",
    "connect_product",
]
