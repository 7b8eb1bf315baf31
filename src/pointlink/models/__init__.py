"""Shared data types for pointlink.

Domain-specific types live closer to their consumers:
- Edge types → pointlink.edges.models
- Cluster result types → pointlink.clustering.models
"""

from pointlink.models.points import MAX_COORDINATE, Point, PointStore

__all__ = [
    "MAX_COORDINATE",
    "Point",
    "PointStore",
]
