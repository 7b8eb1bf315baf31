"""Result models for the two clustering variants."""

import math
from dataclasses import asdict, dataclass
from typing import Any

from pointlink.edges.models import Edge
from pointlink.models import Point

__all__ = ["ClusterSummary", "CompletingMerge", "TOP_CLUSTERS"]

TOP_CLUSTERS = 3


@dataclass(frozen=True)
class ClusterSummary:
    """Outcome of bounded clustering.

    Attributes
    ----------
    sizes : tuple[int, ...]
        Size of every final cluster, largest first.
    edges_considered : int
        Number of shortest edges that were unioned.
    merges : int
        Unions that actually joined two clusters.
    """

    sizes: tuple[int, ...]
    edges_considered: int
    merges: int

    @property
    def top_sizes(self) -> tuple[int, ...]:
        """The (up to) three largest cluster sizes."""
        return self.sizes[:TOP_CLUSTERS]

    @property
    def product(self) -> int:
        """Product of the three largest sizes; 1 when there are none."""
        return math.prod(self.top_sizes)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        data = asdict(self)
        data["sizes"] = list(self.sizes)
        data["product"] = self.product
        return data


@dataclass(frozen=True)
class CompletingMerge:
    """The union that joined the last two components.

    Attributes
    ----------
    edge : Edge
        The merging edge.
    first : Point
        Point at ``edge.u``.
    second : Point
        Point at ``edge.v``.
    edges_examined : int
        Edges tried, including the completing one.
    """

    edge: Edge
    first: Point
    second: Point
    edges_examined: int

    @property
    def x_product(self) -> int:
        """Product of the two endpoints' x coordinates."""
        return self.first.x * self.second.x

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "u": self.edge.u,
            "v": self.edge.v,
            "dist": self.edge.dist,
            "first": list(self.first.as_tuple()),
            "second": list(self.second.as_tuple()),
            "edges_examined": self.edges_examined,
            "x_product": self.x_product,
        }
