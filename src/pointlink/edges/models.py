"""Data models for pairwise edges."""

from collections.abc import Iterator
from dataclasses import dataclass

import numpy as np
import numpy.typing as npt

__all__ = ["Edge", "EdgeSet", "edge_count"]

IndexArray = npt.NDArray[np.intp]
DistArray = npt.NDArray[np.int64]


def edge_count(n: int) -> int:
    """Number of unordered pairs over ``n`` points, ``n(n-1)/2``."""
    return n * (n - 1) // 2 if n > 1 else 0


@dataclass(frozen=True, slots=True)
class Edge:
    """Unordered pair of point indices with their squared distance.

    Attributes
    ----------
    u : int
        Smaller point index.
    v : int
        Larger point index.
    dist : int
        Squared Euclidean distance between the two points.
    """

    u: int
    v: int
    dist: int


@dataclass(frozen=True, eq=False)
class EdgeSet:
    """Columnar edge container.

    Edges are stored as three parallel arrays rather than a list of
    ``Edge`` objects; ``Edge`` values are materialised only on iteration.

    Attributes
    ----------
    u : IndexArray
        First endpoint of each edge.
    v : IndexArray
        Second endpoint of each edge (``u[k] < v[k]``).
    dist : DistArray
        Squared distance of each edge.
    """

    u: IndexArray
    v: IndexArray
    dist: DistArray

    def __post_init__(self) -> None:
        if not len(self.u) == len(self.v) == len(self.dist):
            raise ValueError(
                f"Edge columns differ in length: {len(self.u)}, {len(self.v)}, {len(self.dist)}"
            )

    @classmethod
    def empty(cls) -> "EdgeSet":
        """Create an edge set with no edges."""
        return cls(
            u=np.empty(0, dtype=np.intp),
            v=np.empty(0, dtype=np.intp),
            dist=np.empty(0, dtype=np.int64),
        )

    def __len__(self) -> int:
        return len(self.dist)

    def __iter__(self) -> Iterator[Edge]:
        for u, v, dist in zip(self.u.tolist(), self.v.tolist(), self.dist.tolist(), strict=True):
            yield Edge(u, v, dist)

    def __getitem__(self, index: int) -> Edge:
        return Edge(int(self.u[index]), int(self.v[index]), int(self.dist[index]))

    def take(self, indices: IndexArray) -> "EdgeSet":
        """Return a new edge set holding the edges at ``indices``, in that order."""
        return EdgeSet(u=self.u[indices], v=self.v[indices], dist=self.dist[indices])

    def pairs(self) -> list[tuple[int, int]]:
        """Endpoint pairs as plain Python ints, in storage order."""
        return list(zip(self.u.tolist(), self.v.tolist(), strict=True))
