"""Public API for clustering point lists.

This module provides the high-level convenience functions:
- Loading point lists from files or text
- Solving either variant and getting back a single integer
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from pointlink.clustering import (
    DEFAULT_BUDGET,
    completing_x_product,
    largest_clusters_product,
)
from pointlink.models import Point, PointStore
from pointlink.parse import PointParseError, parse_points, read_points

__all__ = [
    "PointParseError",
    "load_points",
    "cluster_product",
    "connect_product",
]

PointsLike = PointStore | Iterable[Point | tuple[int, int, int]]


def _as_store(points: PointsLike) -> PointStore:
    return points if isinstance(points, PointStore) else PointStore(points)


def load_points(source: str | Path, *, text: bool = False) -> PointStore:
    """Load a point list.

    Parameters
    ----------
    source : str | Path
        Path to a point list file, or the list itself when ``text`` is True.
    text : bool, optional
        Treat ``source`` as file contents instead of a path, by default False.

    Returns
    -------
    PointStore
        Points in line order.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    PointParseError
        If a line is not a well-formed ``x,y,z`` point.

    Examples
    --------
        >>> from pointlink import load_points
        >>> store = load_points("0,0,0\\n5,0,0\\n", text=True)
        >>> len(store)
        2
    """
    if text:
        return parse_points(str(source))
    return read_points(source)


def cluster_product(points: PointsLike, budget: int = DEFAULT_BUDGET) -> int:
    """Union the ``budget`` closest pairs, multiply the three largest cluster sizes.

    Parameters
    ----------
    points : PointsLike
        A ``PointStore`` or any iterable of points / ``(x, y, z)`` tuples.
    budget : int, optional
        Number of closest pairs to merge, by default 1000.

    Returns
    -------
    int
        Product of the (up to) three largest cluster sizes.
    """
    return largest_clusters_product(_as_store(points), budget)


def connect_product(points: PointsLike) -> int | None:
    """Merge closest pairs until connected; multiply the last pair's x coordinates.

    Parameters
    ----------
    points : PointsLike
        A ``PointStore`` or any iterable of points / ``(x, y, z)`` tuples.

    Returns
    -------
    int | None
        x-coordinate product of the completing pair, or None for fewer
        than two points.
    """
    return completing_x_product(_as_store(points))
