"""Point and point-store data models.

Points are identified solely by their index in the store; nothing else in
the package holds references to ``Point`` objects across stages.
"""

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import overload

import numpy as np
import numpy.typing as npt

__all__ = ["MAX_COORDINATE", "Point", "PointStore"]

# Largest coordinate for which a squared distance (three squared axis
# differences) still fits in int64.
MAX_COORDINATE = math.isqrt((2**63 - 1) // 3)


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 3-D non-negative integer space.

    Attributes
    ----------
    x : int
        First coordinate.
    y : int
        Second coordinate.
    z : int
        Third coordinate.
    """

    x: int
    y: int
    z: int

    def as_tuple(self) -> tuple[int, int, int]:
        """Return coordinates as an ``(x, y, z)`` tuple."""
        return (self.x, self.y, self.z)


class PointStore:
    """Ordered, read-only sequence of points indexed ``0..n-1``.

    The coordinates are also held as an ``(n, 3)`` int64 array so edge
    generation can work on whole columns at once. The array is marked
    non-writeable. Coordinates are bounded by ``MAX_COORDINATE`` so that
    squared distances computed on that array cannot overflow.

    Parameters
    ----------
    points : Iterable[Point | tuple[int, int, int]]
        Points in index order.

    Raises
    ------
    ValueError
        If any coordinate is negative or above ``MAX_COORDINATE``.
    """

    __slots__ = ("_points", "_coordinates")

    def __init__(self, points: Iterable[Point | tuple[int, int, int]]) -> None:
        materialised = tuple(p if isinstance(p, Point) else Point(*p) for p in points)

        for index, point in enumerate(materialised):
            if point.x < 0 or point.y < 0 or point.z < 0:
                raise ValueError(f"Point {index} has a negative coordinate: {point.as_tuple()}")
            if max(point.as_tuple()) > MAX_COORDINATE:
                raise ValueError(
                    f"Point {index} has a coordinate above {MAX_COORDINATE}: {point.as_tuple()}"
                )

        coordinates = np.array(
            [p.as_tuple() for p in materialised],
            dtype=np.int64,
        ).reshape(len(materialised), 3)
        coordinates.flags.writeable = False

        self._points = materialised
        self._coordinates = coordinates

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)

    @overload
    def __getitem__(self, index: int) -> Point: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[Point, ...]: ...

    def __getitem__(self, index: int | slice) -> Point | tuple[Point, ...]:
        return self._points[index]

    def __repr__(self) -> str:
        return f"PointStore(n={len(self._points)})"

    @property
    def coordinates(self) -> npt.NDArray[np.int64]:
        """Read-only ``(n, 3)`` coordinate array."""
        return self._coordinates
