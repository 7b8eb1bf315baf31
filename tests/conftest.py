"""Pytest configuration and fixtures for test suite."""

import sys
from collections.abc import Callable
from pathlib import Path

import pytest

# Add src directory to path for imports
SRC_PATH = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(SRC_PATH))

from pointlink.models import Point, PointStore  # noqa: E402

FIXTURES_DIR = Path(__file__).parent / "fixtures" / "points"

# Six collinear points (shared y, z). Sorted edges with (u, v) tie-break:
# (0,1)=1, (1,2)=4, (3,4)=4, (0,2)=9, (2,3)=289, (1,3)=361, (2,4)=361,
# (0,3)=400, (1,4)=441, (0,4)=484, (4,5)=784, ...
LINE_POINTS = [(0, 7, 3), (1, 7, 3), (3, 7, 3), (20, 7, 3), (22, 7, 3), (50, 7, 3)]

# Two tight pairs and one isolated point.
PAIR_POINTS = [(0, 0, 0), (1, 0, 0), (100, 100, 100), (101, 100, 100), (200, 200, 200)]


@pytest.fixture
def make_store() -> Callable[..., PointStore]:
    """Factory for point stores from ``(x, y, z)`` tuples."""

    def _factory(*coords: tuple[int, int, int]) -> PointStore:
        return PointStore(Point(*c) for c in coords)

    return _factory


@pytest.fixture
def line_store() -> PointStore:
    """Six collinear points with two distance ties."""
    return PointStore(LINE_POINTS)


@pytest.fixture
def pair_store() -> PointStore:
    """Two tight pairs and one far-away point."""
    return PointStore(PAIR_POINTS)


@pytest.fixture
def fixtures_dir() -> Path:
    """Path to point list fixtures."""
    return FIXTURES_DIR
