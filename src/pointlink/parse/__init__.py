"""Point list ingestion."""

from pointlink.parse.points import (
    PointParseError,
    parse_point_line,
    parse_points,
    read_points,
)

__all__ = [
    "PointParseError",
    "parse_point_line",
    "parse_points",
    "read_points",
]
