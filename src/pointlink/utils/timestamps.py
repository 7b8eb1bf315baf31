"""Timestamp and timing utilities for pointlink."""

import time
from datetime import UTC, datetime

__all__ = ["get_iso_timestamp", "Stopwatch"]


def get_iso_timestamp() -> str:
    """Get current UTC timestamp in ISO8601 format with microseconds.

    Returns
    -------
    str
        ISO8601 timestamp with microseconds (e.g., "2026-02-03T12:34:56.123456Z").
    """
    return datetime.now(UTC).isoformat().replace("+00:00", "Z")


class Stopwatch:
    """Monotonic wall-clock timer started on construction.

    Attributes
    ----------
    started : float
        ``time.perf_counter()`` value at construction.
    """

    def __init__(self) -> None:
        self.started = time.perf_counter()

    def elapsed(self) -> float:
        """Seconds since the stopwatch was created."""
        return time.perf_counter() - self.started
