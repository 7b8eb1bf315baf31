"""Common utility functions for pointlink.

Timestamps, timing and file fingerprinting shared by the runner and the
audit subsystem.
"""

from pointlink.utils.hashing import calculate_file_sha256, format_sha256
from pointlink.utils.timestamps import Stopwatch, get_iso_timestamp

__all__ = [
    "Stopwatch",
    "get_iso_timestamp",
    "calculate_file_sha256",
    "format_sha256",
]
