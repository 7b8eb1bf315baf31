"""Run orchestration engine.

This package provides the main entry point for solving a variant over a
point list file, including configuration and result types.
"""

from pointlink.engine.config import RunConfig, RunResult, Variant
from pointlink.engine.runner import run

__all__ = [
    "RunConfig",
    "RunResult",
    "Variant",
    "run",
]
