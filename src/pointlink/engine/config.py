"""Run configuration and result dataclasses."""

from dataclasses import asdict, dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import Any

from pointlink.clustering import DEFAULT_BUDGET


class Variant(StrEnum):
    """Which clustering problem a run solves.

    Attributes
    ----------
    CLUSTERS : str
        Bounded clustering; result is the top-three size product.
    CONNECT : str
        Completion detection; result is the completing pair's x product.
    """

    CLUSTERS = "clusters"
    CONNECT = "connect"


@dataclass
class RunConfig:
    """Configuration for a single run.

    Attributes
    ----------
    variant : Variant
        Problem variant to solve.
    budget : int
        Shortest edges to union in the ``clusters`` variant (default: 1000).
    times : int
        Number of compute passes; timings are averaged over them.
    log_path : Path | None
        JSONL audit log destination. If None, no events are written.
    """

    variant: Variant = Variant.CLUSTERS
    budget: int = DEFAULT_BUDGET
    times: int = 1
    log_path: Path | None = None

    def __post_init__(self) -> None:
        """Coerce types and validate."""
        self.variant = Variant(self.variant)

        if self.budget < 0:
            raise ValueError(f"budget must be >= 0, got {self.budget}")

        if self.times < 1:
            raise ValueError(f"times must be >= 1, got {self.times}")

        if self.log_path is not None:
            self.log_path = Path(self.log_path)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        data = asdict(self)
        data["variant"] = str(self.variant)
        data["log_path"] = str(self.log_path) if self.log_path is not None else None
        return data


@dataclass
class RunResult:
    """Results from a run.

    Attributes
    ----------
    success : bool
        Whether the run completed.
    variant : Variant
        Variant that was solved.
    point_count : int
        Points read from the input.
    value : int | None
        Variant result; None when the run failed or the ``connect``
        variant had fewer than two points.
    io_seconds : float
        Time spent reading and parsing the input.
    total_seconds : float
        Wall-clock time of the whole run.
    compute_seconds_avg : float
        Mean time of one compute pass.
    details : dict[str, Any]
        Variant-specific summary (cluster sizes or the completing pair).
    error_message : str | None
        Error message if failed.
    """

    success: bool
    variant: Variant
    point_count: int = 0
    value: int | None = None
    io_seconds: float = 0.0
    total_seconds: float = 0.0
    compute_seconds_avg: float = 0.0
    details: dict[str, Any] = field(default_factory=dict)
    error_message: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        data = asdict(self)
        data["variant"] = str(self.variant)
        return data
