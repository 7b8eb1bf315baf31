"""End-to-end run orchestration.

Reads the point list, solves the configured variant ``times`` times and
reports the result with IO and compute timings:

    Stage 1: Load points
    Stage 2: Edge generation
    Stage 3: Edge selection
    Stage 4: Clustering / connectivity

Input errors (missing file, malformed or undecodable line, coordinate out
of range) are reported through
``RunResult`` rather than raised.
"""

import sys
from pathlib import Path
from typing import Any

from pointlink.audit import AuditLogger, environment_info, generate_run_id
from pointlink.clustering import bounded_clustering, complete_connectivity
from pointlink.engine.config import RunConfig, RunResult, Variant
from pointlink.models import PointStore
from pointlink.parse import PointParseError, read_points
from pointlink.utils import Stopwatch, calculate_file_sha256

LOAD_STAGE = "load_points"


def _load(input_path: Path, logger: AuditLogger | None) -> PointStore:
    """Read the point list, logging the input fingerprint."""
    watch = Stopwatch()
    if logger:
        logger.stage_started(LOAD_STAGE)

    store = read_points(input_path)

    if logger:
        logger.event(
            "input_read",
            data={"path": str(input_path), "sha256": calculate_file_sha256(input_path)},
            stage=LOAD_STAGE,
        )
        logger.stage_finished(
            stage=LOAD_STAGE,
            duration_seconds=watch.elapsed(),
            counters={"points": len(store)},
        )
    return store


def _solve(
    store: PointStore,
    config: RunConfig,
    logger: AuditLogger | None,
) -> tuple[int | None, dict[str, Any]]:
    """Run one compute pass and return ``(value, details)``."""
    if config.variant is Variant.CLUSTERS:
        summary = bounded_clustering(store, config.budget, logger=logger)
        return summary.product, summary.to_dict()

    merge = complete_connectivity(store, logger=logger)
    if merge is None:
        return None, {"applicable": False}
    return merge.x_product, {"applicable": True, **merge.to_dict()}


def _run_passes(
    input_path: Path,
    config: RunConfig,
    logger: AuditLogger | None,
) -> RunResult:
    """Load once, compute ``config.times`` times, time both."""
    total = Stopwatch()

    try:
        store = _load(input_path, logger)
    except (OSError, PointParseError) as e:
        error_msg = f"{type(e).__name__}: {e}"
        if logger:
            logger.error(
                exception_class=type(e).__name__,
                message=str(e),
                stage=LOAD_STAGE,
                line_number=getattr(e, "line_number", None),
            )
        return RunResult(
            success=False,
            variant=config.variant,
            total_seconds=total.elapsed(),
            error_message=error_msg,
        )

    io_seconds = total.elapsed()

    value: int | None = None
    details: dict[str, Any] = {}
    for _ in range(config.times):
        value, details = _solve(store, config, logger)

    total_seconds = total.elapsed()

    return RunResult(
        success=True,
        variant=config.variant,
        point_count=len(store),
        value=value,
        io_seconds=io_seconds,
        total_seconds=total_seconds,
        compute_seconds_avg=(total_seconds - io_seconds) / config.times,
        details=details,
    )


def run(
    input_path: Path | str,
    config: RunConfig | None = None,
    command_argv: list[str] | None = None,
) -> RunResult:
    """Solve one variant for the point list at ``input_path``.

    Parameters
    ----------
    input_path : Path | str
        Point list file, one ``x,y,z`` per line.
    config : RunConfig | None, optional
        Run configuration. If None, uses defaults.
    command_argv : list[str] | None, optional
        Command line recorded in the audit log, uses sys.argv if None.

    Returns
    -------
    RunResult
        Result value, timings and a variant-specific summary.

    Examples
    --------
        >>> from pointlink.engine import RunConfig, Variant, run
        >>> result = run("points.txt", RunConfig(variant=Variant.CONNECT))
        >>> if result.success:
        ...     print(result.value)
    """
    input_path = Path(input_path)

    if config is None:
        config = RunConfig()

    if config.log_path is None:
        return _run_passes(input_path, config, None)

    with AuditLogger(run_id=generate_run_id(), log_path=config.log_path) as logger:
        logger.run_started(
            command=command_argv or sys.argv,
            parameters=config.to_dict(),
            environment=environment_info(),
        )
        result = _run_passes(input_path, config, logger)
        logger.run_finished(
            status="success" if result.success else "failed",
            duration_seconds=result.total_seconds,
            points_processed=result.point_count if result.success else None,
        )
    return result
