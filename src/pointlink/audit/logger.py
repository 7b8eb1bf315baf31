"""JSONL audit log for pointlink runs.

Each run appends one JSON object per line to its log file: run lifecycle,
stage lifecycle with counters, and errors. The handle stays open for the
whole run and is flushed after every event.
"""

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any

from pointlink.audit.models import LOG_LEVELS, LogEvent
from pointlink.utils import get_iso_timestamp

__all__ = ["AuditLogger"]


class AuditLogger:
    """Append-only JSONL writer bound to one run.

    Events written between ``stage_started`` and ``stage_finished`` are
    tagged with that stage unless they name one themselves.

    Parameters
    ----------
    run_id : str
        Identifier stamped on every event.
    log_path : Path
        JSONL destination; parent directories are created.
    """

    def __init__(self, run_id: str, log_path: Path) -> None:
        self.run_id = run_id
        self.log_path = Path(log_path)
        self._stage: str | None = None

        self.log_path.parent.mkdir(parents=True, exist_ok=True)
        self._file = self.log_path.open("a", encoding="utf-8")

    def __enter__(self) -> "AuditLogger":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        """Flush and close the log file."""
        if not self._file.closed:
            self._file.flush()
            self._file.close()

    @property
    def current_stage(self) -> str | None:
        """Stage opened by the last ``stage_started``, None outside stages."""
        return self._stage

    def event(
        self,
        event_type: str,
        data: dict[str, Any] | None = None,
        level: str = "INFO",
        stage: str | None = None,
    ) -> None:
        """Append one event.

        Parameters
        ----------
        event_type : str
            Event name, e.g. ``"input_read"``.
        data : dict[str, Any] | None, optional
            JSON-serialisable payload.
        level : str, optional
            One of ``LOG_LEVELS``, by default ``"INFO"``.
        stage : str | None, optional
            Stage tag; the open stage is used when omitted.

        Raises
        ------
        ValueError
            If ``level`` is not a known log level.
        """
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {level}")

        record = LogEvent(
            ts=get_iso_timestamp(),
            run_id=self.run_id,
            level=level,
            event=event_type,
            data=data or {},
            stage=stage if stage is not None else self._stage,
        )
        json.dump(asdict(record), self._file, ensure_ascii=False, separators=(",", ":"))
        self._file.write("\n")
        self._file.flush()

    def run_started(
        self,
        command: list[str],
        parameters: dict[str, Any],
        environment: dict[str, Any] | None = None,
    ) -> None:
        """Record the command line, run parameters and environment."""
        data: dict[str, Any] = {"command": command, "parameters": parameters}
        if environment is not None:
            data["environment"] = environment
        self.event("run_started", data=data)

    def run_finished(
        self,
        status: str,
        duration_seconds: float,
        points_processed: int | None = None,
    ) -> None:
        """Record the run outcome; ``points_processed`` is omitted on failure."""
        data: dict[str, Any] = {"status": status, "duration_seconds": duration_seconds}
        if points_processed is not None:
            data["points_processed"] = points_processed
        self.event("run_finished", data=data)

    def stage_started(self, stage: str, expected_items: int | None = None) -> None:
        """Open ``stage`` and record how many points or edges it expects."""
        self._stage = stage
        data = {} if expected_items is None else {"expected_items": expected_items}
        self.event("stage_started", data=data)

    def stage_finished(
        self,
        stage: str,
        duration_seconds: float,
        counters: dict[str, int] | None = None,
    ) -> None:
        """Record the stage duration and counters, then close the stage."""
        data: dict[str, Any] = {"duration_seconds": duration_seconds}
        if counters:
            data["counters"] = counters
        self.event("stage_finished", data=data, stage=stage)
        self._stage = None

    def error(
        self,
        exception_class: str,
        message: str,
        stage: str | None = None,
        line_number: int | None = None,
    ) -> None:
        """Record a failure at ERROR level.

        Parameters
        ----------
        exception_class : str
            Name of the exception type.
        message : str
            Exception message.
        stage : str | None, optional
            Stage that failed.
        line_number : int | None, optional
            Input line of a parse failure.
        """
        data: dict[str, Any] = {"exception_class": exception_class, "message": message}
        if line_number is not None:
            data["line_number"] = line_number
        self.event("error", data=data, stage=stage, level="ERROR")
