"""Tests for audit logger module."""

import json
from collections.abc import Iterator
from pathlib import Path

import pytest

from pointlink.audit import environment_info, generate_run_id
from pointlink.audit.logger import AuditLogger


@pytest.fixture
def logger(tmp_path: Path) -> Iterator[AuditLogger]:
    """Create a logger that auto-closes after test."""
    lg = AuditLogger(run_id="test_run", log_path=tmp_path / "events.jsonl")
    yield lg
    lg.close()


def _read_events(path: Path) -> list[dict]:
    """Read all JSONL events from file."""
    with path.open() as f:
        return [json.loads(line) for line in f if line.strip()]


@pytest.mark.unit
def test_logger_init_creates_file(logger: AuditLogger) -> None:
    """Test logger creates the log file and sets initial state."""
    assert logger.log_path.exists()
    assert logger.current_stage is None
    assert logger.run_id == "test_run"


@pytest.mark.unit
def test_logger_creates_parent_directories(tmp_path: Path) -> None:
    """Test a nested log path is created on demand."""
    path = tmp_path / "a" / "b" / "events.jsonl"

    with AuditLogger(run_id="r", log_path=path):
        pass

    assert path.exists()


@pytest.mark.unit
def test_logger_event_writes_valid_jsonl(logger: AuditLogger) -> None:
    """Test event() writes a valid JSONL line with correct envelope."""
    logger.event("test_event", data={"key": "value"}, level="INFO")

    events = _read_events(logger.log_path)

    assert len(events) == 1
    evt = events[0]
    assert evt["run_id"] == "test_run"
    assert evt["event"] == "test_event"
    assert evt["level"] == "INFO"
    assert evt["data"] == {"key": "value"}
    assert evt["stage"] is None
    assert evt["ts"].endswith("Z")


@pytest.mark.unit
def test_logger_rejects_unknown_level(logger: AuditLogger) -> None:
    """Test an unknown level is a programming error."""
    with pytest.raises(ValueError, match="Unknown log level"):
        logger.event("x", level="LOUD")


@pytest.mark.unit
def test_logger_stage_context_inheritance(logger: AuditLogger) -> None:
    """Test the open stage tags events unless they name their own."""
    logger.stage_started("stage1")
    logger.event("ev1")
    logger.event("ev2", stage="override")
    assert logger.current_stage == "stage1"
    logger.stage_finished("stage1", duration_seconds=0.0)
    logger.event("ev3")

    events = _read_events(logger.log_path)

    assert [e["stage"] for e in events] == ["stage1", "stage1", "override", "stage1", None]
    assert logger.current_stage is None


@pytest.mark.unit
def test_stage_finished_clears_stage(logger: AuditLogger) -> None:
    """Test events after stage_finished carry no stage."""
    logger.stage_started("edge_generation", expected_items=6)
    logger.event("inside")
    logger.stage_finished("edge_generation", duration_seconds=0.1, counters={"edges_total": 6})
    logger.event("outside")

    events = _read_events(logger.log_path)

    assert [e["stage"] for e in events] == [
        "edge_generation",
        "edge_generation",
        "edge_generation",
        None,
    ]
    assert events[0]["data"] == {"expected_items": 6}
    assert events[2]["data"]["counters"] == {"edges_total": 6}


@pytest.mark.unit
@pytest.mark.parametrize(
    ("method", "kwargs", "expected_event", "expected_level"),
    [
        ("run_started", {"command": ["pointlink"], "parameters": {"k": 1}}, "run_started", "INFO"),
        ("run_finished", {"status": "success", "duration_seconds": 1.5}, "run_finished", "INFO"),
        ("stage_started", {"stage": "s1", "expected_items": 10}, "stage_started", "INFO"),
        (
            "stage_finished",
            {"stage": "s1", "duration_seconds": 2.0, "counters": {"n": 5}},
            "stage_finished",
            "INFO",
        ),
        (
            "error",
            {"exception_class": "PointParseError", "message": "bad", "line_number": 3},
            "error",
            "ERROR",
        ),
    ],
)
def test_logger_helper_methods(
    logger: AuditLogger,
    method: str,
    kwargs: dict,
    expected_event: str,
    expected_level: str,
) -> None:
    """Test each helper writes its event type at the expected level."""
    getattr(logger, method)(**kwargs)

    events = _read_events(logger.log_path)

    assert len(events) == 1
    assert events[0]["event"] == expected_event
    assert events[0]["level"] == expected_level


@pytest.mark.unit
def test_run_started_includes_environment(logger: AuditLogger) -> None:
    """Test the environment block is logged when provided."""
    logger.run_started(command=["pointlink"], parameters={}, environment=environment_info())

    data = _read_events(logger.log_path)[0]["data"]

    assert set(data["environment"]) == {
        "python_version",
        "platform",
        "package_version",
        "dependencies",
    }
    assert set(data["environment"]["dependencies"]) == {"numpy", "click"}


@pytest.mark.unit
def test_close_is_idempotent(tmp_path: Path) -> None:
    """Test closing twice does not raise."""
    lg = AuditLogger(run_id="r", log_path=tmp_path / "e.jsonl")

    lg.close()
    lg.close()


@pytest.mark.unit
def test_generate_run_id_is_unique() -> None:
    """Test run IDs differ and embed a UTC timestamp."""
    first = generate_run_id()
    second = generate_run_id()

    assert first != second
    assert "Z__" in first
