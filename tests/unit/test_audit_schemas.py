"""Tests for schema validation of audit events."""

import json
from pathlib import Path

import jsonschema
import pytest

from pointlink.engine import RunConfig, Variant, run

_SCHEMAS_DIR = Path(__file__).parent.parent.parent / "schemas"


@pytest.fixture(scope="module")
def event_schema() -> dict:
    """Load log event JSON schema."""
    with (_SCHEMAS_DIR / "log_event.schema.json").open() as f:
        return json.load(f)


@pytest.mark.unit
@pytest.mark.parametrize("variant", list(Variant))
def test_generated_events_validate(
    tmp_path: Path,
    fixtures_dir: Path,
    event_schema: dict,
    variant: Variant,
) -> None:
    """Test every event of a real run passes schema validation."""
    log_path = tmp_path / "events.jsonl"

    result = run(fixtures_dir / "line.txt", RunConfig(variant=variant, log_path=log_path))

    assert result.success
    with log_path.open() as f:
        lines = [line for line in f if line.strip()]
    assert lines
    for line in lines:
        jsonschema.validate(instance=json.loads(line), schema=event_schema)


@pytest.mark.unit
def test_failed_run_events_validate(tmp_path: Path, fixtures_dir: Path, event_schema: dict) -> None:
    """Test error events also match the schema."""
    log_path = tmp_path / "events.jsonl"

    run(fixtures_dir / "malformed.txt", RunConfig(log_path=log_path))

    with log_path.open() as f:
        for line in f:
            jsonschema.validate(instance=json.loads(line), schema=event_schema)


@pytest.mark.unit
def test_invalid_event_rejected(event_schema: dict) -> None:
    """Test schema rejects an event with an unknown level."""
    with pytest.raises(jsonschema.ValidationError):
        jsonschema.validate(
            instance={
                "ts": "2026-01-01T00:00:00.000001Z",
                "run_id": "r",
                "level": "LOUD",
                "event": "x",
                "data": {},
                "stage": None,
            },
            schema=event_schema,
        )


@pytest.mark.unit
def test_event_missing_field_rejected(event_schema: dict) -> None:
    """Test schema requires the full envelope."""
    with pytest.raises(jsonschema.ValidationError):
        jsonschema.validate(
            instance={"ts": "2026-01-01T00:00:00Z", "run_id": "r", "level": "INFO"},
            schema=event_schema,
        )
