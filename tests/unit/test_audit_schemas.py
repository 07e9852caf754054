"""Tests for schema validation of log events."""

import json
from pathlib import Path

import jsonschema
import pytest

from sitepercolation import ParseError, replay, simulate
from sitepercolation.grid import SiteOutOfRangeError

_SCHEMAS_DIR = Path(__file__).parent.parent.parent / "schemas"


@pytest.fixture(scope="module")
def event_schema() -> dict:
    """Load log event JSON schema."""
    with (_SCHEMAS_DIR / "log_event.schema.json").open() as f:
        return json.load(f)


def _validate_all(path: Path, schema: dict) -> int:
    count = 0
    with path.open() as f:
        for line in f:
            if line.strip():
                jsonschema.validate(instance=json.loads(line), schema=schema)
                count += 1
    return count


@pytest.mark.unit
def test_trial_events_validate(tmp_path: Path, event_schema: dict) -> None:
    """Test events from a trial validate against the schema."""
    log_path = tmp_path / "events.jsonl"
    simulate(6, seed=1, log_path=log_path, trace_sites=True)

    assert _validate_all(log_path, event_schema) > 2


@pytest.mark.unit
def test_failed_replay_events_validate(
    tmp_path: Path, sites_dir: Path, event_schema: dict
) -> None:
    """Test events from a failed replay validate against the schema."""
    log_path = tmp_path / "events.jsonl"

    with pytest.raises(SiteOutOfRangeError):
        replay(sites_dir / "out_of_range.txt", log_path=log_path)

    assert _validate_all(log_path, event_schema) == 3


@pytest.mark.unit
def test_parse_failure_events_validate(
    tmp_path: Path, sites_dir: Path, event_schema: dict
) -> None:
    """Test a malformed file is logged with schema-valid error events."""
    log_path = tmp_path / "events.jsonl"

    with pytest.raises(ParseError):
        replay(sites_dir / "bad_token.txt", log_path=log_path)

    assert _validate_all(log_path, event_schema) == 3


@pytest.mark.unit
def test_schema_rejects_unknown_event(event_schema: dict) -> None:
    """Test the schema constrains event names."""
    bad = {
        "ts": "2026-01-01T00:00:00.000001Z",
        "run_id": "r",
        "level": "INFO",
        "event": "site_closed",
        "data": {},
        "stage": None,
    }

    with pytest.raises(jsonschema.ValidationError):
        jsonschema.validate(instance=bad, schema=event_schema)
