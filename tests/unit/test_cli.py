"""Tests for CLI module."""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from sitepercolation.cli.main import cli


@pytest.fixture
def runner() -> CliRunner:
    """Provide Click test CLI runner."""
    return CliRunner()


# ---------------------------------------------------------------------------
# Top-level CLI
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_cli_version_flag(runner: CliRunner) -> None:
    """Test --version flag outputs version string."""
    result = runner.invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert "sitepercolation" in result.output


@pytest.mark.unit
def test_cli_help(runner: CliRunner) -> None:
    """Test --help output lists commands."""
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "replay" in result.output
    assert "simulate" in result.output


@pytest.mark.unit
def test_cli_invalid_command(runner: CliRunner) -> None:
    """Test invalid command returns non-zero exit code."""
    result = runner.invoke(cli, ["invalid-command"])

    assert result.exit_code != 0


# ---------------------------------------------------------------------------
# replay command
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_replay_help(runner: CliRunner) -> None:
    """Test replay command help."""
    result = runner.invoke(cli, ["replay", "--help"])

    assert result.exit_code == 0
    assert "INPUT_PATH" in result.output


@pytest.mark.unit
def test_replay_percolates(runner: CliRunner, sites_dir: Path) -> None:
    """Test replay reports percolation and timing."""
    result = runner.invoke(cli, ["replay", str(sites_dir / "column3.txt")])

    assert result.exit_code == 0
    assert "PERCOLATES" in result.output
    assert "3/9 sites open" in result.output
    assert "elapsed time" in result.output


@pytest.mark.unit
def test_replay_does_not_percolate(runner: CliRunner, sites_dir: Path) -> None:
    """Test replay reports a non-percolating grid."""
    result = runner.invoke(cli, ["replay", str(sites_dir / "blocked4.txt")])

    assert result.exit_code == 0
    assert "Does not percolate" in result.output
    assert "PERCOLATES" not in result.output


@pytest.mark.unit
def test_replay_verbose(runner: CliRunner, sites_dir: Path) -> None:
    """Test verbose replay reports the percolating step."""
    result = runner.invoke(cli, ["replay", str(sites_dir / "snake5.txt"), "-v"])

    assert result.exit_code == 0
    assert "Percolated after site #10" in result.output


@pytest.mark.unit
@pytest.mark.parametrize("fixture", ["bad_token.txt", "unpaired.txt", "out_of_range.txt"])
def test_replay_errors_exit_nonzero(runner: CliRunner, sites_dir: Path, fixture: str) -> None:
    """Test malformed files and out-of-range sites exit with code 1."""
    result = runner.invoke(cli, ["replay", str(sites_dir / fixture)])

    assert result.exit_code == 1
    assert "Error" in result.output


@pytest.mark.unit
def test_replay_nonexistent_file(runner: CliRunner) -> None:
    """Test replay with nonexistent file."""
    result = runner.invoke(cli, ["replay", "nonexistent.txt"])

    assert result.exit_code != 0


@pytest.mark.unit
def test_replay_writes_log(runner: CliRunner, sites_dir: Path, tmp_path: Path) -> None:
    """Test --log writes JSONL events."""
    log_path = tmp_path / "events.jsonl"

    result = runner.invoke(
        cli, ["replay", str(sites_dir / "column3.txt"), "--log", str(log_path)]
    )

    assert result.exit_code == 0
    events = [json.loads(line) for line in log_path.read_text().splitlines()]
    assert events[0]["event"] == "run_started"
    assert events[-1]["event"] == "run_finished"


@pytest.mark.unit
def test_replay_malformed_file_logs_error(
    runner: CliRunner, sites_dir: Path, tmp_path: Path
) -> None:
    """Test a malformed file with --log records an error event."""
    log_path = tmp_path / "events.jsonl"

    result = runner.invoke(
        cli, ["replay", str(sites_dir / "bad_token.txt"), "--log", str(log_path)]
    )

    assert result.exit_code == 1
    events = [json.loads(line) for line in log_path.read_text().splitlines()]
    assert [e["event"] for e in events] == ["run_started", "error", "run_finished"]
    assert events[1]["data"]["exception_class"] == "ParseError"
    assert events[2]["data"]["status"] == "failed"


@pytest.mark.unit
def test_verbose_logs_site_openings(
    runner: CliRunner, sites_dir: Path, tmp_path: Path
) -> None:
    """Test site_opened events are only written with --verbose."""
    quiet_log = tmp_path / "quiet.jsonl"
    verbose_log = tmp_path / "verbose.jsonl"
    fixture = str(sites_dir / "column3.txt")

    runner.invoke(cli, ["replay", fixture, "--log", str(quiet_log)])
    runner.invoke(cli, ["replay", fixture, "--log", str(verbose_log), "-v"])

    quiet = [json.loads(line)["event"] for line in quiet_log.read_text().splitlines()]
    verbose = [json.loads(line)["event"] for line in verbose_log.read_text().splitlines()]
    assert "site_opened" not in quiet
    assert verbose.count("site_opened") == 3


# ---------------------------------------------------------------------------
# simulate command
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_simulate(runner: CliRunner) -> None:
    """Test simulate reports a threshold."""
    result = runner.invoke(cli, ["simulate", "10", "--seed", "1"])

    assert result.exit_code == 0
    assert "threshold" in result.output
    assert "elapsed time" in result.output


@pytest.mark.unit
def test_simulate_is_reproducible(runner: CliRunner) -> None:
    """Test equal seeds print equal thresholds."""
    first = runner.invoke(cli, ["simulate", "25", "--seed", "9"])
    second = runner.invoke(cli, ["simulate", "25", "--seed", "9"])

    assert first.output.splitlines()[0] == second.output.splitlines()[0]


@pytest.mark.unit
def test_simulate_invalid_n(runner: CliRunner) -> None:
    """Test a non-positive grid size exits with code 1."""
    result = runner.invoke(cli, ["simulate", "0"])

    assert result.exit_code == 1
    assert "Error" in result.output


@pytest.mark.unit
def test_simulate_non_integer_n(runner: CliRunner) -> None:
    """Test click rejects non-integer grid sizes."""
    result = runner.invoke(cli, ["simulate", "abc"])

    assert result.exit_code != 0
