"""Public API for replaying site lists and running trials.

This module provides high-level convenience functions that combine
parsing, the drivers and optional audit logging:
- Replaying a site-list file onto a fresh grid
- Running a single Monte Carlo threshold trial
"""

from __future__ import annotations

from contextlib import nullcontext
from pathlib import Path

from sitepercolation.audit import AuditLogger
from sitepercolation.engine import (
    ReplayResult,
    SimulationConfig,
    TrialResult,
    replay_file,
    run_trial,
)
from sitepercolation.grid import Percolation
from sitepercolation.parse import ParseError

__all__ = [
    "replay",
    "simulate",
    "ParseError",
]


def replay(
    path: str | Path,
    *,
    log_path: str | Path | None = None,
    trace_sites: bool = False,
) -> tuple[Percolation, ReplayResult]:
    """Replay a site-list file onto a fresh grid.

    Parameters
    ----------
    path : str | Path
        Site-list file: grid size followed by ``row col`` pairs.
    log_path : str | Path | None, optional
        JSONL audit log destination, by default None (no log).
    trace_sites : bool, optional
        Log a site_opened event for every opening, by default False.

    Returns
    -------
    tuple[Percolation, ReplayResult]
        The resulting grid and a summary of the replay.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    ParseError
        If the file is not valid UTF-8 or is malformed.
    InvalidGridSizeError
        If the grid size in the file is below 1.
    SiteOutOfRangeError
        If a listed site lies outside the grid.

    Examples
    --------
        >>> from sitepercolation import replay
        >>> grid, result = replay("input10.txt")
        >>> result.percolated
        True
    """
    audit_logger = AuditLogger(Path(log_path)) if log_path is not None else None
    with audit_logger if audit_logger is not None else nullcontext():
        return replay_file(path, audit_logger, trace_sites=trace_sites)


def simulate(
    n: int,
    *,
    seed: int | None = None,
    log_path: str | Path | None = None,
    trace_sites: bool = False,
) -> TrialResult:
    """Run one Monte Carlo trial on an n-by-n grid.

    Parameters
    ----------
    n : int
        Grid dimension.
    seed : int | None, optional
        Seed for a reproducible opening order, by default None.
    log_path : str | Path | None, optional
        JSONL audit log destination, by default None (no log).
    trace_sites : bool, optional
        Log a site_opened event for every opening, by default False.

    Returns
    -------
    TrialResult
        Threshold estimate and timing for the trial.

    Raises
    ------
    ValueError
        If n is below 1.

    Examples
    --------
        >>> from sitepercolation import simulate
        >>> result = simulate(200, seed=42)
        >>> 0.0 < result.threshold <= 1.0
        True
    """
    config = SimulationConfig(
        n=n,
        seed=seed,
        log_path=Path(log_path) if log_path else None,
        trace_sites=trace_sites,
    )

    audit_logger = AuditLogger(config.log_path) if config.log_path is not None else None
    with audit_logger if audit_logger is not None else nullcontext():
        return run_trial(config, audit_logger)
