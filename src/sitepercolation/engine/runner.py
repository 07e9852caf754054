"""Drivers that feed sites into a percolation grid.

Three drivers are provided:

    replay_file:  read a site-list file, then replay it
    replay_sites: open the sites of a parsed site list in order
    run_trial:    open random blocked sites until the grid percolates

All measure wall-clock time and, when given an AuditLogger, emit
run_started / percolated / run_finished events. Per-site site_opened
events are only written when trace_sites is set. Errors propagate to the
caller after an error event is logged.
"""

import random
import time
from pathlib import Path

from sitepercolation.audit.logger import AuditLogger
from sitepercolation.engine.config import ReplayResult, SimulationConfig, TrialResult
from sitepercolation.grid import Percolation
from sitepercolation.parse import SiteList, read_sites

__all__ = ["replay_file", "replay_sites", "run_trial"]


def _log_failure(audit_logger: AuditLogger | None, exc: Exception, start: float) -> None:
    if audit_logger is None:
        return
    audit_logger.error(type(exc).__name__, str(exc))
    audit_logger.run_finished(status="failed", duration_seconds=time.perf_counter() - start)


def _replay(
    site_list: SiteList,
    audit_logger: AuditLogger | None,
    trace_sites: bool,
    start: float,
) -> tuple[Percolation, ReplayResult]:
    """Open the listed sites once run_started has been logged."""
    percolated_after: int | None = None
    try:
        grid = Percolation(site_list.n)
        for position, (row, col) in enumerate(site_list.sites, start=1):
            grid.open(row, col)
            if trace_sites and audit_logger is not None:
                audit_logger.site_opened(row, col, grid.open_count)
            if percolated_after is None and grid.percolates():
                percolated_after = position
                if audit_logger is not None:
                    audit_logger.percolated(grid.open_count, grid.open_fraction)
    except Exception as e:
        _log_failure(audit_logger, e, start)
        raise

    result = ReplayResult(
        n=grid.n,
        sites_requested=len(site_list),
        open_sites=grid.open_count,
        open_fraction=grid.open_fraction,
        percolated=grid.percolates(),
        percolated_after=percolated_after,
        elapsed_seconds=time.perf_counter() - start,
    )

    if audit_logger is not None:
        audit_logger.run_finished(
            status="success",
            duration_seconds=result.elapsed_seconds,
            counters={
                "n": result.n,
                "open_sites": result.open_sites,
                "percolated": result.percolated,
                "percolated_after": result.percolated_after,
            },
        )

    return grid, result


def replay_sites(
    site_list: SiteList,
    audit_logger: AuditLogger | None = None,
    *,
    trace_sites: bool = False,
) -> tuple[Percolation, ReplayResult]:
    """Open every site of a site list in order.

    Parameters
    ----------
    site_list : SiteList
        Grid size and sites to open.
    audit_logger : AuditLogger | None, optional
        Audit logger for tracking. If None, no logging.
    trace_sites : bool, optional
        Log a site_opened event for every opening, by default False.

    Returns
    -------
    tuple[Percolation, ReplayResult]
        The grid after the replay, for further queries, and a summary.

    Raises
    ------
    InvalidGridSizeError
        If the site list's grid size is below 1.
    SiteOutOfRangeError
        If a listed site lies outside the grid.
    """
    start = time.perf_counter()
    if audit_logger is not None:
        audit_logger.run_started(
            "replay",
            {"n": site_list.n, "sites_requested": len(site_list), "trace_sites": trace_sites},
        )

    return _replay(site_list, audit_logger, trace_sites, start)


def replay_file(
    path: str | Path,
    audit_logger: AuditLogger | None = None,
    *,
    trace_sites: bool = False,
) -> tuple[Percolation, ReplayResult]:
    """Read a site-list file and open its sites in order.

    Reading happens inside the logged run, so a missing or malformed file
    is recorded as an error event before the exception propagates.

    Parameters
    ----------
    path : str | Path
        Site-list file.
    audit_logger : AuditLogger | None, optional
        Audit logger for tracking. If None, no logging.
    trace_sites : bool, optional
        Log a site_opened event for every opening, by default False.

    Returns
    -------
    tuple[Percolation, ReplayResult]
        The grid after the replay and a summary.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    ParseError
        If the file is malformed.
    InvalidGridSizeError
        If the grid size in the file is below 1.
    SiteOutOfRangeError
        If a listed site lies outside the grid.
    """
    start = time.perf_counter()
    if audit_logger is not None:
        audit_logger.run_started("replay", {"path": str(path), "trace_sites": trace_sites})

    try:
        site_list = read_sites(path)
    except Exception as e:
        _log_failure(audit_logger, e, start)
        raise

    return _replay(site_list, audit_logger, trace_sites, start)


def run_trial(
    config: SimulationConfig,
    audit_logger: AuditLogger | None = None,
) -> TrialResult:
    """Open uniformly random blocked sites until the grid percolates.

    Sites are drawn without replacement from a shuffled order, so every
    draw opens a new site and the trial ends after at most ``n * n``
    openings.

    Parameters
    ----------
    config : SimulationConfig
        Grid size, seed and site tracing.
    audit_logger : AuditLogger | None, optional
        Audit logger for tracking. If None, no logging.

    Returns
    -------
    TrialResult
        Open fraction at the moment the grid first percolated.
    """
    start = time.perf_counter()
    if audit_logger is not None:
        audit_logger.run_started("trial", config.to_dict())

    rng = random.Random(config.seed)
    n = config.n
    order = [(row, col) for row in range(1, n + 1) for col in range(1, n + 1)]
    rng.shuffle(order)

    try:
        grid = Percolation(n)
        for row, col in order:
            grid.open(row, col)
            if config.trace_sites and audit_logger is not None:
                audit_logger.site_opened(row, col, grid.open_count)
            if grid.percolates():
                break
    except Exception as e:
        _log_failure(audit_logger, e, start)
        raise

    result = TrialResult(
        n=n,
        seed=config.seed,
        open_sites=grid.open_count,
        threshold=grid.open_fraction,
        elapsed_seconds=time.perf_counter() - start,
    )

    if audit_logger is not None:
        audit_logger.percolated(result.open_sites, result.threshold)
        audit_logger.run_finished(
            status="success",
            duration_seconds=result.elapsed_seconds,
            counters={"open_sites": result.open_sites, "threshold": result.threshold},
        )

    return result
