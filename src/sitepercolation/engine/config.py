"""Driver configuration and result dataclasses."""

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any


@dataclass
class SimulationConfig:
    """Configuration for a single Monte Carlo trial.

    Attributes
    ----------
    n : int
        Grid dimension.
    seed : int | None
        Seed for the random opening order. If None, the order is not
        reproducible.
    log_path : Path | None
        JSONL audit log destination. If None, no events are written.
    trace_sites : bool
        Log a site_opened event for every opening.
    """

    n: int
    seed: int | None = None
    log_path: Path | None = None
    trace_sites: bool = False

    def __post_init__(self) -> None:
        """Validate and normalize."""
        if isinstance(self.n, bool) or not isinstance(self.n, int) or self.n < 1:
            raise ValueError(f"n must be an integer >= 1, got {self.n!r}")

        if self.log_path is not None:
            self.log_path = Path(self.log_path)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        data = asdict(self)
        data["log_path"] = str(self.log_path) if self.log_path is not None else None
        return data


@dataclass
class ReplayResult:
    """Results from replaying a site list.

    Attributes
    ----------
    n : int
        Grid dimension.
    sites_requested : int
        Number of sites in the list, duplicates included.
    open_sites : int
        Distinct open sites after the replay.
    open_fraction : float
        Fraction of the grid open after the replay.
    percolated : bool
        Whether the grid percolates after the replay.
    percolated_after : int | None
        1-based position in the site list of the opening that first made
        the grid percolate, or None.
    elapsed_seconds : float
        Wall-clock time spent opening sites.
    """

    n: int
    sites_requested: int
    open_sites: int
    open_fraction: float
    percolated: bool
    percolated_after: int | None
    elapsed_seconds: float

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)


@dataclass
class TrialResult:
    """Results from a single Monte Carlo trial.

    Attributes
    ----------
    n : int
        Grid dimension.
    seed : int | None
        Seed used for the opening order.
    open_sites : int
        Sites open when the grid first percolated.
    threshold : float
        Fraction of sites open when the grid first percolated.
    elapsed_seconds : float
        Wall-clock time for the trial.
    """

    n: int
    seed: int | None
    open_sites: int
    threshold: float
    elapsed_seconds: float

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)
