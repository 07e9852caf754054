"""Site percolation on N-by-N grids backed by union-find.

This package provides:
- Connectivity (sitepercolation.connectivity) — union-find engine
- Grid (sitepercolation.grid) — percolation grid and site states
- Parsing (sitepercolation.parse) — site-list files
- Engine (sitepercolation.engine) — replay and Monte Carlo drivers
- Audit (sitepercolation.audit) — JSONL event logging
- CLI (sitepercolation.cli) — command-line interface
- Public API (sitepercolation.api) — high-level convenience functions
"""

__version__ = "0.3.0"
__license__ = "MIT"

from sitepercolation.api import ParseError, replay, simulate
from sitepercolation.connectivity import UnionFind
from sitepercolation.grid import (
    InvalidGridSizeError,
    Percolation,
    PercolationError,
    SiteOutOfRangeError,
    SiteState,
)

__all__ = [
    "__version__",
    "__license__",
    "Percolation",
    "PercolationError",
    "InvalidGridSizeError",
    "SiteOutOfRangeError",
    "SiteState",
    "UnionFind",
    "replay",
    "simulate",
    "ParseError",
]
