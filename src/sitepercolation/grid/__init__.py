"""Percolation grid over 1-indexed site coordinates.

The grid composes two independent union-find engines, one wired to the
virtual top node and one wired to both virtual nodes, so that fullness and
percolation are answered without backwash.
"""

from sitepercolation.grid.coordinates import site_index, validate_site
from sitepercolation.grid.models import (
    InvalidGridSizeError,
    PercolationError,
    SiteOutOfRangeError,
    SiteState,
)
from sitepercolation.grid.percolation import Percolation

__all__ = [
    "Percolation",
    "PercolationError",
    "InvalidGridSizeError",
    "SiteOutOfRangeError",
    "SiteState",
    "site_index",
    "validate_site",
]
