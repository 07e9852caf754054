"""Data models and error types for the percolation grid."""

from enum import StrEnum

__all__ = [
    "SiteState",
    "PercolationError",
    "InvalidGridSizeError",
    "SiteOutOfRangeError",
]


class SiteState(StrEnum):
    """Derived state of a single site.

    Attributes
    ----------
    BLOCKED : str
        Site has not been opened.
    OPEN : str
        Site is open but not connected to the top row.
    FULL : str
        Site is open and connected to an open top-row site.
    """

    BLOCKED = "blocked"
    OPEN = "open"
    FULL = "full"


class PercolationError(Exception):
    """Base class for grid contract violations."""


class InvalidGridSizeError(PercolationError, ValueError):
    """Raised when a grid is constructed with a dimension below 1."""

    def __init__(self, n: object) -> None:
        """Initialize invalid grid size error.

        Parameters
        ----------
        n : object
            The rejected dimension.
        """
        super().__init__(f"Grid dimension must be an integer >= 1, got {n!r}")
        self.n = n


class SiteOutOfRangeError(PercolationError, IndexError):
    """Raised when a row or column falls outside ``[1, n]``."""

    def __init__(self, row: int, col: int, n: int) -> None:
        """Initialize out-of-range error.

        Parameters
        ----------
        row : int
            Requested row (1-indexed).
        col : int
            Requested column (1-indexed).
        n : int
            Grid dimension.
        """
        super().__init__(f"Site ({row}, {col}) is out of range for a {n}x{n} grid")
        self.row = row
        self.col = col
        self.n = n
