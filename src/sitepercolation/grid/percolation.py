"""N-by-N percolation grid backed by two union-find engines.

Sites are opened one at a time. Each opening unites the new site with its
open neighbours so that "is full" and "percolates" reduce to connectivity
queries against virtual nodes standing in for the top and bottom rows.

Two engines are kept:

- the full-tracking engine is wired to the virtual top only, and answers
  ``is_full``;
- the percolation-tracking engine is wired to both virtual nodes, and
  answers ``percolates``.

Wiring a single engine to both virtual nodes would let open bottom-row sites
reach the top through the virtual bottom once the system percolates
("backwash"), reporting them full without a real path.
"""

from sitepercolation.connectivity import UnionFind
from sitepercolation.grid.coordinates import (
    neighbours,
    site_index,
    validate_site,
    virtual_bottom,
    virtual_top,
)
from sitepercolation.grid.models import InvalidGridSizeError, SiteState

__all__ = ["Percolation"]


class Percolation:
    """Percolation system on an n-by-n grid of sites, all initially blocked.

    Rows and columns are 1-indexed, with ``(1, 1)`` the top-left site.

    Attributes
    ----------
    n : int
        Grid dimension.
    open_count : int
        Number of open sites.
    """

    def __init__(self, n: int) -> None:
        """Create an n-by-n grid with every site blocked.

        Parameters
        ----------
        n : int
            Grid dimension.

        Raises
        ------
        InvalidGridSizeError
            If n is not an integer or is less than 1.
        """
        if isinstance(n, bool) or not isinstance(n, int) or n < 1:
            raise InvalidGridSizeError(n)

        self.n = n
        self.open_count = 0
        self._open = [[False] * n for _ in range(n)]
        self._top = virtual_top(n)
        self._bottom = virtual_bottom(n)
        self._full = UnionFind(n * n + 2)
        self._percolation = UnionFind(n * n + 2)

    def __repr__(self) -> str:
        return f"Percolation(n={self.n}, open_count={self.open_count})"

    def open(self, row: int, col: int) -> None:
        """Open site ``(row, col)`` if it is not open already.

        Parameters
        ----------
        row : int
            Row, 1-indexed.
        col : int
            Column, 1-indexed.

        Raises
        ------
        SiteOutOfRangeError
            If row or col is not an integer or is outside ``[1, n]``.
        """
        site = site_index(self.n, row, col)
        if self._open[row - 1][col - 1]:
            return

        self._open[row - 1][col - 1] = True
        self.open_count += 1

        for r, c in neighbours(self.n, row, col):
            if self._open[r - 1][c - 1]:
                other = site_index(self.n, r, c)
                self._full.union(site, other)
                self._percolation.union(site, other)

        if row == 1:
            self._full.union(site, self._top)
            self._percolation.union(site, self._top)

        # Bottom row joins the virtual bottom in the percolation engine only.
        if row == self.n:
            self._percolation.union(site, self._bottom)

    def is_open(self, row: int, col: int) -> bool:
        """Check whether site ``(row, col)`` is open.

        Raises
        ------
        SiteOutOfRangeError
            If row or col is not an integer or is outside ``[1, n]``.
        """
        validate_site(self.n, row, col)
        return self._open[row - 1][col - 1]

    def is_full(self, row: int, col: int) -> bool:
        """Check whether site ``(row, col)`` is connected to the top row.

        A blocked site is never full.

        Raises
        ------
        SiteOutOfRangeError
            If row or col is not an integer or is outside ``[1, n]``.
        """
        return self._full.connected(site_index(self.n, row, col), self._top)

    def percolates(self) -> bool:
        """Check whether an open path joins the top row to the bottom row."""
        return self._percolation.connected(self._top, self._bottom)

    def site_state(self, row: int, col: int) -> SiteState:
        """Return the derived state of site ``(row, col)``.

        Raises
        ------
        SiteOutOfRangeError
            If row or col is not an integer or is outside ``[1, n]``.
        """
        if not self.is_open(row, col):
            return SiteState.BLOCKED
        if self.is_full(row, col):
            return SiteState.FULL
        return SiteState.OPEN

    @property
    def open_fraction(self) -> float:
        """Fraction of sites that are open."""
        return self.open_count / (self.n * self.n)
