"""Mapping between 1-indexed grid coordinates and engine identifiers.

Sites occupy identifiers ``0 .. n*n - 1`` in row-major order. The two
identifiers after them are reserved for the virtual top and bottom nodes.
"""

from collections.abc import Iterator

from sitepercolation.grid.models import SiteOutOfRangeError

__all__ = [
    "validate_site",
    "site_index",
    "virtual_top",
    "virtual_bottom",
    "neighbours",
]


def validate_site(n: int, row: int, col: int) -> None:
    """Check that ``(row, col)`` lies on an n-by-n grid.

    Parameters
    ----------
    n : int
        Grid dimension.
    row : int
        Row, 1-indexed.
    col : int
        Column, 1-indexed.

    Raises
    ------
    SiteOutOfRangeError
        If row or col is not an integer or is outside ``[1, n]``.
    """
    for value in (row, col):
        if isinstance(value, bool) or not isinstance(value, int):
            raise SiteOutOfRangeError(row, col, n)
    if not (1 <= row <= n and 1 <= col <= n):
        raise SiteOutOfRangeError(row, col, n)


def site_index(n: int, row: int, col: int) -> int:
    """Map a validated 1-indexed site to its 0-based identifier.

    Parameters
    ----------
    n : int
        Grid dimension.
    row : int
        Row, 1-indexed.
    col : int
        Column, 1-indexed.

    Returns
    -------
    int
        Identifier in ``[0, n*n)``.

    Raises
    ------
    SiteOutOfRangeError
        If row or col is outside ``[1, n]``.
    """
    validate_site(n, row, col)
    return (row - 1) * n + (col - 1)


def virtual_top(n: int) -> int:
    """Return the identifier of the virtual node above row 1."""
    return n * n


def virtual_bottom(n: int) -> int:
    """Return the identifier of the virtual node below row n."""
    return n * n + 1


def neighbours(n: int, row: int, col: int) -> Iterator[tuple[int, int]]:
    """Yield the in-grid sites adjacent to ``(row, col)``.

    Order is up, down, left, right. Diagonals are not adjacent.
    """
    for d_row, d_col in ((-1, 0), (1, 0), (0, -1), (0, 1)):
        r, c = row + d_row, col + d_col
        if 1 <= r <= n and 1 <= c <= n:
            yield r, c
