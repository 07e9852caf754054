"""Reader for site-list files.

A site list is plain text: the grid size ``n`` followed by ``row col``
pairs naming the sites to open, in order. Tokens may be separated by any
whitespace, so pairs can share a line or span several.

Example::

    3
    1 1
    2 1
    3 1
"""

from dataclasses import dataclass, field
from pathlib import Path

__all__ = ["SiteList", "ParseError", "parse_sites", "read_sites"]


class ParseError(Exception):
    """Raised when a site list is malformed."""

    def __init__(
        self,
        message: str,
        file: str | None = None,
    ) -> None:
        """Initialize parse error.

        Parameters
        ----------
        message : str
            Error message.
        file : str | None, optional
            File where error occurred.
        """
        super().__init__(message)
        self.file = file


@dataclass(frozen=True)
class SiteList:
    """Parsed site list.

    Coordinates are not range-checked here; the grid rejects them on open.

    Attributes
    ----------
    n : int
        Grid dimension.
    sites : tuple[tuple[int, int], ...]
        Sites to open, 1-indexed ``(row, col)``, in file order.
    """

    n: int
    sites: tuple[tuple[int, int], ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.sites)


def parse_sites(text: str) -> SiteList:
    """Parse site-list text.

    Parameters
    ----------
    text : str
        Site-list content.

    Returns
    -------
    SiteList
        Grid dimension and sites in order.

    Raises
    ------
    ParseError
        If the content is empty, holds a non-integer token, or ends
        with an unpaired coordinate.
    """
    tokens = text.split()
    if not tokens:
        raise ParseError("Site list is empty: expected grid size")

    values: list[int] = []
    for position, token in enumerate(tokens, start=1):
        try:
            values.append(int(token))
        except ValueError:
            raise ParseError(f"Token {position} is not an integer: {token!r}") from None

    n, coords = values[0], values[1:]
    if len(coords) % 2:
        raise ParseError(f"Unpaired coordinate at end of site list: {coords[-1]}")

    sites = tuple(zip(coords[0::2], coords[1::2], strict=True))
    return SiteList(n=n, sites=sites)


def read_sites(path: str | Path) -> SiteList:
    """Read and parse a site-list file.

    Parameters
    ----------
    path : str | Path
        File to read (UTF-8).

    Returns
    -------
    SiteList
        Parsed site list.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    ParseError
        If the content is not valid UTF-8 or is malformed.
    """
    file_path = Path(path)

    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    try:
        text = file_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ParseError(
            f"Failed to parse {file_path.name}: not valid UTF-8 ({e.reason} at byte {e.start})",
            file=str(file_path),
        ) from e

    try:
        return parse_sites(text)
    except ParseError as e:
        raise ParseError(f"Failed to parse {file_path.name}: {e}", file=str(file_path)) from e
