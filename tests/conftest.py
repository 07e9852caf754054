"""Pytest configuration and fixtures for test suite."""

import sys
from collections.abc import Callable
from pathlib import Path

import pytest

# Add src directory to path for imports
SRC_PATH = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(SRC_PATH))

from sitepercolation.grid import Percolation  # noqa: E402

SITES_DIR = Path(__file__).parent / "fixtures" / "sites"


@pytest.fixture
def sites_dir() -> Path:
    """Directory holding site-list fixture files."""
    return SITES_DIR


@pytest.fixture
def make_grid() -> Callable[..., Percolation]:
    """Factory for grids with a given set of sites already open."""

    def _factory(n: int, *sites: tuple[int, int]) -> Percolation:
        grid = Percolation(n)
        for row, col in sites:
            grid.open(row, col)
        return grid

    return _factory
