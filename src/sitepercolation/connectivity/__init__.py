"""Connectivity tracking over a fixed universe of integer elements.

This module provides the disjoint-set (union-find) engine used by the
percolation grid. It carries no knowledge of grids or virtual nodes.
"""

from sitepercolation.connectivity.union_find import UnionFind

__all__ = ["UnionFind"]
