"""Union-Find (Disjoint Set Union) data structure over integer elements."""


class UnionFind:
    """Union-Find data structure with path compression and union by size.

    Elements are the integers ``0 .. universe_size - 1``. The universe is
    fixed at construction and never grows or shrinks.

    Attributes
    ----------
    parent : list[int]
        Parent pointers for each element. Roots point to themselves.
    size : list[int]
        Number of elements in the tree, meaningful only for roots.
    count : int
        Number of disjoint sets.
    """

    def __init__(self, universe_size: int) -> None:
        """Initialize every element as its own singleton set.

        Parameters
        ----------
        universe_size : int
            Number of elements in the universe.

        Raises
        ------
        ValueError
            If universe_size is less than 1.
        """
        if universe_size < 1:
            raise ValueError(f"universe_size must be >= 1, got {universe_size}")

        self.parent: list[int] = list(range(universe_size))
        self.size: list[int] = [1] * universe_size
        self.count = universe_size

    def __len__(self) -> int:
        """Return the universe size."""
        return len(self.parent)

    def _validate(self, x: int) -> None:
        if not 0 <= x < len(self.parent):
            raise IndexError(f"element {x} is not between 0 and {len(self.parent) - 1}")

    def find(self, x: int) -> int:
        """Find root of set containing x with full path compression.

        Every node visited on the way up is re-parented directly to the
        root before returning.

        Parameters
        ----------
        x : int
            Element to find.

        Returns
        -------
        int
            Root of set containing x.

        Raises
        ------
        IndexError
            If x is outside the universe.
        """
        self._validate(x)

        root = x
        while self.parent[root] != root:
            root = self.parent[root]

        while self.parent[x] != root:
            self.parent[x], x = root, self.parent[x]

        return root

    def union(self, x: int, y: int) -> None:
        """Union sets containing x and y using union by size.

        The root of the smaller tree is attached under the root of the
        larger one. On a tie, y's root goes under x's root. Uniting two
        elements that are already connected is a no-op.

        Parameters
        ----------
        x : int
            First element.
        y : int
            Second element.
        """
        root_x = self.find(x)
        root_y = self.find(y)

        if root_x == root_y:
            return

        if self.size[root_x] < self.size[root_y]:
            root_x, root_y = root_y, root_x

        self.parent[root_y] = root_x
        self.size[root_x] += self.size[root_y]
        self.count -= 1

    def connected(self, x: int, y: int) -> bool:
        """Check whether x and y belong to the same set.

        Parameters
        ----------
        x : int
            First element.
        y : int
            Second element.

        Returns
        -------
        bool
            True if both elements share a root.
        """
        return self.find(x) == self.find(y)
