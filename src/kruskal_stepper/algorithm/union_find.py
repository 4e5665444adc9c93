"""DisjointSet (Union-Find) data structure with union by rank.

This module provides the Union-Find structure used by the Kruskal stepper to
decide whether an edge would close a cycle in the spanning forest built so far.
"""

from kruskal_stepper.error.stepper import InvariantViolation


class DisjointSet:
    """Union-Find over the integer elements ``0..n-1`` with union by rank.

    ``find`` follows parent pointers without path compression, so the parent
    relation only changes inside ``union`` and root identities stay
    reproducible for a given sequence of unions.

    Attributes:
        parent: List mapping each element to its parent in the tree structure.
        rank: List mapping each element to the rank of the tree it roots.
    """

    def __init__(self, size: int) -> None:
        """Initialize ``size`` singleton sets.

        Args:
            size: Number of elements. Must be non-negative.
        """
        if size < 0:
            raise InvariantViolation(f"DisjointSet size must be non-negative, got {size}")
        self.parent: list[int] = list(range(size))
        self.rank: list[int] = [0] * size

    def _check(self, x: int) -> None:
        if not 0 <= x < len(self.parent):
            raise InvariantViolation(
                f"Node {x} is out of range for a graph with {len(self.parent)} nodes"
            )

    def find(self, x: int) -> int:
        """Find root of element x.

        Args:
            x: Element to find the root of.

        Returns:
            The root element of the set containing x.

        Raises:
            InvariantViolation: If x is not in ``0..n-1``.
        """
        self._check(x)
        while self.parent[x] != x:
            x = self.parent[x]
        return x

    def union(self, x: int, y: int) -> None:
        """Union the sets containing x and y.

        The root with the strictly smaller rank is attached under the other
        root. On equal rank, y's root goes under x's root and x's root rank
        grows by one. Elements already in the same set are left untouched.

        Args:
            x: Element from first set.
            y: Element from second set.
        """
        root_x = self.find(x)
        root_y = self.find(y)
        if root_x == root_y:
            return

        if self.rank[root_x] < self.rank[root_y]:
            self.parent[root_x] = root_y
        elif self.rank[root_x] > self.rank[root_y]:
            self.parent[root_y] = root_x
        else:
            self.parent[root_y] = root_x
            self.rank[root_x] += 1

    def is_connected(self, x: int, y: int) -> bool:
        """Check if x and y are in the same set."""
        return self.find(x) == self.find(y)

    def groups(self) -> dict[int, list[int]]:
        """Get all components as {root: [members]}, members in ascending order."""
        out: dict[int, list[int]] = {}
        for node in range(len(self.parent)):
            out.setdefault(self.find(node), []).append(node)
        return out

    def size(self) -> int:
        """Get number of elements."""
        return len(self.parent)

    def num_groups(self) -> int:
        """Get number of distinct components."""
        return sum(1 for node, parent in enumerate(self.parent) if node == parent)
