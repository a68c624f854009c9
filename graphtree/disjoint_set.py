"""A union-find structure over the integers 0..n-1."""

from __future__ import annotations


class UnionFindSet:
    """Disjoint sets with union by size and path compression.

    A root's slot holds the negated size of its set; any other slot holds
    the index of its parent.
    """

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"size must be non-negative, got {n}")
        self._base = [-1] * n

    def __len__(self) -> int:
        return len(self._base)

    def _check(self, z: int) -> None:
        if not 0 <= z < len(self._base):
            raise IndexError(f"element {z} out of range 0..{len(self._base) - 1}")

    def find_root(self, z: int) -> int:
        """Return the root of ``z``'s set, compressing the path to it."""
        self._check(z)
        root = z
        while self._base[root] >= 0:
            root = self._base[root]
        while self._base[z] >= 0 and self._base[z] != root:
            self._base[z], z = root, self._base[z]
        return root

    def union(self, x: int, y: int) -> bool:
        """Merge the sets of ``x`` and ``y``; return False if already merged."""
        root1 = self.find_root(x)
        root2 = self.find_root(y)
        if root1 == root2:
            return False
        if self._base[root1] > self._base[root2]:
            root1, root2 = root2, root1
        self._base[root1] += self._base[root2]
        self._base[root2] = root1
        return True

    def is_in_same_set(self, x: int, y: int) -> bool:
        return self.find_root(x) == self.find_root(y)

    def set_count(self) -> int:
        """Return the number of disjoint sets."""
        return sum(1 for slot in self._base if slot < 0)

    def set_size(self, z: int) -> int:
        """Return the number of elements in ``z``'s set."""
        return -self._base[self.find_root(z)]