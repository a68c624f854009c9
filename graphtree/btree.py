"""An in-memory B-tree of unique, ordered keys."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterator, Sequence
from typing import Any, Generic, TypeVar

K = TypeVar("K")


class BTreeNode(Generic[K]):
    """A node holding sorted keys and one more child slot than keys."""

    __slots__ = ("keys", "children", "parent")

    def __init__(self) -> None:
        self.keys: list[K] = []
        self.children: list[BTreeNode[K] | None] = [None]
        self.parent: BTreeNode[K] | None = None

    @property
    def is_leaf(self) -> bool:
        return all(child is None for child in self.children)

    def search(self, target: K) -> tuple[bool, int]:
        """Return (found, index): the key's index, or where it would be inserted."""
        idx = bisect_left(self.keys, target)
        found = idx < len(self.keys) and self.keys[idx] == target
        return found, idx

    def _insert(self, key: K, sub: BTreeNode[K] | None = None) -> None:
        _, idx = self.search(key)
        self.keys.insert(idx, key)
        self.children.insert(idx + 1, sub)
        if sub is not None:
            sub.parent = self

    def _split(self) -> tuple[K, BTreeNode[K]]:
        """Move the upper half to a new sibling and return (middle key, sibling)."""
        mid = len(self.keys) // 2
        up_key = self.keys[mid]

        brother: BTreeNode[K] = BTreeNode()
        brother.keys = self.keys[mid + 1:]
        brother.children = self.children[mid + 1:]
        for child in brother.children:
            if child is not None:
                child.parent = brother

        self.keys = self.keys[:mid]
        self.children = self.children[:mid + 1]
        return up_key, brother

    def __repr__(self) -> str:
        return f"BTreeNode({self.keys!r})"


class BTree(Generic[K]):
    """A B-tree in which a node splits once it holds ``order`` keys."""

    def __init__(self, order: int = 3) -> None:
        if order < 3:
            raise ValueError(f"order must be at least 3, got {order}")
        self.order = order
        self.root: BTreeNode[K] | None = None
        self._size = 0

    def find(self, key: K) -> tuple[BTreeNode[K] | None, int | None]:
        """Locate ``key``.

        Returns (node, index) when it is present, and (leaf, None) when it is
        not, where leaf is the node the key would be inserted into.
        """
        curr = self.root
        prev: BTreeNode[K] | None = None
        while curr is not None:
            found, idx = curr.search(key)
            if found:
                return curr, idx
            prev = curr
            curr = curr.children[idx]
        return prev, None

    def insert(self, key: K) -> bool:
        """Insert ``key``; return False if it was already present."""
        if self.root is None:
            self.root = BTreeNode()
            self.root._insert(key)
            self._size = 1
            return True

        node, idx = self.find(key)
        if idx is not None:
            return False

        carry_key = key
        carry_sub: BTreeNode[K] | None = None
        prev: BTreeNode[K] | None = None
        while node is not None:
            node._insert(carry_key, carry_sub)
            if len(node.keys) < self.order:
                self._size += 1
                return True
            carry_key, carry_sub = node._split()
            prev = node
            node = node.parent

        new_root: BTreeNode[K] = BTreeNode()
        new_root.keys = [carry_key]
        new_root.children = [prev, carry_sub]
        for child in new_root.children:
            if child is not None:
                child.parent = new_root
        self.root = new_root
        self._size += 1
        return True

    def inorder(self) -> list[K]:
        """Return all keys in ascending order."""
        return list(self)

    def __iter__(self) -> Iterator[K]:
        yield from self._walk(self.root)

    def _walk(self, node: BTreeNode[K] | None) -> Iterator[K]:
        if node is None:
            return
        for child, key in zip(node.children, node.keys):
            yield from self._walk(child)
            yield key
        yield from self._walk(node.children[-1])

    def __contains__(self, key: Any) -> bool:
        return self.find(key)[1] is not None

    def __len__(self) -> int:
        return self._size


_DEMO_CASES: list[tuple[str, Sequence[int]]] = [
    ("Test Case 1: Minimal insert", [10, 20]),
    ("Test Case 2: Trigger root split", [10, 20, 30, 40]),
    ("Test Case 3: Ordered insert", list(range(1, 11))),
    ("Test Case 4: Reverse insert", list(range(100, 0, -10))),
    ("Test Case 5: Interleaved insert", [50, 20, 80, 10, 30, 60, 90, 25, 35, 70, 100]),
    ("Test Case 6: Bulk insert (1~50)", list(range(1, 51))),
]


def main(argv: Sequence[str] | None = None) -> int:
    """Build a few order-3 trees and print their keys in order."""
    print("hello BTree")
    for name, keys in _DEMO_CASES:
        print(f"=== {name} ===")
        tree: BTree[int] = BTree(3)
        for key in keys:
            tree.insert(key)
        print("".join(f"{key} " for key in tree))
        print()
        print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())