"""
Disjoint-set (Union-Find) structure used by the spanning tree algorithms.
"""

from typing import Hashable, Iterable


class UnionFind:
    """
    Disjoint sets with path compression and union by rank.

    Ties in rank are broken deterministically: the second root is placed
    under the first and the first root's rank grows by one.
    """

    def __init__(self, items: Iterable[Hashable] = ()):
        self._parent: dict = {}
        self._rank: dict = {}
        for item in items:
            self.add(item)

    def add(self, item: Hashable) -> None:
        """Add `item` as a singleton set (no-op if already present)."""
        if item not in self._parent:
            self._parent[item] = item
            self._rank[item] = 0

    def __contains__(self, item: Hashable) -> bool:
        return item in self._parent

    def __len__(self) -> int:
        return len(self._parent)

    def find(self, item: Hashable) -> Hashable:
        """Return the root of `item`'s set, compressing the path walked."""
        root = item
        while self._parent[root] != root:
            root = self._parent[root]

        while self._parent[item] != root:
            self._parent[item], item = root, self._parent[item]

        return root

    def union(self, a: Hashable, b: Hashable) -> bool:
        """
        Merge the sets containing a and b.

        Returns:
            True if two different sets were merged, False if a and b
            were already together
        """
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return False

        if self._rank[root_a] > self._rank[root_b]:
            self._parent[root_b] = root_a
        elif self._rank[root_a] < self._rank[root_b]:
            self._parent[root_a] = root_b
        else:
            self._parent[root_b] = root_a
            self._rank[root_a] += 1
        return True

    def connected(self, a: Hashable, b: Hashable) -> bool:
        return self.find(a) == self.find(b)

    def rank(self, item: Hashable) -> int:
        return self._rank[item]

    def count_sets(self) -> int:
        return sum(1 for item in self._parent if self._parent[item] == item)
