"""Disjoint-set forest with path compression and union by size."""

from __future__ import annotations

from collections.abc import Hashable, Iterable


class DisjointSet:
    """A partition of hashable items into disjoint components."""

    def __init__(self, items: Iterable[Hashable] = ()) -> None:
        self._parent: dict[Hashable, Hashable] = {}
        self._size: dict[Hashable, int] = {}
        self._components = 0
        for item in items:
            self.add(item)

    def __contains__(self, item: object) -> bool:
        return item in self._parent

    def __len__(self) -> int:
        return len(self._parent)

    def add(self, item: Hashable) -> None:
        """Add ``item`` as a singleton component; known items are left alone."""
        if item in self._parent:
            return
        self._parent[item] = item
        self._size[item] = 1
        self._components += 1

    def find(self, item: Hashable) -> Hashable:
        """Return the representative of the component holding ``item``."""
        if item not in self._parent:
            raise KeyError(item)
        root = item
        while (parent := self._parent[root]) != root:
            root = parent
        while item != root:
            self._parent[item], item = root, self._parent[item]
        return root

    def union(self, a: Hashable, b: Hashable) -> bool:
        """Merge the components of ``a`` and ``b``; return False if already joined."""
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return False
        if self._size[root_a] < self._size[root_b]:
            root_a, root_b = root_b, root_a
        self._parent[root_b] = root_a
        self._size[root_a] += self._size.pop(root_b)
        self._components -= 1
        return True

    def connected(self, a: Hashable, b: Hashable) -> bool:
        """Return whether ``a`` and ``b`` share a component."""
        return self.find(a) == self.find(b)

    def component_size(self, item: Hashable) -> int:
        """Return the number of items in the component holding ``item``."""
        return self._size[self.find(item)]

    def component_count(self) -> int:
        """Return the number of disjoint components."""
        return self._components