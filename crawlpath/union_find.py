"""Disjoint-set forest over point identifiers.

One instance belongs to exactly one spanning-tree computation; it is never
shared between graphs.
"""

from __future__ import annotations

from typing import Dict, Iterable, List

from .types import PointId


class DisjointSet:
    """Union-find with path halving and a deterministic root rule.

    When two components merge, the root with the numerically smaller
    identifier survives, so the representative of a component is always its
    smallest member.
    """

    def __init__(self, elements: Iterable[PointId]):
        self._parent: Dict[PointId, PointId] = {}
        for element in elements:
            self._parent.setdefault(element, element)
        self.count = len(self._parent)

    def __len__(self) -> int:
        return len(self._parent)

    def __contains__(self, element: object) -> bool:
        return element in self._parent

    def parent_of(self, element: PointId) -> PointId:
        return self._parent[element]

    def find(self, element: PointId) -> PointId:
        parent = self._parent
        if element not in parent:
            raise KeyError(f"Unknown element {element!r} in disjoint set")
        while parent[element] != element:
            parent[element] = parent[parent[element]]
            element = parent[element]
        return element

    def union(self, a: PointId, b: PointId) -> bool:
        """Merge the components of ``a`` and ``b``.

        Returns ``True`` when two components were merged and ``False`` when
        they were already one.
        """

        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return False
        if root_b < root_a:
            root_a, root_b = root_b, root_a
        self._parent[root_b] = root_a
        self.count -= 1
        return True

    def connected(self, a: PointId, b: PointId) -> bool:
        return self.find(a) == self.find(b)

    def groups(self) -> List[List[PointId]]:
        """Return the components as sorted member lists, ordered by root."""

        members: Dict[PointId, List[PointId]] = {}
        for element in sorted(self._parent):
            members.setdefault(self.find(element), []).append(element)
        return [members[root] for root in sorted(members)]
