"""Disjoint sets over integer ids, with path compression and union by rank.

Ids are lazily created: an id that has never been passed to `union` is its own
singleton set, so nothing needs to be registered before it is looked up.
"""

from typing import Generic, TypeVar

Element = TypeVar("Element")

# Rank of an id that has never been a root in a union.
UNSEEN_RANK = -1


class UnionFind(Generic[Element]):
    """
    Union-Find over lazily-created elements.

    Example:
        >>> uf = UnionFind[int]()
        >>> uf.union(1, 2)
        2
        >>> uf.connected(1, 2)
        True
        >>> uf.find(7)
        7
    """

    def __init__(self) -> None:
        self._parent: dict[Element, Element] = {}
        self._rank: dict[Element, int] = {}

    def __len__(self) -> int:
        return len(self._parent)

    def find(self, element: Element) -> Element:
        """
        Find the representative (root) of the set containing element.

        Every node visited on the way up is re-pointed directly at the root.
        """
        root = element
        while root in self._parent:
            root = self._parent[root]

        current = element
        while current != root:
            next_node = self._parent[current]
            self._parent[current] = root
            current = next_node

        return root

    def union(self, x: Element, y: Element) -> Element:
        """
        Merge the sets containing x and y and return the surviving root.

        The root with strictly greater rank wins. Otherwise y's root wins and
        its rank grows past x's.
        """
        root_x = self.find(x)
        root_y = self.find(y)

        if root_x == root_y:
            return root_x

        rank_x = self._rank.get(root_x, UNSEEN_RANK)
        rank_y = self._rank.get(root_y, UNSEEN_RANK)
        if rank_x > rank_y:
            self._parent[root_y] = root_x
            return root_x

        self._parent[root_x] = root_y
        self._rank[root_y] = max(rank_y, rank_x + 1)
        return root_y

    def connected(self, x: Element, y: Element) -> bool:
        """Check if x and y are in the same set."""
        return self.find(x) == self.find(y)
