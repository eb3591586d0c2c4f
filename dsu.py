"""Disjoint-set forest with path compression and union-by-rank."""
from typing import Dict, Hashable, Iterator, Optional, Set

from mst_errors import AlreadyPresentError, NotPresentError, NullElementError


class DisjointSetForest:
    """Collection of disjoint sets, each one stored as a rooted tree.

    Every element maps to its parent element; a root is its own parent and
    is the representative of its set. ``rank`` is an upper bound on the
    height of the subtree rooted at an element and only changes on roots.

    On a union of two roots with equal rank, the root of the second argument
    becomes the parent and its rank grows by one.
    """

    def __init__(self):
        # parent and rank are dicts keyed by element
        self.parent: Dict[Hashable, Hashable] = {}
        self.rank: Dict[Hashable, int] = {}

    def __len__(self) -> int:
        return len(self.parent)

    def __contains__(self, e) -> bool:
        return e is not None and e in self.parent

    def __iter__(self) -> Iterator[Hashable]:
        return iter(list(self.parent))

    def __repr__(self) -> str:
        return f"DisjointSetForest({self.components()!r})"

    def is_present(self, e) -> bool:
        if e is None:
            raise NullElementError("element is None")
        return e in self.parent

    def make_set(self, e) -> None:
        if e is None:
            raise NullElementError("element is None")
        if e in self.parent:
            raise AlreadyPresentError(f"element {e!r} is already in the forest")
        self.parent[e] = e
        self.rank[e] = 0

    def find_set(self, e) -> Optional[Hashable]:
        """Return the representative of ``e``'s set, or None if ``e`` is absent.

        Walks up to the root, then re-points every visited element straight
        at the root (path compression).
        """
        if e is None:
            raise NullElementError("element is None")
        if e not in self.parent:
            return None
        path = []
        root = e
        while self.parent[root] != root:
            path.append(root)
            root = self.parent[root]
        for x in path:
            self.parent[x] = root
        return root

    def union(self, e1, e2) -> bool:
        """Merge the sets containing ``e1`` and ``e2``.

        Returns False when they already share a representative.
        """
        if e1 is None or e2 is None:
            raise NullElementError("element is None")
        self._require(e1)
        self._require(e2)
        root1 = self.find_set(e1)
        root2 = self.find_set(e2)
        if root1 == root2:
            return False
        # union by rank
        if self.rank[root1] < self.rank[root2]:
            self.parent[root1] = root2
        elif self.rank[root1] > self.rank[root2]:
            self.parent[root2] = root1
        else:
            self.parent[root1] = root2
            self.rank[root2] += 1
        return True

    def get_current_representatives(self) -> Set[Hashable]:
        return {self.find_set(e) for e in list(self.parent)}

    def get_current_elements_of_set_containing(self, e) -> Set[Hashable]:
        if e is None:
            raise NullElementError("element is None")
        self._require(e)
        rep = self.find_set(e)
        return {x for x in list(self.parent) if self.find_set(x) == rep}

    def rank_of(self, e) -> int:
        if e is None:
            raise NullElementError("element is None")
        self._require(e)
        return self.rank[e]

    def components(self) -> Dict[Hashable, Set[Hashable]]:
        """Return mapping representative -> members for known elements."""
        comp: Dict[Hashable, Set[Hashable]] = {}
        for x in list(self.parent):
            comp.setdefault(self.find_set(x), set()).add(x)
        return comp

    def num_components(self) -> int:
        return len(self.get_current_representatives())

    def clear(self) -> None:
        self.parent.clear()
        self.rank.clear()

    def _require(self, e) -> None:
        if e not in self.parent:
            raise NotPresentError(f"element {e!r} is not in the forest")
