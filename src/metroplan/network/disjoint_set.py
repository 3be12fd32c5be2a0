"""Union-find over opaque station identifiers."""

from __future__ import annotations

from typing import Dict, Generic, Hashable, Iterable, List, Optional, TypeVar

T = TypeVar("T", bound=Hashable)


class DisjointSet(Generic[T]):
    """Disjoint sets with path compression and union by size.

    Elements are mapped to dense indices on :meth:`add`; parents and sizes live
    in flat lists indexed by that integer. A size entry is only meaningful for
    a current root and is reset to 0 once the root is absorbed.
    """

    def __init__(self, elements: Optional[Iterable[T]] = None) -> None:
        self._index: Dict[T, int] = {}
        self._elements: List[T] = []
        self._parent: List[int] = []
        self._size: List[int] = []
        self._roots = 0
        for element in elements or ():
            self.add(element)

    # ----------------------------------------------------------------- builders
    def add(self, element: T) -> None:
        """Register ``element`` as a singleton set; adding twice is an error."""
        if element in self._index:
            raise ValueError(f"Element {element!r} already belongs to the disjoint set")
        idx = len(self._elements)
        self._index[element] = idx
        self._elements.append(element)
        self._parent.append(idx)
        self._size.append(1)
        self._roots += 1

    # ------------------------------------------------------------------ queries
    def find(self, element: T) -> T:
        """Return the representative of the set containing ``element``."""
        return self._elements[self._find_index(self._lookup(element))]

    def connected(self, a: T, b: T) -> bool:
        return self._find_index(self._lookup(a)) == self._find_index(self._lookup(b))

    def set_size(self, element: T) -> int:
        return self._size[self._find_index(self._lookup(element))]

    @property
    def component_count(self) -> int:
        return self._roots

    def __contains__(self, element: object) -> bool:
        return element in self._index

    def __len__(self) -> int:
        return len(self._elements)

    # ----------------------------------------------------------------- mutation
    def union(self, a: T, b: T) -> None:
        """Merge the sets of ``a`` and ``b``.

        The smaller tree is attached under the larger root. On equal sizes the
        root of ``b`` becomes a child of the root of ``a``.
        """
        root_a = self._find_index(self._lookup(a))
        root_b = self._find_index(self._lookup(b))
        if root_a == root_b:
            return
        size_a = self._size[root_a]
        size_b = self._size[root_b]
        if size_a < size_b:
            self._parent[root_a] = root_b
            self._size[root_b] = size_a + size_b
            self._size[root_a] = 0
        else:
            self._parent[root_b] = root_a
            self._size[root_a] = size_a + size_b
            self._size[root_b] = 0
        self._roots -= 1

    # ----------------------------------------------------------------- internal
    def _lookup(self, element: T) -> int:
        try:
            return self._index[element]
        except KeyError:
            raise KeyError(f"Element {element!r} was never added to the disjoint set") from None

    def _find_index(self, idx: int) -> int:
        parent = self._parent
        root = idx
        while parent[root] != root:
            root = parent[root]
        # second pass: relink the visited chain straight to the root
        while parent[idx] != root:
            parent[idx], idx = root, parent[idx]
        return root


__all__ = ["DisjointSet"]
