"""Disjoint-set forest with union by size and path compression."""

from __future__ import annotations


class UnionFind:
    """Union-find over the integer ids ``0 .. max_id - 1``."""

    def __init__(self, max_id: int) -> None:
        if max_id < 0:
            raise ValueError("max_id must not be negative")
        self._parent = list(range(max_id))
        self._size = [1] * max_id

    def __len__(self) -> int:
        return len(self._parent)

    def _check(self, node: int) -> None:
        if not 0 <= node < len(self._parent):
            raise IndexError(f"id {node} out of range")

    def get_representative(self, this_id: int) -> int:
        """Return the root of the set holding ``this_id``."""
        self._check(this_id)
        parent = self._parent
        root = this_id
        while parent[root] != root:
            root = parent[root]
        node = this_id
        while parent[node] != root:
            parent[node], node = root, parent[node]
        return root

    def get_set_size(self, this_id: int) -> int:
        """Number of members in the set holding ``this_id``."""
        return self._size[self.get_representative(this_id)]

    def connect_nodes(self, a_id: int, b_id: int) -> int:
        """Merge the sets of two ids and return the id of the merged root."""
        a_root = self.get_representative(a_id)
        b_root = self.get_representative(b_id)
        if a_root == b_root:
            return a_root
        a_size = self._size[a_root]
        b_size = self._size[b_root]
        if a_size > b_size:
            self._parent[b_root] = a_root
            self._size[a_root] += b_size
            return a_root
        self._parent[a_root] = b_root
        self._size[b_root] += a_size
        return b_root