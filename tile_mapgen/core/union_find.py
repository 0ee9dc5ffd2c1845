from __future__ import annotations
from typing import List


class UnionFind:
    """Weighted quick-union with path compression over labels 0..n-1."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"UnionFind size must be >= 0, got {n}.")
        self._parent: List[int] = list(range(n))
        self._size: List[int] = [1] * n
        self._count = n

    @property
    def count(self) -> int:
        return self._count

    def __len__(self) -> int:
        return len(self._parent)

    def find(self, p: int) -> int:
        if not 0 <= p < len(self._parent):
            raise IndexError(f"Label {p} is outside 0..{len(self._parent) - 1}.")
        root = p
        while root != self._parent[root]:
            root = self._parent[root]
        while p != root:
            self._parent[p], p = root, self._parent[p]
        return root

    def connected(self, p: int, q: int) -> bool:
        return self.find(p) == self.find(q)

    def union(self, p: int, q: int) -> None:
        rp = self.find(p)
        rq = self.find(q)
        if rp == rq:
            return

        if self._size[rp] < self._size[rq]:
            rp, rq = rq, rp
        self._parent[rq] = rp
        self._size[rp] += self._size[rq]
        self._count -= 1
