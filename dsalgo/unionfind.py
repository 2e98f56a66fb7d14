"""Disjoint-set forest with union by rank and path compression."""


class DisjointSet:
    """Partition of ``0 .. size-1`` into disjoint groups."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must be non-negative")
        self._parent = list(range(size))
        self._rank = [0] * size

    def __len__(self) -> int:
        return len(self._parent)

    def _check(self, x: int) -> None:
        if not 0 <= x < len(self._parent):
            raise IndexError(f"element {x} out of range 0..{len(self._parent) - 1}")

    def find(self, x: int) -> int:
        """Return the representative of ``x``'s group, compressing the path."""
        self._check(x)
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def union(self, x: int, y: int) -> bool:
        """Merge the groups of ``x`` and ``y``; return False if already joined."""
        x_root, y_root = self.find(x), self.find(y)
        if x_root == y_root:
            return False
        if self._rank[x_root] < self._rank[y_root]:
            self._parent[x_root] = y_root
        elif self._rank[y_root] < self._rank[x_root]:
            self._parent[y_root] = x_root
        else:
            self._parent[y_root] = x_root
            self._rank[x_root] += 1
        return True

    def connected(self, x: int, y: int) -> bool:
        """Return True if ``x`` and ``y`` are in the same group."""
        return self.find(x) == self.find(y)