"""Tree ancestry: binary lifting and lowest common ancestors."""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable, Iterable
from dataclasses import dataclass


class BinaryLifting:
    """Ancestor table for a rooted tree answering k-th ancestor and LCA queries."""

    def __init__(
        self, edges: Iterable[tuple[Hashable, Hashable]], root: Hashable = 0
    ) -> None:
        adjacency: dict[Hashable, list[Hashable]] = {root: []}
        edge_count = 0
        for u, v in edges:
            adjacency.setdefault(u, []).append(v)
            adjacency.setdefault(v, []).append(u)
            edge_count += 1
        if edge_count != len(adjacency) - 1:
            raise ValueError("edges do not form a tree")

        self._levels = max(1, len(adjacency).bit_length())
        self._depth: dict[Hashable, int] = {root: 0}
        self._up: dict[Hashable, list[Hashable | None]] = {}
        queue: deque[tuple[Hashable, Hashable | None]] = deque([(root, None)])
        while queue:
            node, parent = queue.popleft()
            jumps: list[Hashable | None] = [parent]
            for level in range(1, self._levels):
                previous = jumps[level - 1]
                jumps.append(None if previous is None else self._up[previous][level - 1])
            self._up[node] = jumps
            for child in adjacency[node]:
                if child == parent:
                    continue
                if child in self._depth:
                    raise ValueError("edges do not form a tree")
                self._depth[child] = self._depth[node] + 1
                queue.append((child, node))
        if len(self._up) != len(adjacency):
            raise ValueError("edges do not form a connected tree")

    def _check(self, node: Hashable) -> None:
        if node not in self._up:
            raise KeyError(node)

    def kth_ancestor(self, node: Hashable, k: int) -> Hashable | None:
        """Return the node ``k`` steps above ``node``, or None past the root."""
        self._check(node)
        if k < 0:
            raise ValueError("k must be non-negative")
        if k >> self._levels:
            return None
        current: Hashable | None = node
        for level in range(self._levels):
            if current is None:
                break
            if k >> level & 1:
                current = self._up[current][level]
        return current

    def lca(self, a: Hashable, b: Hashable) -> Hashable:
        """Return the lowest common ancestor of ``a`` and ``b``."""
        self._check(a)
        self._check(b)
        if self._depth[a] < self._depth[b]:
            a, b = b, a
        a = self.kth_ancestor(a, self._depth[a] - self._depth[b])
        if a == b:
            return a
        for level in reversed(range(self._levels)):
            if self._up[a][level] != self._up[b][level]:
                a = self._up[a][level]
                b = self._up[b][level]
        return self._up[a][0]


@dataclass
class TreeNode:
    """A binary tree node."""

    val: int
    left: TreeNode | None = None
    right: TreeNode | None = None


def lca_binary_tree(root: TreeNode | None, n1: int, n2: int) -> TreeNode | None:
    """Return the lowest common ancestor of values ``n1`` and ``n2``.

    Both values are assumed to be present in the tree.
    """
    if root is None:
        return None
    if root.val in (n1, n2):
        return root
    left = lca_binary_tree(root.left, n1, n2)
    right = lca_binary_tree(root.right, n1, n2)
    if left is not None and right is not None:
        return root
    return left if left is not None else right


def lca_bst(root: TreeNode | None, n1: int, n2: int) -> TreeNode | None:
    """Return the lowest common ancestor of ``n1`` and ``n2`` in a search tree."""
    node = root
    while node is not None:
        if n1 < node.val and n2 < node.val:
            node = node.left
        elif n1 > node.val and n2 > node.val:
            node = node.right
        else:
            return node
    return None