"""Prefix tree of strings and a board word search built on it."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field


@dataclass
class _Node:
    children: dict[str, _Node] = field(default_factory=dict)
    count: int = 0
    word: str = ""


class Trie:
    """A set of strings stored as a prefix tree."""

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._root = _Node()
        for word in words:
            self.insert(word)

    def insert(self, word: str) -> None:
        """Add ``word`` to the trie."""
        node = self._root
        for ch in word:
            node = node.children.setdefault(ch, _Node())
        node.count += 1
        node.word = word

    def search(self, word: str) -> bool:
        """Return True if ``word`` was inserted as a whole word."""
        node = self._root
        for ch in word:
            node = node.children.get(ch)
            if node is None:
                return False
        return node.count > 0

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.search(word)


def find_words(board: Sequence[Sequence[str]], words: Iterable[str]) -> list[str]:
    """Return the words that can be traced on the board through adjacent cells.

    Cells join horizontally and vertically and each cell is used at most once
    per word. Words are reported in the order they are found scanning cells
    row by row; a word listed ``k`` times is reported at most ``k`` times.
    """
    grid = [list(row) for row in board]
    if not grid or not grid[0]:
        return []
    rows, cols = len(grid), len(grid[0])
    if any(len(row) != cols for row in grid):
        raise ValueError("board rows must all have the same length")

    trie = Trie(words)
    found: list[str] = []
    visited: set[tuple[int, int]] = set()

    def walk(i: int, j: int, node: _Node) -> None:
        if (i, j) in visited:
            return
        child = node.children.get(grid[i][j])
        if child is None:
            return
        if child.count > 0:
            found.append(child.word)
            child.count -= 1
        visited.add((i, j))
        for di, dj in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            ni, nj = i + di, j + dj
            if 0 <= ni < rows and 0 <= nj < cols:
                walk(ni, nj, child)
        visited.discard((i, j))

    for i in range(rows):
        for j in range(cols):
            walk(i, j, trie._root)
    return found