"""Range queries: a sum segment tree and a sparse table."""

from collections.abc import Callable, Sequence
from typing import Any


class SegmentTree:
    """Sum segment tree over a fixed-length sequence, indexed from 0."""

    def __init__(self, values: Sequence[int]) -> None:
        self._n = len(values)
        if self._n == 0:
            raise ValueError("segment tree needs at least one value")
        self._tree = [0] * (4 * self._n)
        self._build(values, 1, 0, self._n - 1)

    def __len__(self) -> int:
        return self._n

    def _build(self, values: Sequence[int], node: int, lo: int, hi: int) -> None:
        if lo == hi:
            self._tree[node] = values[lo]
            return
        mid = (lo + hi) // 2
        self._build(values, 2 * node, lo, mid)
        self._build(values, 2 * node + 1, mid + 1, hi)
        self._tree[node] = self._tree[2 * node] + self._tree[2 * node + 1]

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self._n:
            raise IndexError(f"index {index} out of range 0..{self._n - 1}")

    def query(self, a: int, b: int) -> int:
        """Return the sum of the elements at positions ``a`` to ``b`` inclusive."""
        self._check_index(a)
        self._check_index(b)
        if a > b:
            raise ValueError(f"empty range: {a} > {b}")
        return self._query(1, 0, self._n - 1, a, b)

    def _query(self, node: int, lo: int, hi: int, a: int, b: int) -> int:
        if a <= lo and hi <= b:
            return self._tree[node]
        if b < lo or a > hi:
            return 0
        mid = (lo + hi) // 2
        return self._query(2 * node, lo, mid, a, b) + self._query(
            2 * node + 1, mid + 1, hi, a, b
        )

    def add(self, index: int, value: int) -> None:
        """Add ``value`` to the element at ``index``."""
        self._check_index(index)
        self._add(1, 0, self._n - 1, index, value)

    def _add(self, node: int, lo: int, hi: int, index: int, value: int) -> None:
        if lo == hi:
            self._tree[node] += value
            return
        mid = (lo + hi) // 2
        if index <= mid:
            self._add(2 * node, lo, mid, index, value)
        else:
            self._add(2 * node + 1, mid + 1, hi, index, value)
        self._tree[node] = self._tree[2 * node] + self._tree[2 * node + 1]


class SparseTable:
    """Static range queries answered from precomputed power-of-two blocks.

    ``query_log`` works for any associative function; ``query`` additionally
    needs it to be idempotent (min, max, gcd, bitwise and/or).
    """

    def __init__(
        self, values: Sequence[Any], func: Callable[[Any, Any], Any] = min
    ) -> None:
        self._n = len(values)
        if self._n == 0:
            raise ValueError("sparse table needs at least one value")
        self._func = func
        self._table: list[list[Any]] = [list(values)]
        level = 1
        while (1 << level) <= self._n:
            previous = self._table[-1]
            half = 1 << (level - 1)
            self._table.append(
                [
                    func(previous[i], previous[i + half])
                    for i in range(self._n - (1 << level) + 1)
                ]
            )
            level += 1

    def __len__(self) -> int:
        return self._n

    def _check_range(self, left: int, right: int) -> None:
        for index in (left, right):
            if not 0 <= index < self._n:
                raise IndexError(f"index {index} out of range 0..{self._n - 1}")
        if left > right:
            raise ValueError(f"empty range: {left} > {right}")

    def query_log(self, left: int, right: int) -> Any:
        """Combine ``left..right`` from disjoint blocks in logarithmic time."""
        self._check_range(left, right)
        length = right - left + 1
        result = None
        for level in reversed(range(len(self._table))):
            size = 1 << level
            if size <= length:
                value = self._table[level][left]
                result = value if result is None else self._func(result, value)
                left += size
                length -= size
        return result

    def query(self, left: int, right: int) -> Any:
        """Combine ``left..right`` from two overlapping blocks in constant time."""
        self._check_range(left, right)
        level = (right - left + 1).bit_length() - 1
        return self._func(
            self._table[level][left], self._table[level][right - (1 << level) + 1]
        )