"""Array algorithms: medians, monotonic stacks and trapped rainwater."""

import heapq
import math
from collections.abc import Iterable, Sequence


def median_of_sorted_arrays(a: Sequence[int], b: Sequence[int]) -> float:
    """Return the median of two sorted sequences in logarithmic time."""
    short, long_ = (a, b) if len(a) < len(b) else (b, a)
    m, n = len(short), len(long_)
    if m + n == 0:
        raise ValueError("median of two empty sequences is undefined")
    half = (m + n + 1) // 2
    lo, hi = 0, m
    while lo <= hi:
        part_x = (lo + hi) // 2
        part_y = half - part_x
        max_left_x = short[part_x - 1] if part_x > 0 else -math.inf
        min_right_x = short[part_x] if part_x < m else math.inf
        max_left_y = long_[part_y - 1] if part_y > 0 else -math.inf
        min_right_y = long_[part_y] if part_y < n else math.inf
        if max_left_x <= min_right_y and max_left_y <= min_right_x:
            left = max(max_left_x, max_left_y)
            if (m + n) % 2 == 0:
                return (left + min(min_right_x, min_right_y)) / 2
            return float(left)
        if max_left_x > min_right_y:
            hi = part_x - 1
        else:
            lo = part_x + 1
    raise ValueError("inputs must be sorted")


def _halve_toward_zero(total: int) -> int:
    return total // 2 if total >= 0 else -((-total) // 2)


def running_medians(values: Iterable[int]) -> list[int]:
    """Return the median after each element; even counts average toward zero."""
    lower: list[int] = []  # max-heap stored negated
    upper: list[int] = []
    medians = []
    for value in values:
        heapq.heappush(lower, -value)
        heapq.heappush(upper, -heapq.heappop(lower))
        if len(lower) < len(upper):
            heapq.heappush(lower, -heapq.heappop(upper))
        if len(lower) > len(upper):
            medians.append(-lower[0])
        else:
            medians.append(_halve_toward_zero(-lower[0] + upper[0]))
    return medians


def next_greater_elements(values: Iterable[int]) -> list[int]:
    """For each element, the next strictly greater element to its right, or -1."""
    items = list(values)
    result = [-1] * len(items)
    stack: list[int] = []
    for index, value in enumerate(items):
        while stack and items[stack[-1]] < value:
            result[stack.pop()] = value
        stack.append(index)
    return result


def next_smaller_elements(values: Iterable[int]) -> list[int]:
    """For each element, the next strictly smaller element to its right, or -1."""
    items = list(values)
    result = [-1] * len(items)
    stack: list[int] = []
    for index, value in enumerate(items):
        while stack and value < items[stack[-1]]:
            result[stack.pop()] = value
        stack.append(index)
    return result


def trapped_rainwater(heights: Sequence[int]) -> int:
    """Return the units of water held between bars of the given heights."""
    left, right = 0, len(heights) - 1
    max_left = max_right = 0
    total = 0
    while left <= right:
        if heights[left] <= heights[right]:
            if heights[left] >= max_left:
                max_left = heights[left]
            else:
                total += max_left - heights[left]
            left += 1
        else:
            if heights[right] >= max_right:
                max_right = heights[right]
            else:
                total += max_right - heights[right]
            right -= 1
    return total