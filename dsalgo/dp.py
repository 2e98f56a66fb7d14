"""Dynamic-programming classics: LIS, palindromes, digit DP and TSP."""

from bisect import bisect_left
from collections.abc import Sequence
from functools import lru_cache

TSP_UNREACHABLE = 9999


def lis_length(values: Sequence[int]) -> int:
    """Return the length of the longest strictly increasing subsequence."""
    tails: list[int] = []
    for value in values:
        pos = bisect_left(tails, value)
        if pos == len(tails):
            tails.append(value)
        else:
            tails[pos] = value
    return len(tails)


def longest_increasing_subsequence(values: Sequence[int]) -> list[int]:
    """Return a longest strictly increasing subsequence of ``values``."""
    items = list(values)
    if not items:
        return []
    tails = [items[0]]
    chains = [[items[0]]]
    for value in items[1:]:
        pos = bisect_left(tails, value)
        if pos == len(tails):
            tails.append(value)
            chains.append(chains[-1] + [value])
        elif tails[pos] != value:
            tails[pos] = value
            chains[pos][-1] = value
    return chains[-1]


def longest_palindromic_substring(text: str) -> str:
    """Return the longest palindromic substring; ties go to the rightmost one."""
    n = len(text)
    if n == 0:
        raise ValueError("text must not be empty")
    is_pal = [[False] * n for _ in range(n)]
    start = end = 0
    for gap in range(n):
        for i in range(n - gap):
            j = i + gap
            if gap == 0:
                is_pal[i][j] = True
            elif gap == 1:
                is_pal[i][j] = text[i] == text[j]
            else:
                is_pal[i][j] = text[i] == text[j] and is_pal[i + 1][j - 1]
            if is_pal[i][j]:
                start, end = i, j
    return text[start:end + 1]


def lcs_length(a: Sequence, b: Sequence) -> int:
    """Return the length of the longest common subsequence of ``a`` and ``b``."""
    previous = [0] * (len(b) + 1)
    for x in a:
        current = [0]
        for j, y in enumerate(b, start=1):
            if x == y:
                current.append(previous[j - 1] + 1)
            else:
                current.append(max(previous[j], current[j - 1]))
        previous = current
    return previous[-1]


def longest_palindromic_subsequence(text: str) -> int:
    """Return the length of the longest palindromic subsequence (O(n^2) table)."""
    n = len(text)
    if n == 0:
        return 0
    dp = [[0] * (n + 1) for _ in range(n + 1)]
    for i in range(n - 1, -1, -1):
        dp[i][i] = 1
        for j in range(i + 1, n):
            dp[i][j] = max(dp[i + 1][j], dp[i][j - 1])
            if text[i] == text[j]:
                dp[i][j] = max(dp[i][j], dp[i + 1][j - 1] + 2)
    return dp[0][n - 1]


def longest_palindromic_subsequence_linear(text: str) -> int:
    """Return the longest palindromic subsequence length using O(n) space."""
    n = len(text)
    if n == 0:
        return 0
    row = [0] * n
    previous = [0] * n
    for i in range(n - 1, -1, -1):
        row[i] = 1
        for j in range(i + 1, n):
            if text[i] == text[j]:
                row[j] = previous[j - 1] + 2
            else:
                row[j] = max(previous[j], row[j - 1])
        row, previous = previous, row
    return previous[n - 1]


def longest_palindromic_subsequence_lcs(text: str) -> int:
    """Return the longest palindromic subsequence length as LCS with the reverse."""
    return lcs_length(text, text[::-1])


def _is_palindrome(text: str) -> bool:
    return text == text[::-1]


def min_palindrome_cuts_memo(text: str) -> int:
    """Return the fewest cuts splitting ``text`` into palindromes (memoised MCM)."""

    @lru_cache(maxsize=None)
    def cuts(left: int, right: int) -> int:
        if left >= right or _is_palindrome(text[left:right + 1]):
            return 0
        return min(
            [right - left]
            + [cuts(left, k) + cuts(k + 1, right) + 1 for k in range(left, right)]
        )

    return cuts(0, len(text) - 1)


def min_palindrome_cuts(text: str) -> int:
    """Return the fewest palindrome cuts with an O(n^2) palindrome table."""
    n = len(text)
    if n == 0:
        return 0
    is_pal = [[False] * n for _ in range(n)]
    for length in range(1, n + 1):
        for i in range(n - length + 1):
            j = i + length - 1
            if text[i] == text[j] and (length <= 2 or is_pal[i + 1][j - 1]):
                is_pal[i][j] = True
    best: list[int] = []
    for i in range(n):
        if is_pal[0][i]:
            best.append(0)
        else:
            best.append(min([i] + [best[j] + 1 for j in range(i) if is_pal[j + 1][i]]))
    return best[-1]


def min_palindrome_cuts_linear(text: str) -> int:
    """Return the fewest palindrome cuts by expanding around centres, O(n) space."""
    n = len(text)
    if n == 0:
        return 0
    best = [i - 1 for i in range(n + 1)]
    for mid in range(n):
        radius = 0
        while mid - radius >= 0 and mid + radius < n:
            if text[mid - radius] == text[mid + radius]:
                best[mid + radius + 1] = min(best[mid + radius + 1], best[mid - radius] + 1)
            radius += 1
        radius = 0
        while mid - radius >= 0 and mid + radius + 1 < n:
            if text[mid - radius] == text[mid + radius + 1]:
                best[mid + radius + 2] = min(best[mid + radius + 2], best[mid - radius] + 1)
            radius += 1
    return best[n]


def count_digit_sum(upper: int | str, target: int) -> int:
    """Count integers in ``[0, upper]`` whose decimal digits sum to ``target``."""
    digits = str(upper)
    if not digits.isdigit():
        raise ValueError(f"upper must be a non-negative integer: {upper!r}")
    bound = [int(ch) for ch in digits]
    length = len(bound)

    @lru_cache(maxsize=None)
    def count(remaining: int, total: int, tight: bool) -> int:
        if total < 0:
            return 0
        if remaining == 0:
            return 1 if total == 0 else 0
        limit = bound[length - remaining] if tight else 9
        return sum(
            count(remaining - 1, total - digit, tight and digit == limit)
            for digit in range(limit + 1)
        )

    return count(length, target, True)


def tsp_min_tour(distances: Sequence[Sequence[int]]) -> int:
    """Return the shortest round trip from city 0 through every city and back."""
    n = len(distances)
    if n == 0:
        raise ValueError("at least one city is required")
    if any(len(row) != n for row in distances):
        raise ValueError("distance matrix must be square")
    all_visited = (1 << n) - 1

    @lru_cache(maxsize=None)
    def tour(visited: int, position: int) -> int:
        if visited == all_visited:
            return distances[position][0]
        answer = TSP_UNREACHABLE
        for city in range(n):
            if not visited & (1 << city):
                answer = min(
                    answer, distances[position][city] + tour(visited | (1 << city), city)
                )
        return answer

    return tour(1, 0)