"""Sets of small positive integers stored as bit masks."""

DEFAULT_LIMIT = 9


def toggle_member(subset: int, n: int) -> int:
    """Add ``n`` to the subset if absent, remove it if present."""
    if n < 1:
        raise ValueError("members are numbered from 1")
    return subset ^ (1 << (n - 1))


def subset_members(subset: int, limit: int = DEFAULT_LIMIT) -> list[int]:
    """Return the members 1..limit present in the subset, in ascending order."""
    return [bit + 1 for bit in range(limit) if subset >> bit & 1]