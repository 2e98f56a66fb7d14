"""String searching (KMP, Rabin-Karp) and small parsing helpers."""

import re

ALPHABET_SIZE = 256
HASH_MODULUS = 10007

_COMPLEX_RE = re.compile(r"\s*([+-]?\d+)\+\s*([+-]?\d+)")


def lps_table(pattern: str) -> list[int]:
    """Return the longest-proper-prefix-that-is-also-suffix table of ``pattern``."""
    lps = [0] * len(pattern)
    length = 0
    i = 1
    while i < len(pattern):
        if pattern[i] == pattern[length]:
            length += 1
            lps[i] = length
            i += 1
        elif length:
            length = lps[length - 1]
        else:
            lps[i] = 0
            i += 1
    return lps


def kmp_search(pattern: str, text: str) -> list[int]:
    """Return the start indices of every occurrence of ``pattern`` in ``text``."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    lps = lps_table(pattern)
    matches = []
    i = j = 0
    m, n = len(pattern), len(text)
    while i < n:
        if pattern[j] == text[i]:
            i += 1
            j += 1
        if j == m:
            matches.append(i - j)
            j = lps[j - 1]
        elif i < n and pattern[j] != text[i]:
            if j:
                j = lps[j - 1]
            else:
                i += 1
    return matches


def rolling_hash(text: str, base: int = ALPHABET_SIZE, modulus: int = HASH_MODULUS) -> int:
    """Return the polynomial hash of ``text``, first character most significant."""
    value = 0
    for ch in text:
        value = (base * value + ord(ch)) % modulus
    return value


def rabin_karp_search(text: str, pattern: str) -> list[int]:
    """Return the start indices of ``pattern`` in ``text`` using a rolling hash."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    n, m = len(text), len(pattern)
    high = pow(ALPHABET_SIZE, m - 1, HASH_MODULUS)
    pattern_hash = rolling_hash(pattern)
    matches = []
    text_hash = 0
    for i in range(n - m + 1):
        if i == 0:
            text_hash = rolling_hash(text[:m])
        else:
            text_hash = (
                ALPHABET_SIZE * (text_hash - ord(text[i - 1]) * high) + ord(text[i + m - 1])
            ) % HASH_MODULUS
        if text_hash == pattern_hash and text[i:i + m] == pattern:
            matches.append(i)
    return matches


def parse_complex(text: str) -> tuple[int, int]:
    """Parse a string such as ``"233+923i"`` into its two integer parts."""
    match = _COMPLEX_RE.match(text)
    if match is None:
        raise ValueError(f"not of the form <int>+<int>i: {text!r}")
    return int(match.group(1)), int(match.group(2))


def split_words(text: str) -> list[str]:
    """Split ``text`` into whitespace-separated words."""
    return text.split()