"""Classic algorithms and data structures for arrays, dynamic programming, graphs, range queries, strings and trees."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "bitmask",
    "dp",
    "graphs",
    "matching",
    "modmath",
    "rangequery",
    "strings",
    "trees",
    "trie",
    "unionfind",
]