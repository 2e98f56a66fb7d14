import pytest

from dsalgo.trie import Trie, find_words

SOURCE_WORDS = ["AABAC", "AAB", "ABC", "AEFDH", "BCD"]

LEETCODE_BOARD = [
    ["o", "a", "a", "n"],
    ["e", "t", "a", "e"],
    ["i", "h", "k", "r"],
    ["i", "f", "l", "v"],
]


def test_trie_source_example():
    trie = Trie(SOURCE_WORDS)
    assert trie.search("AEFD") is False


def test_trie_finds_inserted_words():
    trie = Trie()
    for word in SOURCE_WORDS:
        trie.insert(word)
    for word in SOURCE_WORDS:
        assert trie.search(word)
        assert word in trie


def test_trie_prefixes_are_not_words():
    trie = Trie(SOURCE_WORDS)
    assert not trie.search("AA")
    assert not trie.search("AABA")
    assert not trie.search("A")
    assert "BC" not in trie


def test_trie_extensions_are_not_words():
    trie = Trie(SOURCE_WORDS)
    assert not trie.search("AABACX")
    assert not trie.search("Z")


def test_trie_empty():
    trie = Trie()
    assert not trie.search("")
    assert not trie.search("abc")
    trie.insert("")
    assert trie.search("")


def test_trie_non_string_membership():
    trie = Trie(["1"])
    assert (1 in trie) is False


def test_find_words_leetcode_example():
    words = ["oath", "pea", "eat", "rain"]
    assert find_words(LEETCODE_BOARD, words) == ["oath", "eat"]


def test_find_words_does_not_reuse_cells():
    board = [["a", "b"], ["c", "d"]]
    assert find_words(board, ["abcb"]) == []
    assert find_words(board, ["abdc"]) == ["abdc"]


def test_find_words_reports_each_word_once():
    board = [["a", "a"], ["a", "a"]]
    assert find_words(board, ["aa"]) == ["aa"]
    assert find_words(board, ["aa", "aa"]) == ["aa", "aa"]


def test_find_words_accepts_string_rows():
    board = ["ab", "cd"]
    assert sorted(find_words(board, ["ab", "ca", "db", "ad"])) == ["ab", "ca", "db"]


def test_find_words_leaves_board_untouched():
    board = [row[:] for row in LEETCODE_BOARD]
    find_words(board, ["oath", "eat"])
    assert board == LEETCODE_BOARD


def test_find_words_empty_board():
    assert find_words([], ["a"]) == []
    assert find_words([[]], ["a"]) == []


def test_find_words_ragged_board():
    with pytest.raises(ValueError):
        find_words([["a", "b"], ["c"]], ["ab"])