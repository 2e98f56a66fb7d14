import pytest

from dsalgo.bitmask import subset_members, toggle_member


def test_fifteen_holds_one_to_four():
    assert subset_members(15) == [1, 2, 3, 4]


def test_toggle_removes_present_member():
    assert 4 not in subset_members(toggle_member(15, 4))


def test_toggle_adds_absent_member():
    assert 9 in subset_members(toggle_member(15, 9))


@pytest.mark.parametrize("n", range(1, 10))
def test_toggle_twice_is_identity(n):
    assert toggle_member(toggle_member(15, n), n) == 15


def test_members_beyond_limit_are_ignored():
    assert subset_members(toggle_member(0, 10)) == []
    assert subset_members(toggle_member(0, 10), limit=10) == [10]


def test_empty_subset():
    assert subset_members(0) == []


def test_toggle_rejects_non_positive():
    with pytest.raises(ValueError):
        toggle_member(0, 0)