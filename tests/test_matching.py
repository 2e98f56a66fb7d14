import pytest

from dsalgo.matching import max_bipartite_matching

SOURCE_EXAMPLE = [[1, 2], [0, 3], [2], [2, 3], [], [5]]


def _assert_valid(matching, preferences):
    applicants = list(matching.values())
    assert len(applicants) == len(set(applicants))
    for job, applicant in matching.items():
        assert job in preferences[applicant]


def test_source_example_size():
    matching = max_bipartite_matching(SOURCE_EXAMPLE, 6)
    assert len(matching) == 5
    _assert_valid(matching, SOURCE_EXAMPLE)


def test_applicant_without_offers_is_unmatched():
    matching = max_bipartite_matching(SOURCE_EXAMPLE, 6)
    assert 4 not in matching.values()


def test_augmenting_path_moves_earlier_applicant():
    preferences = [[0, 1], [0]]
    matching = max_bipartite_matching(preferences, 2)
    assert len(matching) == len(preferences)
    _assert_valid(matching, preferences)


def test_complete_bipartite_matches_everyone():
    preferences = [[0, 1, 2]] * 3
    matching = max_bipartite_matching(preferences, 3)
    assert sorted(matching) == [0, 1, 2]
    assert sorted(matching.values()) == [0, 1, 2]


def test_competition_for_one_job():
    preferences = [[0], [0], [0]]
    matching = max_bipartite_matching(preferences, 1)
    assert len(matching) == 1
    _assert_valid(matching, preferences)


def test_no_applicants():
    assert max_bipartite_matching([], 4) == {}


@pytest.mark.parametrize("job", [-1, 3])
def test_unknown_job_raises(job):
    with pytest.raises(ValueError):
        max_bipartite_matching([[0], [job]], 3)