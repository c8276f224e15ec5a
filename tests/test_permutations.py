import pytest

from segbench.permutations import (
    build_test_case,
    count_permutations,
    for_each_test_case,
    iter_permutations,
)


def test_permutations_are_ordered_and_distinct():
    """Every ordered triple of distinct positions appears exactly once."""
    sample = ["a", "b", "c", "d", "e"]
    tuples = list(iter_permutations(sample, 3))

    assert len(tuples) == 5 * 4 * 3 == count_permutations(5, 3)
    assert len(set(tuples)) == len(tuples)
    assert ("a", "b", "c") in tuples and ("b", "a", "c") in tuples
    assert all(len(set(words)) == 3 for words in tuples)


def test_duplicate_words_count_as_distinct_positions():
    tuples = list(iter_permutations(["x", "x", "y"], 2))
    assert len(tuples) == 6


def test_permutations_are_lazy():
    iterator = iter_permutations([str(idx) for idx in range(1000)], 3)
    assert next(iterator) == ("0", "1", "2")


def test_width_larger_than_sample_yields_nothing():
    assert list(iter_permutations(["a", "b"], 3)) == []
    assert count_permutations(2, 3) == 0


def test_invalid_width_is_rejected():
    with pytest.raises(ValueError):
        iter_permutations(["a"], 0)


def test_for_each_test_case_joins_words():
    seen = []
    visited = for_each_test_case(["ab", "c", "d"], 3, seen.append)

    assert visited == 6
    assert seen[0].words == ("ab", "c", "d")
    assert seen[0].text == "abcd"
    assert all(case.text == "".join(case.words) for case in seen)


def test_test_case_boundaries():
    case = build_test_case(["a", "bc", "d"])
    assert case.text == "abcd"
    assert case.boundaries == [1, 3, 4]
