"""Tests for partitioning_by and grouping_by."""

from prime_collectors.reducer.builtin import counting, summing
from prime_collectors.reducer.grouping import grouping_by, partitioning_by
from prime_collectors.solver.config import ReductionConfig
from prime_collectors.solver.reduce import reduce


def is_even(value: int) -> bool:
    return value % 2 == 0


class TestPartitioningBy:
    """Test cases for partitioning_by."""

    def test_splits_by_predicate(self) -> None:
        result = reduce(range(6), partitioning_by(is_even))
        assert result == {False: [1, 3, 5], True: [0, 2, 4]}

    def test_both_keys_present_when_one_side_empty(self) -> None:
        result = reduce([2, 4], partitioning_by(is_even))
        assert result == {False: [], True: [2, 4]}

    def test_empty_input(self) -> None:
        assert reduce([], partitioning_by(is_even)) == {False: [], True: []}

    def test_downstream_reducer(self) -> None:
        result = reduce(range(10), partitioning_by(is_even, counting()))
        assert result == {False: 5, True: 5}

    def test_combine_preserves_order(self) -> None:
        reducer = partitioning_by(is_even)
        left = reducer.fold([5, 2])
        right = reducer.fold([1, 8])
        combined = reducer.finish(reducer.combiner(left, right))
        assert combined == {False: [5, 1], True: [2, 8]}


class TestGroupingBy:
    """Test cases for grouping_by."""

    def test_groups_in_first_encounter_order(self) -> None:
        words = ["fish", "ox", "cat", "pig", "eel", "yak", "ant"]
        result = reduce(words, grouping_by(len))
        assert list(result) == [4, 2, 3]
        assert result[3] == ["cat", "pig", "eel", "yak", "ant"]

    def test_downstream_reducer(self) -> None:
        result = reduce([1, 2, 3, 4, 5, 6], grouping_by(lambda x: x % 3, summing()))
        assert result == {1: 5, 2: 7, 0: 9}

    def test_combine_appends_new_keys_after_existing(self) -> None:
        reducer = grouping_by(lambda word: word[0])
        left = reducer.fold(["apple", "banana"])
        right = reducer.fold(["cherry", "avocado"])
        combined = reducer.finish(reducer.combiner(left, right))
        assert list(combined) == ["a", "b", "c"]
        assert combined["a"] == ["apple", "avocado"]

    def test_parallel_matches_sequential(self) -> None:
        words = [f"w{i % 7}{i}" for i in range(50)]
        config = ReductionConfig(parallel=True, chunks=5, executor="threads")
        assert reduce(words, grouping_by(lambda w: w[:2]), config) == reduce(
            words, grouping_by(lambda w: w[:2])
        )
