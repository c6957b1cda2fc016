"""Tests for the Reducer contract type."""

from prime_collectors.reducer.types import Characteristics, Reducer, identity


def _append(acc: list, item: int) -> list:
    acc.append(item)
    return acc


def _extend(left: list, right: list) -> list:
    left.extend(right)
    return left


def test_identity_returns_same_object() -> None:
    acc = [1]
    assert identity(acc) is acc


def test_default_characteristics() -> None:
    characteristics = Characteristics()
    assert characteristics.ordered
    assert characteristics.mergeable
    assert not characteristics.identity_finish


def test_fold_threads_accumulator() -> None:
    reducer = Reducer(supplier=int, accumulator=lambda acc, x: acc * 10 + x, combiner=None)
    assert reducer.fold([1, 2, 3]) == 123


def test_finish_skips_finisher_for_identity_finish() -> None:
    calls = []

    def finisher(acc: list) -> tuple:
        calls.append(acc)
        return tuple(acc)

    skipping = Reducer(
        list, _append, _extend, finisher, Characteristics(identity_finish=True)
    )
    assert skipping.finish([1, 2]) == [1, 2]
    assert calls == []

    applying = Reducer(list, _append, _extend, finisher)
    assert applying.finish([1, 2]) == (1, 2)
    assert calls == [[1, 2]]
