"""Classifying reducers: partition by predicate and group by key."""

from collections.abc import Callable
from functools import partial
from typing import Any

from prime_collectors.reducer.builtin import to_list
from prime_collectors.reducer.types import Characteristics, Reducer

type Partitions = dict[bool, Any]
type Groups = dict[Any, Any]


def _downstream_characteristics(downstream: Reducer) -> Characteristics:
    return Characteristics(
        ordered=downstream.characteristics.ordered,
        mergeable=downstream.characteristics.mergeable,
    )


def _partition_supplier(downstream: Reducer) -> Partitions:
    return {False: downstream.supplier(), True: downstream.supplier()}


def _partition_accumulate(
    predicate: Callable, downstream: Reducer, acc: Partitions, item: Any
) -> Partitions:
    key = bool(predicate(item))
    acc[key] = downstream.accumulator(acc[key], item)
    return acc


def _partition_combine(downstream: Reducer, left: Partitions, right: Partitions) -> Partitions:
    for key in (False, True):
        left[key] = downstream.combiner(left[key], right[key])
    return left


def _finish_each(downstream: Reducer, acc: dict) -> dict:
    return {key: downstream.finish(value) for key, value in acc.items()}


def partitioning_by(predicate: Callable, downstream: Reducer | None = None) -> Reducer:
    """
    Split elements into {False: ..., True: ...} by predicate.

    Both keys are always present, even when one side received no elements.
    Each side is reduced with downstream (a list by default).
    """
    if downstream is None:
        downstream = to_list()

    return Reducer(
        supplier=partial(_partition_supplier, downstream),
        accumulator=partial(_partition_accumulate, predicate, downstream),
        combiner=partial(_partition_combine, downstream),
        finisher=partial(_finish_each, downstream),
        characteristics=_downstream_characteristics(downstream),
    )


def _group_accumulate(classifier: Callable, downstream: Reducer, acc: Groups, item: Any) -> Groups:
    key = classifier(item)
    if key in acc:
        bucket = acc[key]
    else:
        bucket = downstream.supplier()
    acc[key] = downstream.accumulator(bucket, item)
    return acc


def _group_combine(downstream: Reducer, left: Groups, right: Groups) -> Groups:
    # Keys new to the right side land after the left keys, which is where a
    # sequential fold would have first met them.
    for key, value in right.items():
        if key in left:
            left[key] = downstream.combiner(left[key], value)
        else:
            left[key] = value
    return left


def grouping_by(classifier: Callable, downstream: Reducer | None = None) -> Reducer:
    """
    Group elements by classifier(item), keys in first-encounter order.

    Each group is reduced with downstream (a list by default).
    """
    if downstream is None:
        downstream = to_list()

    return Reducer(
        supplier=dict,
        accumulator=partial(_group_accumulate, classifier, downstream),
        combiner=partial(_group_combine, downstream),
        finisher=partial(_finish_each, downstream),
        characteristics=_downstream_characteristics(downstream),
    )
