"""
Stock reducers: collecting, counting, summarizing and extremum selection.

Every reducer here is built from module-level functions and functools.partial,
so it can be shipped to a process pool as long as the user-supplied callables
(mappers, keys, predicates) are picklable too.
"""

import operator
from collections.abc import Callable
from dataclasses import dataclass
from functools import partial
from typing import Any

from prime_collectors.errors import EmptyAccumulationError
from prime_collectors.reducer.types import Characteristics, Reducer

_MISSING = object()


@dataclass(slots=True)
class Holder:
    """Accumulator for reducers that may not have seen any element yet."""

    present: bool = False
    value: Any = None


@dataclass(frozen=True, slots=True)
class SummaryStatistics:
    """Count, total, minimum and maximum of a sequence of numbers."""

    count: int = 0
    total: int | float = 0
    minimum: int | float | None = None
    maximum: int | float | None = None

    @property
    def average(self) -> float:
        """Arithmetic mean, 0.0 for an empty sequence."""
        if self.count == 0:
            return 0.0
        return self.total / self.count


@dataclass(slots=True)
class _StatsAccumulator:
    count: int = 0
    total: int | float = 0
    minimum: int | float | None = None
    maximum: int | float | None = None


def _apply(fn: Callable | None, item: Any) -> Any:
    return item if fn is None else fn(item)


# -- to_list -----------------------------------------------------------------


def _append(acc: list, item: Any) -> list:
    acc.append(item)
    return acc


def _extend(left: list, right: list) -> list:
    left.extend(right)
    return left


def to_list() -> Reducer[Any, list, list]:
    """Collect elements into a list in encounter order. Defined on empty input."""
    return Reducer(
        supplier=list,
        accumulator=_append,
        combiner=_extend,
        characteristics=Characteristics(identity_finish=True),
    )


# -- counting / summing ------------------------------------------------------


def _count_one(acc: int, _item: Any) -> int:
    return acc + 1


def _add_mapped(mapper: Callable | None, acc: Any, item: Any) -> Any:
    return acc + _apply(mapper, item)


def counting() -> Reducer[Any, int, int]:
    """Number of elements. Defined on empty input (0)."""
    return Reducer(
        supplier=int,
        accumulator=_count_one,
        combiner=operator.add,
        characteristics=Characteristics(ordered=False, identity_finish=True),
    )


def summing(mapper: Callable | None = None) -> Reducer[Any, Any, Any]:
    """Sum of the (mapped) elements. Defined on empty input (0)."""
    return Reducer(
        supplier=int,
        accumulator=partial(_add_mapped, mapper),
        combiner=operator.add,
        characteristics=Characteristics(ordered=False, identity_finish=True),
    )


# -- summarizing / averaging -------------------------------------------------


def _stats_accumulate(
    mapper: Callable | None, acc: _StatsAccumulator, item: Any
) -> _StatsAccumulator:
    value = _apply(mapper, item)
    acc.count += 1
    acc.total += value
    if acc.minimum is None or value < acc.minimum:
        acc.minimum = value
    if acc.maximum is None or value > acc.maximum:
        acc.maximum = value
    return acc


def _stats_combine(left: _StatsAccumulator, right: _StatsAccumulator) -> _StatsAccumulator:
    if right.count == 0:
        return left
    if left.count == 0:
        return right

    left.count += right.count
    left.total += right.total
    left.minimum = min(left.minimum, right.minimum)
    left.maximum = max(left.maximum, right.maximum)
    return left


def _stats_finish(acc: _StatsAccumulator) -> SummaryStatistics:
    return SummaryStatistics(acc.count, acc.total, acc.minimum, acc.maximum)


def _average_finish(acc: _StatsAccumulator) -> float:
    return _stats_finish(acc).average


def summarizing(
    mapper: Callable | None = None,
) -> Reducer[Any, _StatsAccumulator, SummaryStatistics]:
    """
    Count, total, minimum and maximum in one pass.

    Defined on empty input: count and total are 0, minimum and maximum None.
    """
    return Reducer(
        supplier=_StatsAccumulator,
        accumulator=partial(_stats_accumulate, mapper),
        combiner=_stats_combine,
        finisher=_stats_finish,
        characteristics=Characteristics(ordered=False),
    )


def averaging(mapper: Callable | None = None) -> Reducer[Any, _StatsAccumulator, float]:
    """Arithmetic mean of the (mapped) elements, 0.0 on empty input."""
    return Reducer(
        supplier=_StatsAccumulator,
        accumulator=partial(_stats_accumulate, mapper),
        combiner=_stats_combine,
        finisher=_average_finish,
        characteristics=Characteristics(ordered=False),
    )


# -- min_by / max_by / reducing ----------------------------------------------


def _extremum_accumulate(
    better: Callable[[Any, Any], bool], key: Callable | None, acc: Holder, item: Any
) -> Holder:
    # Strict comparison: on ties the earlier element stays.
    if not acc.present or better(_apply(key, item), _apply(key, acc.value)):
        acc.present = True
        acc.value = item
    return acc


def _extremum_combine(
    better: Callable[[Any, Any], bool], key: Callable | None, left: Holder, right: Holder
) -> Holder:
    if right.present:
        return _extremum_accumulate(better, key, left, right.value)
    return left


def _require_value(what: str, acc: Holder) -> Any:
    if not acc.present:
        raise EmptyAccumulationError(f"{what} of an empty sequence")
    return acc.value


def min_by(key: Callable | None = None) -> Reducer[Any, Holder, Any]:
    """
    Smallest element by key; the first one wins ties.

    Raises EmptyAccumulationError on empty input.
    """
    return Reducer(
        supplier=Holder,
        accumulator=partial(_extremum_accumulate, operator.lt, key),
        combiner=partial(_extremum_combine, operator.lt, key),
        finisher=partial(_require_value, "minimum"),
    )


def max_by(key: Callable | None = None) -> Reducer[Any, Holder, Any]:
    """
    Largest element by key; the first one wins ties.

    Raises EmptyAccumulationError on empty input.
    """
    return Reducer(
        supplier=Holder,
        accumulator=partial(_extremum_accumulate, operator.gt, key),
        combiner=partial(_extremum_combine, operator.gt, key),
        finisher=partial(_require_value, "maximum"),
    )


def _fold_value(op: Callable[[Any, Any], Any], acc: Holder, value: Any) -> Holder:
    if acc.present:
        acc.value = op(acc.value, value)
    else:
        acc.present = True
        acc.value = value
    return acc


def _reducing_accumulate(
    op: Callable[[Any, Any], Any], mapper: Callable | None, acc: Holder, item: Any
) -> Holder:
    return _fold_value(op, acc, _apply(mapper, item))


def _reducing_combine(op: Callable[[Any, Any], Any], left: Holder, right: Holder) -> Holder:
    if right.present:
        return _fold_value(op, left, right.value)
    return left


def reducing(
    op: Callable[[Any, Any], Any],
    identity: Any = _MISSING,
    mapper: Callable | None = None,
) -> Reducer[Any, Holder, Any]:
    """
    Fold (mapped) elements with an associative binary operator.

    With an identity the reducer is defined on empty input and returns the
    identity. Without one, empty input raises EmptyAccumulationError.
    """
    if identity is _MISSING:
        supplier = Holder
    else:
        supplier = partial(Holder, True, identity)

    return Reducer(
        supplier=supplier,
        accumulator=partial(_reducing_accumulate, op, mapper),
        combiner=partial(_reducing_combine, op),
        finisher=partial(_require_value, "reduction"),
    )


# -- adapters ----------------------------------------------------------------


def _mapped_accumulate(mapper: Callable, downstream: Reducer, acc: Any, item: Any) -> Any:
    return downstream.accumulator(acc, mapper(item))


def _filtered_accumulate(predicate: Callable, downstream: Reducer, acc: Any, item: Any) -> Any:
    if predicate(item):
        return downstream.accumulator(acc, item)
    return acc


def mapping(mapper: Callable, downstream: Reducer) -> Reducer:
    """Transform each element with mapper before handing it to downstream."""
    return Reducer(
        supplier=downstream.supplier,
        accumulator=partial(_mapped_accumulate, mapper, downstream),
        combiner=downstream.combiner,
        finisher=downstream.finisher,
        characteristics=downstream.characteristics,
    )


def filtering(predicate: Callable, downstream: Reducer) -> Reducer:
    """Only hand elements matching predicate to downstream."""
    return Reducer(
        supplier=downstream.supplier,
        accumulator=partial(_filtered_accumulate, predicate, downstream),
        combiner=downstream.combiner,
        finisher=downstream.finisher,
        characteristics=downstream.characteristics,
    )
