"""Custom reducer that partitions ascending integers by primality."""

from dataclasses import dataclass, field
from heapq import merge

from prime_collectors.primes.primality import PrimeTable
from prime_collectors.primes.types import PartitionResult
from prime_collectors.reducer.types import Reducer


@dataclass(slots=True)
class PrimeAccumulator:
    """
    Partial partition of an ascending run of integers.

    The table doubles as the list of primes found so far, so each candidate
    is trial-divided only by smaller primes up to its square root.
    """

    table: PrimeTable = field(default_factory=PrimeTable)
    non_primes: list[int] = field(default_factory=list)

    @property
    def primes(self) -> list[int]:
        return self.table.discovered


def _accumulate(acc: PrimeAccumulator, candidate: int) -> PrimeAccumulator:
    if not acc.table.record(candidate):
        acc.non_primes.append(candidate)
    return acc


def _combine(left: PrimeAccumulator, right: PrimeAccumulator) -> PrimeAccumulator:
    """
    Join the accumulator of a later chunk onto an earlier one.

    The right chunk was classified without the primes below its start, so its
    provisional primes are re-tested against the left table. Those with a
    divisor there are composite and get merged into the non-primes.
    """
    demoted = [p for p in right.primes if not left.table.record(p)]
    if demoted:
        left.non_primes.extend(merge(right.non_primes, demoted))
    else:
        left.non_primes.extend(right.non_primes)
    return left


def _finish(acc: PrimeAccumulator) -> PartitionResult:
    return PartitionResult(primes=acc.primes, non_primes=acc.non_primes)


def prime_numbers_collector() -> Reducer[int, PrimeAccumulator, PartitionResult]:
    """
    Partition ascending integers into primes and non-primes.

    Input must be ascending. For a run of consecutive integers starting at 2
    (or below) the classification is exact; integers below 2 are non-prime.
    Chunks may be folded separately and combined in order.
    """
    return Reducer(
        supplier=PrimeAccumulator,
        accumulator=_accumulate,
        combiner=_combine,
        finisher=_finish,
    )
