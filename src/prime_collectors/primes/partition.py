"""Partition [2, n] into primes and non-primes."""

import logging
import sys
import time

from prime_collectors.errors import InvalidRangeError
from prime_collectors.primes.collector import prime_numbers_collector
from prime_collectors.primes.primality import is_prime
from prime_collectors.primes.types import PartitionResult
from prime_collectors.reducer.grouping import partitioning_by
from prime_collectors.solver.config import ReductionConfig
from prime_collectors.solver.reduce import reduce

logger = logging.getLogger(__name__)


def validate_bound(n: object) -> int:
    """
    Check that n can be the inclusive upper bound of a candidate range.

    Raises InvalidRangeError for non-integers (bool included), negative
    values, and values above sys.maxsize, the longest range Python can index.
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidRangeError(n, "expected an integer")
    if n < 0:
        raise InvalidRangeError(n, "must not be negative")
    if n > sys.maxsize:
        raise InvalidRangeError(n, f"exceeds {sys.maxsize}")
    return n


def partition_primes(n: int, config: ReductionConfig | None = None) -> PartitionResult:
    """
    Classify every integer in [2, n] as prime or non-prime.

    Each candidate is trial-divided only by the primes already found, up to
    its square root. Bounds below 2 give an empty result.
    """
    n = validate_bound(n)
    if n < 2:
        return PartitionResult()

    start = time.perf_counter()
    result = reduce(range(2, n + 1), prime_numbers_collector(), config)
    logger.debug(
        "Partitioned [2, %d]: %d primes, %d non-primes in %.4fs",
        n,
        len(result.primes),
        len(result.non_primes),
        time.perf_counter() - start,
    )
    return result


def partition_primes_naive(n: int, config: ReductionConfig | None = None) -> PartitionResult:
    """
    Same classification through partitioning_by(is_prime).

    Every candidate is tested against all integers up to its square root,
    with no knowledge of primes found earlier. Kept as a baseline.
    """
    n = validate_bound(n)
    if n < 2:
        return PartitionResult()

    start = time.perf_counter()
    partitions = reduce(range(2, n + 1), partitioning_by(is_prime), config)
    result = PartitionResult(primes=partitions[True], non_primes=partitions[False])
    logger.debug(
        "Partitioned [2, %d] naively: %d primes in %.4fs",
        n,
        len(result.primes),
        time.perf_counter() - start,
    )
    return result
