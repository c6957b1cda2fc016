"""
Timing harness for the prime partitioning strategies.

Runs each strategy several times over [2, n] and keeps the fastest run,
which filters out warm-up and scheduling noise well enough for comparing
the incremental prime table against plain partitioning_by(is_prime).
"""

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass

import psutil

from prime_collectors.primes.partition import partition_primes, partition_primes_naive
from prime_collectors.primes.types import PartitionResult
from prime_collectors.solver.config import ReductionConfig

logger = logging.getLogger(__name__)

type Strategy = Callable[[int, ReductionConfig | None], PartitionResult]

STRATEGIES: dict[str, Strategy] = {
    "collector": partition_primes,
    "partitioning_by": partition_primes_naive,
}

DEFAULT_BOUND = 1_000_000
DEFAULT_RUNS = 10


@dataclass(frozen=True, slots=True)
class HarnessResult:
    """Fastest wall-clock time of one strategy and the process RSS after it."""

    strategy: str
    fastest_seconds: float
    rss_bytes: int
    prime_count: int


def run_harness(
    n: int = DEFAULT_BOUND,
    runs: int = DEFAULT_RUNS,
    strategies: list[str] | None = None,
    config: ReductionConfig | None = None,
) -> list[HarnessResult]:
    """
    Time each named strategy `runs` times and report the fastest execution.

    Raises ValueError for unknown strategy names or a non-positive run count.
    """
    if runs < 1:
        raise ValueError(f"runs must be positive, got {runs}")

    names = list(STRATEGIES) if strategies is None else strategies
    unknown = [name for name in names if name not in STRATEGIES]
    if unknown:
        raise ValueError(f"unknown strategies: {', '.join(unknown)}")

    process = psutil.Process()
    results: list[HarnessResult] = []

    for name in names:
        strategy = STRATEGIES[name]
        fastest = float("inf")
        prime_count = 0

        for _ in range(runs):
            start = time.perf_counter()
            partition = strategy(n, config)
            elapsed = time.perf_counter() - start
            fastest = min(fastest, elapsed)
            prime_count = len(partition.primes)

        rss = process.memory_info().rss
        logger.info(
            "%s: fastest of %d runs over [2, %d] = %.4fs (%d primes, rss=%.1f MiB)",
            name,
            runs,
            n,
            fastest,
            prime_count,
            rss / (1024 * 1024),
        )
        results.append(HarnessResult(name, fastest, rss, prime_count))

    return results
