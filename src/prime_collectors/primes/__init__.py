"""Prime partitioning with an incrementally built prime table."""

from prime_collectors.primes.collector import PrimeAccumulator, prime_numbers_collector
from prime_collectors.primes.partition import (
    partition_primes,
    partition_primes_naive,
    validate_bound,
)
from prime_collectors.primes.primality import PrimeTable, is_prime, is_prime_with_table
from prime_collectors.primes.types import PartitionResult

__all__ = [
    "PartitionResult",
    "PrimeAccumulator",
    "PrimeTable",
    "is_prime",
    "is_prime_with_table",
    "partition_primes",
    "partition_primes_naive",
    "prime_numbers_collector",
    "validate_bound",
]
