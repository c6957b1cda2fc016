"""Prime Collectors - custom reducers and prime partitioning."""

from prime_collectors.errors import (
    EmptyAccumulationError,
    InvalidRangeError,
    PrimeCollectorsError,
)
from prime_collectors.primes import PartitionResult, partition_primes, prime_numbers_collector
from prime_collectors.reducer import Characteristics, Reducer
from prime_collectors.solver import ReductionConfig, reduce

__all__ = [
    "Characteristics",
    "EmptyAccumulationError",
    "InvalidRangeError",
    "PartitionResult",
    "PrimeCollectorsError",
    "Reducer",
    "ReductionConfig",
    "partition_primes",
    "prime_numbers_collector",
    "reduce",
]
