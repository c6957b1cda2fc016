"""Primality predicates and the incremental prime table."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from itertools import takewhile
from math import isqrt


def is_prime(candidate: int) -> bool:
    """
    Trial division by every integer in [2, isqrt(candidate)].

    Independent of any prime table; used as the baseline predicate.
    """
    if candidate < 2:
        return False
    return all(candidate % divisor for divisor in range(2, isqrt(candidate) + 1))


def is_prime_with_table(primes: Iterable[int], candidate: int) -> bool:
    """
    Trial division by the ascending primes found so far.

    The scan stops at the first prime above isqrt(candidate); any composite
    has a prime factor at or below that bound.
    """
    if candidate < 2:
        return False
    root = isqrt(candidate)
    return all(candidate % p for p in takewhile(lambda p: p <= root, primes))


@dataclass(slots=True)
class PrimeTable:
    """Primes discovered so far in one classification pass, ascending."""

    discovered: list[int] = field(default_factory=list)

    def is_prime(self, candidate: int) -> bool:
        return is_prime_with_table(self.discovered, candidate)

    def record(self, candidate: int) -> bool:
        """Classify candidate, appending it to the table if it is prime."""
        if self.is_prime(candidate):
            self.discovered.append(candidate)
            return True
        return False
