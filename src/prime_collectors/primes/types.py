"""Result type for prime partitioning."""

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class PartitionResult:
    """Integers of a range split into primes and non-primes, both ascending."""

    primes: list[int] = field(default_factory=list)
    non_primes: list[int] = field(default_factory=list)

    def as_dict(self) -> dict[bool, list[int]]:
        """Same shape as partitioning_by output: {False: non-primes, True: primes}."""
        return {False: self.non_primes, True: self.primes}
