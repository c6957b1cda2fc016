"""Exception types raised by prime_collectors."""


class PrimeCollectorsError(Exception):
    """Base class for all errors raised by this package."""


class InvalidRangeError(PrimeCollectorsError, ValueError):
    """Upper bound is negative, not an integer, or too large to iterate."""

    def __init__(self, bound: object, reason: str):
        self.bound = bound
        self.reason = reason
        super().__init__(f"invalid upper bound {bound!r}: {reason}")


class EmptyAccumulationError(PrimeCollectorsError, ValueError):
    """A reducer with no identity value was finished on empty input."""
