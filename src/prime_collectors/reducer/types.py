"""Core reducer contract: supplier, accumulator, combiner, finisher."""

from collections.abc import Callable
from dataclasses import dataclass, field


def identity[A](acc: A) -> A:
    """Finisher for reducers whose accumulator already is the result."""
    return acc


@dataclass(frozen=True, slots=True)
class Characteristics:
    """
    Execution hints for a reducer.

    ordered: the result depends on the encounter order of the input.
    mergeable: combiner may be used to join partial accumulators, so
        the input can be split into contiguous chunks and folded in parallel.
    identity_finish: finisher is the identity and can be skipped.
    """

    ordered: bool = True
    mergeable: bool = True
    identity_finish: bool = False


@dataclass(frozen=True, slots=True)
class Reducer[T, A, R]:
    """
    Four-function recipe for folding a sequence of T into a result R.

    Accumulators are threaded through the calls: ``acc = accumulator(acc, item)``.
    Mutable accumulators may be updated in place and returned.

    The combiner receives the accumulator of the earlier chunk first and must
    produce the same accumulator that folding both chunks in order would have
    produced. A fresh accumulator from ``supplier`` is exclusively owned by one
    fold at a time.
    """

    supplier: Callable[[], A]
    accumulator: Callable[[A, T], A]
    combiner: Callable[[A, A], A]
    finisher: Callable[[A], R] = identity
    characteristics: Characteristics = field(default_factory=Characteristics)

    def fold(self, items) -> A:
        """Fold items sequentially into a new accumulator."""
        acc = self.supplier()
        accumulate = self.accumulator
        for item in items:
            acc = accumulate(acc, item)
        return acc

    def finish(self, acc: A) -> R:
        """Apply the finisher, skipping it when it is declared the identity."""
        if self.characteristics.identity_finish:
            return acc  # type: ignore[return-value]
        return self.finisher(acc)
