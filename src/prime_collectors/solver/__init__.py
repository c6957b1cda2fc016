"""Reduction execution: configuration, executor policy and split/combine."""

from prime_collectors.solver.config import ReductionConfig
from prime_collectors.solver.reduce import reduce

__all__ = ["ReductionConfig", "reduce"]
