"""Explicit configuration for reductions."""

import os
from dataclasses import dataclass

from prime_collectors.solver.execution import EXECUTOR_NAMES


@dataclass(frozen=True, slots=True)
class ReductionConfig:
    """
    How reduce() should run.

    parallel: split the source into contiguous chunks and combine the results.
    workers: pool size; None lets the executor decide.
    chunks: number of chunks; defaults to workers, then the CPU count.
    executor: "serial", "threads" or "processes"; None defers to the
        PC_EXECUTOR environment variable and then to the GIL status.
    """

    parallel: bool = False
    workers: int | None = None
    chunks: int | None = None
    executor: str | None = None

    def __post_init__(self) -> None:
        if self.workers is not None and self.workers < 1:
            raise ValueError(f"workers must be positive, got {self.workers}")
        if self.chunks is not None and self.chunks < 1:
            raise ValueError(f"chunks must be positive, got {self.chunks}")
        if self.executor is not None and self.executor not in EXECUTOR_NAMES:
            raise ValueError(
                f"executor must be one of {', '.join(EXECUTOR_NAMES)}, got {self.executor!r}"
            )

    def chunk_count(self, length: int) -> int:
        """Number of chunks to split a source of the given length into."""
        wanted = self.chunks or self.workers or os.cpu_count() or 1
        return max(1, min(wanted, length))
