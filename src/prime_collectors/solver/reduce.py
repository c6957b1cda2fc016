"""Sequential and split/combine execution of reducers."""

import logging
from collections.abc import Callable, Iterable, Sequence
from functools import partial

from prime_collectors.reducer.types import Reducer
from prime_collectors.solver.config import ReductionConfig
from prime_collectors.solver.execution import describe_executor, get_executor_class

logger = logging.getLogger(__name__)

# Each process receives 4 chunks per task batch.
PROCESS_POOL_CHUNKSIZE = 4


def split_contiguous[T](items: Sequence[T], parts: int) -> list[Sequence[T]]:
    """
    Split items into `parts` contiguous slices whose sizes differ by at most one.

    Earlier slices get the extra elements. Slicing keeps the source type, so a
    range splits into ranges.
    """
    if parts < 1:
        raise ValueError(f"parts must be positive, got {parts}")

    size, extra = divmod(len(items), parts)
    chunks: list[Sequence[T]] = []
    start = 0
    for i in range(parts):
        end = start + size + (1 if i < extra else 0)
        chunks.append(items[start:end])
        start = end
    return chunks


def accumulate_chunk[T, A](reducer: Reducer[T, A, object], chunk: Iterable[T]) -> A:
    """Fold one chunk into its own fresh accumulator."""
    return reducer.fold(chunk)


def combine_all[A](combiner: Callable[[A, A], A], partials: list[A]) -> A:
    """
    Combine ordered partial accumulators pairwise, neighbour with neighbour.

    The left operand always comes from earlier input than the right one.
    """
    if not partials:
        raise ValueError("nothing to combine")

    while len(partials) > 1:
        merged = [
            combiner(partials[i], partials[i + 1]) for i in range(0, len(partials) - 1, 2)
        ]
        if len(partials) % 2:
            merged.append(partials[-1])
        partials = merged
    return partials[0]


def reduce[T, A, R](
    source: Iterable[T],
    reducer: Reducer[T, A, R],
    config: ReductionConfig | None = None,
) -> R:
    """
    Fold source with reducer and return the finished result.

    Sequential by default. With config.parallel the source is materialized,
    split into contiguous chunks, each chunk is folded into its own
    accumulator, and the accumulators are combined in order. Both paths give
    the same result for a valid reducer.
    """
    if config is None:
        config = ReductionConfig()

    if not config.parallel:
        return reducer.finish(reducer.fold(source))

    if not reducer.characteristics.mergeable:
        logger.debug("Reducer is not mergeable, folding sequentially")
        return reducer.finish(reducer.fold(source))

    items = source if isinstance(source, Sequence) else list(source)
    chunk_count = config.chunk_count(len(items))
    if chunk_count < 2:
        return reducer.finish(reducer.fold(items))

    executor_class = get_executor_class(config.executor)
    executor_name = describe_executor(executor_class)
    chunks = split_contiguous(items, chunk_count)

    logger.debug(
        "Parallel reduce: items=%d, chunks=%d, executor=%s, workers=%s",
        len(items),
        chunk_count,
        executor_name,
        "auto" if config.workers is None else config.workers,
    )

    fold_chunk = partial(accumulate_chunk, reducer)
    if executor_class is None:
        partials = [fold_chunk(chunk) for chunk in chunks]
    else:
        with executor_class(max_workers=config.workers) as executor:
            if executor_name == "processes":
                partials = list(
                    executor.map(fold_chunk, chunks, chunksize=PROCESS_POOL_CHUNKSIZE)
                )
            else:
                partials = list(executor.map(fold_chunk, chunks))

    return reducer.finish(combine_all(reducer.combiner, partials))
