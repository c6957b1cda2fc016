"""Reducer contract and stock reducers."""

from prime_collectors.reducer.builtin import (
    SummaryStatistics,
    averaging,
    counting,
    filtering,
    mapping,
    max_by,
    min_by,
    reducing,
    summarizing,
    summing,
    to_list,
)
from prime_collectors.reducer.grouping import grouping_by, partitioning_by
from prime_collectors.reducer.types import Characteristics, Reducer, identity

__all__ = [
    "Characteristics",
    "Reducer",
    "SummaryStatistics",
    "averaging",
    "counting",
    "filtering",
    "grouping_by",
    "identity",
    "mapping",
    "max_by",
    "min_by",
    "partitioning_by",
    "reducing",
    "summarizing",
    "summing",
    "to_list",
]
