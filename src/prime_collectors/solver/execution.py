"""Execution policy and executor selection utilities."""

import os
import sys
from concurrent.futures import ProcessPoolExecutor, ThreadPoolExecutor

type ExecutorClass = type[ThreadPoolExecutor] | type[ProcessPoolExecutor] | None

# Environment variable to override executor selection.
PC_EXECUTOR_ENV = "PC_EXECUTOR"

EXECUTOR_NAMES = ("serial", "threads", "processes")


def is_gil_enabled() -> bool:
    """Check if GIL is enabled."""
    try:
        return sys._is_gil_enabled()
    except AttributeError:
        return True


def get_executor_class(override: str | None = None) -> ExecutorClass:
    """
    Select the executor class used to fold chunks.

    Priority:
    1. Explicit override argument ("threads", "processes", or "serial")
    2. PC_EXECUTOR env var with the same values
    3. Auto-select based on GIL status (disabled -> threads, enabled -> processes)

    "serial" folds every chunk in the calling thread, which still exercises
    the combiner and is convenient for debugging with breakpoints.
    """
    executor_override = (override or os.environ.get(PC_EXECUTOR_ENV, "")).lower()

    if executor_override == "threads":
        return ThreadPoolExecutor
    if executor_override == "processes":
        return ProcessPoolExecutor
    if executor_override == "serial":
        return None

    if is_gil_enabled():
        return ProcessPoolExecutor
    return ThreadPoolExecutor


def describe_executor(executor_class: ExecutorClass) -> str:
    """Convert an executor class into a readable policy name."""
    if executor_class is None:
        return "serial"
    if executor_class is ThreadPoolExecutor:
        return "threads"
    return "processes"
