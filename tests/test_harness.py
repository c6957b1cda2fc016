"""Tests for the timing harness."""

import logging

import pytest

from prime_collectors.harness import STRATEGIES, HarnessResult, run_harness


def test_runs_every_strategy(caplog) -> None:
    with caplog.at_level(logging.INFO, logger="prime_collectors.harness"):
        results = run_harness(n=200, runs=2)

    assert [result.strategy for result in results] == list(STRATEGIES)
    for result in results:
        assert isinstance(result, HarnessResult)
        assert result.prime_count == 46
        assert result.fastest_seconds >= 0
        assert result.rss_bytes > 0

    assert "fastest of 2 runs" in caplog.text


def test_selected_strategy_only() -> None:
    results = run_harness(n=50, runs=1, strategies=["collector"])
    assert len(results) == 1
    assert results[0].prime_count == 15


def test_unknown_strategy_raises() -> None:
    with pytest.raises(ValueError, match="sieve"):
        run_harness(n=10, runs=1, strategies=["sieve"])


def test_non_positive_runs_raise() -> None:
    with pytest.raises(ValueError):
        run_harness(n=10, runs=0)
