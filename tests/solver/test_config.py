"""Tests for ReductionConfig."""

import pytest

from prime_collectors.solver.config import ReductionConfig


def test_defaults_are_sequential() -> None:
    config = ReductionConfig()
    assert not config.parallel
    assert config.executor is None


@pytest.mark.parametrize(
    "kwargs",
    [{"workers": 0}, {"chunks": -1}, {"executor": "fibers"}],
)
def test_invalid_values_raise(kwargs: dict) -> None:
    with pytest.raises(ValueError):
        ReductionConfig(**kwargs)


def test_chunk_count_prefers_chunks_then_workers() -> None:
    assert ReductionConfig(chunks=3, workers=8).chunk_count(100) == 3
    assert ReductionConfig(workers=8).chunk_count(100) == 8


def test_chunk_count_capped_by_length() -> None:
    assert ReductionConfig(chunks=10).chunk_count(4) == 4
    assert ReductionConfig(chunks=10).chunk_count(0) == 1


def test_chunk_count_falls_back_to_cpu_count(monkeypatch) -> None:
    monkeypatch.setattr("prime_collectors.solver.config.os.cpu_count", lambda: None)
    assert ReductionConfig().chunk_count(100) == 1
