from __future__ import annotations

import pytest

from sliding_windows import SlidingWindowError
from sliding_windows.bench import _expect_fill, run_benchmark


def test_run_benchmark_counts_windows_per_strategy() -> None:
    results = run_benchmark(length=20, window_size=4, repeat=1, strategies=["ring", "drain"])

    assert [r.name for r in results] == ["sliding_windows[ring]", "sliding_windows[drain]", "list_slices"]
    assert all(r.windows == 17 for r in results)
    assert all(r.min_s <= r.mean_s for r in results)


def test_benchmark_value_check_raises_instead_of_asserting() -> None:
    _expect_fill(12)
    with pytest.raises(SlidingWindowError):
        _expect_fill(13)


def test_run_benchmark_rejects_zero_repeat() -> None:
    with pytest.raises(ValueError):
        run_benchmark(length=10, repeat=0)
