"""Micro-benchmark comparing storage strategies against plain list slicing."""

from __future__ import annotations

import logging
import time
from dataclasses import asdict, dataclass
from typing import Callable, Dict, List, Sequence

import numpy as np

from .adaptor import SlidingWindows
from .errors import SlidingWindowError
from .logging_utils import log_event
from .storage import STRATEGIES, Storage

logger = logging.getLogger(__name__)

FILL_VALUE = 12


@dataclass
class BenchmarkResult:
    name: str
    windows: int
    mean_s: float
    std_s: float
    min_s: float

    def as_dict(self) -> Dict[str, object]:
        return asdict(self)


def _expect_fill(value: int) -> None:
    if value != FILL_VALUE:
        raise SlidingWindowError(f"benchmark window yielded {value!r}, expected {FILL_VALUE}")


def _time(fn: Callable[[], int], repeat: int) -> tuple[int, np.ndarray]:
    timings = np.empty(repeat, dtype=float)
    count = 0
    for idx in range(repeat):
        start = time.perf_counter()
        count = fn()
        timings[idx] = time.perf_counter() - start
    return count, timings


def _summarize(name: str, count: int, timings: np.ndarray) -> BenchmarkResult:
    return BenchmarkResult(
        name=name,
        windows=count,
        mean_s=float(np.mean(timings)),
        std_s=float(np.std(timings)),
        min_s=float(np.min(timings)),
    )


def run_benchmark(
    length: int = 100_000,
    window_size: int = 10,
    repeat: int = 3,
    strategies: Sequence[str] = STRATEGIES,
) -> List[BenchmarkResult]:
    """Walk every window of a constant array once per strategy, plus a slicing baseline."""

    if repeat < 1:
        raise ValueError("repeat must be at least 1")
    values = np.full(length, FILL_VALUE, dtype=np.uint8).tolist()
    results: list[BenchmarkResult] = []

    for strategy in strategies:
        storage: Storage[int] = Storage(window_size, strategy=strategy)

        def consume(storage: Storage[int] = storage) -> int:
            count = 0
            for window in SlidingWindows(values, storage):
                for value in window:
                    _expect_fill(value)
                count += 1
            return count

        count, timings = _time(consume, repeat)
        results.append(_summarize(f"sliding_windows[{strategy}]", count, timings))

    def slice_baseline() -> int:
        count = 0
        for start in range(max(len(values) - window_size + 1, 0) if window_size else 0):
            for value in values[start : start + window_size]:
                _expect_fill(value)
            count += 1
        return count

    count, timings = _time(slice_baseline, repeat)
    results.append(_summarize("list_slices", count, timings))

    for result in results:
        log_event(logger, "benchmark_result", **result.as_dict())
    return results
