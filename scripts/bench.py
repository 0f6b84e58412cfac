"""CLI wrapper to benchmark the storage strategies."""

from __future__ import annotations

import argparse

from sliding_windows.bench import run_benchmark


def main() -> None:
    parser = argparse.ArgumentParser(description="Benchmark sliding window strategies against list slicing")
    parser.add_argument("--length", type=int, default=1024 * 1024, help="Number of input values")
    parser.add_argument("--size", type=int, default=10, help="Window size")
    parser.add_argument("--repeat", type=int, default=3, help="Repetitions per strategy")
    args = parser.parse_args()

    for result in run_benchmark(length=args.length, window_size=args.size, repeat=args.repeat):
        print(f"{result.name:<28} mean={result.mean_s:.4f}s min={result.min_s:.4f}s ({result.windows} windows)")


if __name__ == "__main__":
    main()
