"""Command line interface for sliding windows."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Iterable, Sequence

from . import __version__
from .adaptor import SlidingWindows
from .bench import run_benchmark
from .config import WindowConfig, load_window_config
from .ingest import ingest_values
from .logging_utils import configure_logging, log_event
from .storage import CAPACITY_POLICIES, STRATEGIES, Storage

logger = logging.getLogger(__name__)


def _print_result(result: Any, as_json: bool) -> None:
    if as_json:
        print(json.dumps(result, indent=2))
    else:
        print(result)


def _format_hint(lower: int, upper: int | None) -> str:
    return f"({lower}, {'None' if upper is None else upper})"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sliding-windows",
        description="Produce sliding windows over a sequence of values without copying them.",
    )
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
    parser.add_argument("--json-logs", action="store_true", help="Emit JSON logs")

    subparsers = parser.add_subparsers(dest="command", required=True)

    windows = subparsers.add_parser("windows", help="Print the windows of an input file or range")
    windows.add_argument("input", type=Path, nargs="?", help="Path to CSV/JSON/JSONL values")
    windows.add_argument("--range", dest="range_end", type=int, help="Use the integers 0..N-1 as input")
    windows.add_argument("--value-column", type=str, help="Column name for CSV inputs")
    windows.add_argument("--size", type=int, help="Window size")
    windows.add_argument("--strategy", choices=STRATEGIES, help="Buffer maintenance strategy")
    windows.add_argument("--capacity", choices=CAPACITY_POLICIES, help="Capacity policy")
    windows.add_argument("--config", type=Path, help="Window config file (YAML or JSON)")
    windows.add_argument("--limit", type=int, help="Stop after this many windows")
    windows.add_argument("--json", action="store_true", help="Emit windows as JSON")

    hint = subparsers.add_parser("hint", help="Estimate the window count for an input estimate")
    hint.add_argument("--lower", type=int, required=True, help="Lower bound of the input length")
    hint.add_argument("--upper", type=int, help="Upper bound of the input length (omit if unknown)")
    hint.add_argument("--size", type=int, required=True, help="Window size")
    hint.add_argument("--json", action="store_true", help="Emit estimate as JSON")

    bench = subparsers.add_parser("bench", help="Benchmark storage strategies")
    bench.add_argument("--length", type=int, default=100_000, help="Number of input values")
    bench.add_argument("--size", type=int, default=10, help="Window size")
    bench.add_argument("--repeat", type=int, default=3, help="Repetitions per strategy")
    bench.add_argument("--json", action="store_true", help="Emit results as JSON")

    validate = subparsers.add_parser("validate", help="Validate a window config file")
    validate.add_argument("config", type=Path, help="Path to configuration file")
    validate.add_argument("--json", action="store_true", help="Emit normalized config as JSON")

    subparsers.add_parser("version", help="Display the installed version")

    return parser


def _resolve_config(args: argparse.Namespace) -> WindowConfig:
    options: dict[str, Any] = {}
    if args.config:
        options.update(load_window_config(args.config).model_dump(exclude_none=True))
    for key, value in (("window_size", args.size), ("strategy", args.strategy), ("capacity", args.capacity)):
        if value is not None:
            options[key] = value
    if "window_size" not in options:
        raise SystemExit("Specify --size or a --config with window_size.")
    return WindowConfig.model_validate(options)


def _load_input(args: argparse.Namespace) -> Iterable[Any]:
    if args.range_end is not None:
        if args.input:
            raise SystemExit("Use either an input file or --range, not both.")
        return range(args.range_end)
    if not args.input:
        raise SystemExit("Specify an input file or --range.")
    return ingest_values(args.input, value_column=args.value_column)


def _run_windows(args: argparse.Namespace) -> None:
    config = _resolve_config(args)
    values = _load_input(args)
    storage: Storage[Any] = Storage.from_config(config)
    adaptor = SlidingWindows(values, storage)
    log_event(
        logger,
        "windows_started",
        window_size=config.window_size,
        strategy=config.strategy,
        estimate=list(adaptor.size_hint()),
    )

    count = 0
    collected: list[list[Any]] = []
    for window in adaptor:
        if args.limit is not None and count >= args.limit:
            break
        if args.json:
            collected.append(window.to_list())
        else:
            print(window.to_list())
        count += 1
    if args.json:
        _print_result({"window_size": config.window_size, "windows": collected}, as_json=True)
    log_event(logger, "windows_finished", count=count)


class _HintSource:
    """Input that yields nothing and only reports a length estimate."""

    def __init__(self, lower: int, upper: int | None) -> None:
        self._hint = (lower, upper)

    def __next__(self) -> Any:
        raise StopIteration

    def size_hint(self) -> tuple[int, int | None]:
        return self._hint


def _estimate(lower: int, upper: int | None, size: int) -> tuple[int, int | None]:
    return SlidingWindows(_HintSource(lower, upper), Storage(size)).size_hint()


def main(argv: Sequence[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(level=args.log_level, json_logs=args.json_logs)

    try:
        if args.command == "windows":
            _run_windows(args)
        elif args.command == "hint":
            if args.size < 0 or args.lower < 0 or (args.upper is not None and args.upper < args.lower):
                raise SystemExit("Sizes must be non-negative and --upper must not be below --lower.")
            estimate = _estimate(args.lower, args.upper, args.size)
            if args.json:
                _print_result({"lower": estimate[0], "upper": estimate[1]}, as_json=True)
            else:
                print(_format_hint(*estimate))
        elif args.command == "bench":
            results = run_benchmark(length=args.length, window_size=args.size, repeat=args.repeat)
            if args.json:
                _print_result([r.as_dict() for r in results], as_json=True)
            else:
                for r in results:
                    print(f"{r.name:<28} windows={r.windows} mean={r.mean_s:.6f}s std={r.std_s:.6f}s min={r.min_s:.6f}s")
        elif args.command == "validate":
            config = load_window_config(args.config)
            _print_result(config.model_dump(), as_json=args.json)
        elif args.command == "version":
            print(__version__)
    except (FileNotFoundError, ValueError) as exc:
        raise SystemExit(str(exc)) from exc


if __name__ == "__main__":
    main()
