from __future__ import annotations

import json
from pathlib import Path

import pandas as pd
import pytest

from sliding_windows import __version__, cli


def test_cli_windows_over_range_as_json(capsys: pytest.CaptureFixture[str]) -> None:
    cli.main(["windows", "--range", "5", "--size", "3", "--strategy", "drain", "--json"])

    payload = json.loads(capsys.readouterr().out)
    assert payload["window_size"] == 3
    assert payload["windows"] == [[0, 1, 2], [1, 2, 3], [2, 3, 4]]


def test_cli_windows_reads_csv_with_config(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    dataset_path = tmp_path / "values.csv"
    pd.DataFrame({"timestamp": [0, 1, 2, 3], "value": [1.0, 2.0, 3.0, 4.0]}).to_csv(dataset_path, index=False)
    config_path = tmp_path / "windows.yml"
    config_path.write_text("windows:\n  window_size: 2\n  strategy: shift\n", encoding="utf-8")

    cli.main(["windows", str(dataset_path), "--value-column", "value", "--config", str(config_path), "--limit", "2"])

    lines = capsys.readouterr().out.splitlines()
    assert lines == ["[1.0, 2.0]", "[2.0, 3.0]"]


def test_cli_windows_reads_json_list(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    samples_path = tmp_path / "values.json"
    samples_path.write_text(json.dumps([0, 1, 2]), encoding="utf-8")

    cli.main(["windows", str(samples_path), "--size", "4", "--json"])

    assert json.loads(capsys.readouterr().out)["windows"] == []


def test_cli_windows_requires_size_and_input() -> None:
    with pytest.raises(SystemExit):
        cli.main(["windows", "--range", "5"])
    with pytest.raises(SystemExit):
        cli.main(["windows", "--size", "2"])


def test_cli_windows_reports_missing_file(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["windows", str(tmp_path / "missing.csv"), "--size", "2"])
    assert "not found" in str(excinfo.value)


@pytest.mark.parametrize(
    "args, expected",
    [
        (["--lower", "5", "--upper", "5", "--size", "3"], {"lower": 3, "upper": 3}),
        (["--lower", "5", "--upper", "5", "--size", "6"], {"lower": 1, "upper": 1}),
        (["--lower", "4", "--size", "3"], {"lower": 2, "upper": None}),
        (["--lower", "4", "--size", "0"], {"lower": 0, "upper": None}),
    ],
)
def test_cli_hint(args: list[str], expected: dict[str, object], capsys: pytest.CaptureFixture[str]) -> None:
    cli.main(["hint", *args, "--json"])
    assert json.loads(capsys.readouterr().out) == expected


def test_cli_hint_plain_output(capsys: pytest.CaptureFixture[str]) -> None:
    cli.main(["hint", "--lower", "0", "--upper", "0", "--size", "2"])
    assert capsys.readouterr().out.strip() == "(0, 0)"


def test_cli_validate_normalizes_config(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config_path = tmp_path / "windows.json"
    config_path.write_text(json.dumps({"window_size": 3, "strategy": "Ring"}), encoding="utf-8")

    cli.main(["validate", str(config_path), "--json"])

    payload = json.loads(capsys.readouterr().out)
    assert payload == {"window_size": 3, "strategy": "ring", "capacity": "double", "size_hint": None}


def test_cli_validate_rejects_bad_config(tmp_path: Path) -> None:
    config_path = tmp_path / "windows.json"
    config_path.write_text(json.dumps({"window_size": -2}), encoding="utf-8")

    with pytest.raises(SystemExit):
        cli.main(["validate", str(config_path)])


def test_cli_bench_reports_every_strategy(capsys: pytest.CaptureFixture[str]) -> None:
    cli.main(["bench", "--length", "50", "--size", "5", "--repeat", "2", "--json"])

    results = json.loads(capsys.readouterr().out)
    names = [r["name"] for r in results]
    assert names == [
        "sliding_windows[ring]",
        "sliding_windows[shift]",
        "sliding_windows[drain]",
        "list_slices",
    ]
    assert all(r["windows"] == 46 for r in results)


def test_cli_version(capsys: pytest.CaptureFixture[str]) -> None:
    cli.main(["version"])
    assert capsys.readouterr().out.strip() == __version__
