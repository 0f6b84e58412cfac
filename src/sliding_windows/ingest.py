"""Loading input values for the command line tools."""

from __future__ import annotations

import json
from pathlib import Path
from typing import List

import pandas as pd


def ingest_values(path: str | Path, value_column: str | None = None) -> List[float]:
    """Load numbers from a CSV, JSON list, or JSONL file."""

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")

    suffix = path.suffix.lower()
    if suffix == ".jsonl":
        values: list[float] = []
        for line in path.read_text(encoding="utf-8").splitlines():
            if not line.strip():
                continue
            obj = json.loads(line)
            if isinstance(obj, (int, float)):
                values.append(float(obj))
            elif isinstance(obj, dict) and value_column and value_column in obj:
                values.append(float(obj[value_column]))
        return values
    if suffix == ".json":
        loaded = json.loads(path.read_text(encoding="utf-8"))
        if isinstance(loaded, list):
            return [float(x) for x in loaded if isinstance(x, (int, float))]
        raise ValueError("JSON input file must contain a list of numbers")

    df = pd.read_csv(path)
    if df.empty:
        raise ValueError(f"Input file {path} is empty")
    if value_column is None:
        value_column = df.columns[0]
    elif value_column not in df.columns:
        raise ValueError(f"Column '{value_column}' not found in {path}")
    return df[value_column].astype(float).tolist()
