from __future__ import annotations

import json
import logging

import pytest

from sliding_windows.logging_utils import log_event


def test_log_event_namespaces_events_as_json(caplog: pytest.LogCaptureFixture) -> None:
    logger = logging.getLogger("sliding_windows.bench")
    with caplog.at_level(logging.INFO, logger="sliding_windows.bench"):
        log_event(logger, "benchmark_result", json_logs=True, windows=3, estimate=(1, None))

    payload = json.loads(caplog.records[-1].getMessage())
    assert payload == {
        "event": "sliding_windows.benchmark_result",
        "module": "sliding_windows.bench",
        "windows": 3,
        "estimate": [1, None],
    }


def test_log_event_respects_level_and_env(caplog: pytest.LogCaptureFixture, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SLIDING_WINDOWS_JSON_LOGS", "false")
    logger = logging.getLogger("sliding_windows.cli")
    with caplog.at_level(logging.DEBUG, logger="sliding_windows.cli"):
        log_event(logger, "windows_finished", level=logging.DEBUG, count=2)

    record = caplog.records[-1]
    assert record.levelno == logging.DEBUG
    assert "'event': 'sliding_windows.windows_finished'" in record.getMessage()
