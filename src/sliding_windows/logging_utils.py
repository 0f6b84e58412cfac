"""Structured logging helpers."""

from __future__ import annotations

import json
import logging
import os
from typing import Any

EVENT_PREFIX = "sliding_windows"


def _json_logs_enabled() -> bool:
    return os.getenv("SLIDING_WINDOWS_JSON_LOGS", "false").lower() == "true"


def configure_logging(level: str = "INFO", json_logs: bool | None = None) -> None:
    """Configure global logging. Respects SLIDING_WINDOWS_JSON_LOGS env override."""

    if json_logs is None:
        json_logs = _json_logs_enabled()

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(message)s" if json_logs else "%(levelname)s:%(name)s:%(message)s",
    )


def log_event(
    logger: logging.Logger,
    event: str,
    *,
    json_logs: bool | None = None,
    level: int = logging.INFO,
    **fields: Any,
) -> None:
    """Emit a ``sliding_windows.<event>`` record tagged with the emitting module.

    Window contents and estimates are lists/tuples, so values that JSON cannot
    encode natively fall back to ``str``.
    """

    if json_logs is None:
        json_logs = _json_logs_enabled()

    payload = {"event": f"{EVENT_PREFIX}.{event}", "module": logger.name, **fields}
    logger.log(level, json.dumps(payload, default=str) if json_logs else payload)
