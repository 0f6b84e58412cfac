"""Window configuration models and file loading."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .storage import CAPACITY_POLICIES, STRATEGIES


class WindowConfig(BaseModel):
    """Construction-time options for a :class:`~sliding_windows.storage.Storage`."""

    model_config = ConfigDict(extra="forbid")

    window_size: int = Field(ge=0)
    strategy: str = "ring"
    capacity: str = "double"
    size_hint: Optional[int] = Field(default=None, ge=0)

    @field_validator("strategy")
    @classmethod
    def _known_strategy(cls, value: str) -> str:
        value = value.lower()
        if value not in STRATEGIES:
            raise ValueError(f"strategy must be one of {', '.join(STRATEGIES)}")
        return value

    @field_validator("capacity")
    @classmethod
    def _known_capacity(cls, value: str) -> str:
        value = value.lower()
        if value not in CAPACITY_POLICIES:
            raise ValueError(f"capacity must be one of {', '.join(CAPACITY_POLICIES)}")
        return value

    @classmethod
    def from_mapping(cls, cfg: Mapping[str, Any]) -> "WindowConfig":
        section = cfg.get("windows", cfg)
        if not isinstance(section, Mapping):
            raise ValueError("'windows' section must be a mapping")
        return cls.model_validate(dict(section))


def load_window_config(path: str | Path) -> WindowConfig:
    """Load a :class:`WindowConfig` from a YAML or JSON file.

    The file may hold the options at the top level or under a ``windows``
    key, so the settings can live alongside other sections of a larger file.
    """

    raw = Path(path)
    if not raw.exists():
        raise FileNotFoundError(f"Configuration file not found: {raw}")
    text = raw.read_text(encoding="utf-8")
    cfg = yaml.safe_load(text) if raw.suffix.lower() in {".yml", ".yaml"} else json.loads(text)
    if not isinstance(cfg, Mapping):
        raise ValueError("Window config file must contain a mapping/object at the top level")
    return WindowConfig.from_mapping(cfg)
