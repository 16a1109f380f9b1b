from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict


class CalcConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    precision: Literal["f64", "f32"] = "f64"
    implicit_mul: bool = True


def load_config_dict(path: str | Path) -> dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"config {path} must be a mapping, got {type(data).__name__}")
    return data


def merge_config(cfg: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    merged = dict(cfg)
    for key, value in overrides.items():
        if value is not None:
            merged[key] = value
    return merged


def load_config(path: str | Path | None = None, **overrides: Any) -> CalcConfig:
    cfg = load_config_dict(path) if path else {}
    return CalcConfig.model_validate(merge_config(cfg, overrides))
