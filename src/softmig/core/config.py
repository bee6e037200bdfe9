"""Configuration management with pydantic and YAML support."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field


class OptimizationConfig(BaseModel):
    """Search-loop settings handed to pymoo."""

    pop_size: int = Field(default=100, ge=4, le=10000)
    n_gen: int = Field(default=500, ge=1, le=100000)
    seed: int = Field(default=42, ge=0)
    crossover_prob: float = Field(default=1.0, ge=0.0, le=1.0)
    mutation_prob: float | None = Field(default=None, ge=0.0, le=1.0)


class SoftmigConfig(BaseModel):
    """Root configuration object."""

    instance: Path | None = None
    encoding: Literal["binary", "subset"] = "binary"
    optimization: OptimizationConfig = Field(default_factory=OptimizationConfig)


def load_config(path: str | Path) -> SoftmigConfig:
    """Load configuration from YAML file.

    Args:
        path: Path to YAML config file.

    Returns:
        Parsed SoftmigConfig object.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path) as f:
        data = yaml.safe_load(f)

    return SoftmigConfig.model_validate(data or {})


def save_config(config: SoftmigConfig, path: str | Path) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w") as f:
        yaml.safe_dump(config.model_dump(mode="json"), f, default_flow_style=False)


def default_config() -> SoftmigConfig:
    return SoftmigConfig()


def merge_config(base: SoftmigConfig, overrides: dict[str, Any]) -> SoftmigConfig:
    """Merge overrides into base configuration.

    Args:
        base: Base configuration.
        overrides: Dictionary of override values; nested dicts merge, None
            values are skipped.

    Returns:
        New configuration with overrides applied.
    """
    base_dict = base.model_dump()

    def deep_merge(d1: dict, d2: dict) -> dict:
        result = d1.copy()
        for k, v in d2.items():
            if v is None:
                continue
            if k in result and isinstance(result[k], dict) and isinstance(v, dict):
                result[k] = deep_merge(result[k], v)
            else:
                result[k] = v
        return result

    merged = deep_merge(base_dict, overrides)
    return SoftmigConfig.model_validate(merged)
