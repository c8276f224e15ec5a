from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Mapping, MutableMapping

import yaml


@dataclass(slots=True)
class BenchConfig:
    """Configuration options for a Monte Carlo segmentation benchmark run."""

    source_dict_path: str = "data/lexitron_utf8.txt"
    clean_dict_path: str = "data/lexitron_mod.txt"
    sampling_size: int = 200
    montecarlo_times: int = 10
    # Share of each sample kept away from the engine vocabulary.
    holdout_ratio: float = 0.1
    permutation_width: int = 3
    seed: int | None = None
    engine_name: str = "longest_match"
    cumulative_counters: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {field.name for field in fields(BenchConfig)}
    return {key: data[key] for key in data if key in allowed}


def validate_config(config: BenchConfig) -> BenchConfig:
    """Reject values no benchmark run can use."""
    if config.sampling_size < 1:
        raise ValueError(f"sampling_size must be positive, got {config.sampling_size}.")
    if config.montecarlo_times < 1:
        raise ValueError(
            f"montecarlo_times must be positive, got {config.montecarlo_times}."
        )
    if not 0.0 <= config.holdout_ratio <= 1.0:
        raise ValueError(
            f"holdout_ratio must be within [0, 1], got {config.holdout_ratio}."
        )
    if config.permutation_width < 1:
        raise ValueError(
            f"permutation_width must be positive, got {config.permutation_width}."
        )
    return config


def config_from_dict(data: Mapping[str, Any] | None) -> BenchConfig:
    """Build a BenchConfig from a dictionary-like input."""
    if data is None:
        return BenchConfig()
    return BenchConfig(**_build_kwargs(data))


def config_from_yaml(path: str | Path) -> BenchConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> BenchConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return BenchConfig()
    return config_from_yaml(path)
