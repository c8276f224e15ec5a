"""
segbench package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .alignment import EngineContractError, align_boundaries, score_alignment
from .benchmark import run_benchmark, run_trial
from .config import BenchConfig, config_from_dict, config_from_yaml, load_config
from .dictionary import DictionaryError, normalize_dictionary
from .engines import LongestMatchEngine, SegmentationEngine, create_engine_factory
from .sampling import SamplingError, sample_split

__all__ = [
    "BenchConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "normalize_dictionary",
    "DictionaryError",
    "sample_split",
    "SamplingError",
    "align_boundaries",
    "score_alignment",
    "EngineContractError",
    "SegmentationEngine",
    "LongestMatchEngine",
    "create_engine_factory",
    "run_benchmark",
    "run_trial",
]

__version__ = "0.1.0"
