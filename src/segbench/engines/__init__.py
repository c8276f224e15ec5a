from __future__ import annotations

from importlib import import_module
from typing import TYPE_CHECKING

from .base import EngineFactory, SegmentationEngine
from .longest_match import LongestMatchEngine

if TYPE_CHECKING:  # pragma: no cover - import for typing only
    from ..config import BenchConfig

__all__ = [
    "SegmentationEngine",
    "EngineFactory",
    "LongestMatchEngine",
    "create_engine_factory",
    "build_engine_factory_from_config",
]


def create_engine_factory(name: str) -> EngineFactory:
    """
    Resolve an engine factory by name.

    ``longest_match`` selects the built-in trie segmenter. Any other name must be
    a ``package.module:attribute`` reference to a class or callable that accepts
    the vocabulary and returns an object with a ``tokenize`` method.
    """
    normalized = name.strip()
    if normalized.lower() in {"longest_match", "maximal_matching"}:
        return LongestMatchEngine
    if ":" in normalized:
        module_name, _, attribute = normalized.partition(":")
        try:
            module = import_module(module_name)
        except ImportError as exc:
            raise ValueError(f"Cannot import engine module '{module_name}': {exc}") from exc
        factory = getattr(module, attribute, None)
        if factory is None or not callable(factory):
            raise ValueError(f"'{attribute}' in '{module_name}' is not a callable engine factory.")
        return factory
    raise ValueError(f"Unknown engine '{name}'.")


def build_engine_factory_from_config(config: "BenchConfig") -> EngineFactory:
    """Convenience helper to resolve the engine named in BenchConfig."""
    return create_engine_factory(config.engine_name)
