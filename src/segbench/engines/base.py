from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, List, Sequence


class SegmentationEngine(ABC):
    """Abstract word segmentation engine evaluated by the benchmark."""

    @abstractmethod
    def tokenize(self, text: str) -> List[str]:
        """Split ``text`` into ordered tokens whose concatenation equals ``text``."""
        raise NotImplementedError


# Builds an engine from the vocabulary it is allowed to know about.
EngineFactory = Callable[[Sequence[str]], SegmentationEngine]
