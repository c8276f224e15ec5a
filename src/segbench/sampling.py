from __future__ import annotations

import math
import random
from typing import Sequence

from .models import SampleSplit


class SamplingError(ValueError):
    """Raised when a sample cannot be drawn from the dictionary."""


def split_point(sample_size: int, holdout_ratio: float) -> int:
    """Number of leading sampled words withheld from the engine vocabulary."""
    if not 0.0 <= holdout_ratio <= 1.0:
        raise SamplingError(f"holdout_ratio must be within [0, 1], got {holdout_ratio}.")
    return math.floor(sample_size * holdout_ratio)


def sample_split(
    words: Sequence[str],
    sample_size: int,
    holdout_ratio: float,
    rng: random.Random,
) -> SampleSplit:
    """
    Draw ``sample_size`` distinct entries from ``words`` and split off the held-out part.

    ``words`` must be an indexable view of the dictionary; it is sampled in place
    without being copied.
    """
    if sample_size < 0:
        raise SamplingError(f"sample_size must be non-negative, got {sample_size}.")
    if sample_size > len(words):
        raise SamplingError(
            f"Cannot sample {sample_size} words from a dictionary of {len(words)}."
        )
    split = split_point(sample_size, holdout_ratio)
    return SampleSplit(sample=rng.sample(words, sample_size), split=split)
