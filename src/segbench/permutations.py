from __future__ import annotations

import itertools
import math
from typing import Callable, Iterator, Sequence

from .models import TestCase


def iter_permutations(sample: Sequence[str], width: int) -> Iterator[tuple[str, ...]]:
    """
    Lazily yield every ordered ``width``-tuple of distinct sample positions.

    Equal words at different positions are distinct selections.
    """
    if width < 1:
        raise ValueError(f"Permutation width must be positive, got {width}.")
    return itertools.permutations(sample, width)


def count_permutations(n: int, width: int) -> int:
    """n * (n - 1) * ... * (n - width + 1); zero when width exceeds n."""
    return math.perm(n, width)


def build_test_case(words: Sequence[str]) -> TestCase:
    return TestCase(words=tuple(words), text="".join(words))


def for_each_test_case(
    sample: Sequence[str],
    width: int,
    callback: Callable[[TestCase], None],
) -> int:
    """Invoke ``callback`` for each test case of the sample and return how many were visited."""
    visited = 0
    for words in iter_permutations(sample, width):
        callback(build_test_case(words))
        visited += 1
    return visited
