from __future__ import annotations

import math
from statistics import fmean
from typing import Iterable


def precision(true_positive: int, predicted_positive: int) -> float:
    """Share of emitted tokens that reproduce a true word boundary."""
    if predicted_positive == 0:
        return math.nan
    return true_positive / predicted_positive


def recall(true_positive: int, actual_positive: int) -> float:
    """Share of true word boundaries reproduced by the engine."""
    if actual_positive == 0:
        return math.nan
    return true_positive / actual_positive


def f1_score(precision_value: float, recall_value: float) -> float:
    """
    Harmonic mean of precision and recall.

    Returns ``nan`` when either input is undefined or both are zero; the value is
    never coerced to 0 or 1.
    """
    if math.isnan(precision_value) or math.isnan(recall_value):
        return math.nan
    total = precision_value + recall_value
    if total == 0:
        return math.nan
    return 2.0 * precision_value * recall_value / total


def mean_f1(values: Iterable[float]) -> float:
    """Arithmetic mean of trial F1 values; an undefined trial makes the mean undefined."""
    collected = list(values)
    if not collected:
        return math.nan
    return fmean(collected)
