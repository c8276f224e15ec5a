from __future__ import annotations

import math
from typing import Any, Dict, List

from .models import RunReport, TrialMetrics


def format_score(value: float) -> str:
    return "undefined" if math.isnan(value) else f"{value}"


def format_duration(elapsed_ms: float) -> str:
    """Render milliseconds as ``M m S s MS ms``."""
    total = int(elapsed_ms)
    return f"{total // 60_000} m {(total // 1000) % 60} s {total % 1000} ms"


def format_trial_lines(metrics: TrialMetrics) -> List[str]:
    idx = metrics.trial_index
    return [
        f"Trial {idx} engine build time = {int(metrics.build_ms)} ms",
        f"Trial {idx} F1 score = {format_score(metrics.f1)}",
        f"Trial {idx} total processing time = {format_duration(metrics.elapsed_ms)}",
    ]


def format_summary_line(report: RunReport) -> str:
    return f"Average F1 score = {format_score(report.mean_f1)}"


def _json_float(value: float) -> float | None:
    return None if math.isnan(value) else value


def trial_to_dict(metrics: TrialMetrics) -> Dict[str, Any]:
    """Serialize a trial; undefined scores become ``None``."""
    return {
        "trial_index": metrics.trial_index,
        "test_cases": metrics.test_cases,
        "predicted_positive": metrics.predicted_positive,
        "actual_positive": metrics.actual_positive,
        "true_positive": metrics.true_positive,
        "contract_violations": metrics.contract_violations,
        "precision": _json_float(metrics.precision),
        "recall": _json_float(metrics.recall),
        "f1": _json_float(metrics.f1),
        "build_ms": metrics.build_ms,
        "elapsed_ms": metrics.elapsed_ms,
    }


def report_to_dict(report: RunReport) -> Dict[str, Any]:
    return {
        "trials": [trial_to_dict(trial) for trial in report.trials],
        "mean_f1": _json_float(report.mean_f1),
    }
