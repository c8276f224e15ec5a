"""
Tiny helper script showing how to benchmark a custom segmentation engine.
Replace the word list with a real dictionary before drawing conclusions.
"""

from __future__ import annotations

from typing import List, Sequence

from segbench.benchmark import run_benchmark
from segbench.config import BenchConfig
from segbench.engines import SegmentationEngine
from segbench.reporting import format_summary_line, format_trial_lines


class CharacterEngine(SegmentationEngine):
    """Baseline that emits one token per character."""

    def __init__(self, vocabulary: Sequence[str]) -> None:
        self.vocabulary = set(vocabulary)

    def tokenize(self, text: str) -> List[str]:
        return list(text)


def main() -> None:
    words = {"กิน", "ข้าว", "ปลา", "น้ำ", "บ้าน", "แมว", "หมา", "รถ"}
    config = BenchConfig(sampling_size=6, montecarlo_times=3, holdout_ratio=0.2, seed=1)

    report = run_benchmark(
        words,
        config,
        CharacterEngine,
        on_trial=lambda metrics: print("\n".join(format_trial_lines(metrics))),
    )
    print("-" * 40)
    print(format_summary_line(report))


if __name__ == "__main__":
    main()
