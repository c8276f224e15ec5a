from __future__ import annotations

from dataclasses import dataclass, field
from itertools import accumulate

from .metrics import f1_score, mean_f1, precision, recall


@dataclass(slots=True)
class SampleSplit:
    """A sampled slice of the dictionary partitioned into held-out and known words."""

    sample: list[str]
    split: int

    @property
    def held_out(self) -> list[str]:
        return self.sample[: self.split]

    @property
    def known(self) -> list[str]:
        return self.sample[self.split :]


@dataclass(slots=True)
class TestCase:
    """An ordered tuple of words and the string formed by joining them."""

    __test__ = False

    words: tuple[str, ...]
    text: str

    @property
    def boundaries(self) -> list[int]:
        """End offset of every word within ``text``."""
        return list(accumulate(len(word) for word in self.words))


@dataclass(slots=True)
class AlignmentResult:
    """Outcome of aligning engine tokens against the expected words."""

    true_positive: int
    exhausted: bool = False


@dataclass(slots=True)
class TrialMetrics:
    """Counters and timings collected for one Monte Carlo trial."""

    trial_index: int
    predicted_positive: int = 0
    actual_positive: int = 0
    true_positive: int = 0
    test_cases: int = 0
    contract_violations: int = 0
    build_ms: float = 0.0
    elapsed_ms: float = 0.0

    @property
    def precision(self) -> float:
        return precision(self.true_positive, self.predicted_positive)

    @property
    def recall(self) -> float:
        return recall(self.true_positive, self.actual_positive)

    @property
    def f1(self) -> float:
        return f1_score(self.precision, self.recall)


@dataclass(slots=True)
class RunReport:
    """All trial metrics produced by a benchmark run."""

    trials: list[TrialMetrics] = field(default_factory=list)

    @property
    def mean_f1(self) -> float:
        return mean_f1(trial.f1 for trial in self.trials)
