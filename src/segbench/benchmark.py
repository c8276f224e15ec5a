from __future__ import annotations

import logging
import random
import time
from typing import Callable, Iterable, List, Sequence

from .alignment import EngineContractError, align_boundaries, check_round_trip
from .config import BenchConfig, validate_config
from .engines import EngineFactory, SegmentationEngine
from .models import RunReport, TestCase, TrialMetrics
from .permutations import for_each_test_case
from .sampling import SamplingError, sample_split

LOGGER = logging.getLogger(__name__)


def run_benchmark(
    dictionary: Iterable[str],
    config: BenchConfig,
    engine_factory: EngineFactory,
    rng: random.Random | None = None,
    on_trial: Callable[[TrialMetrics], None] | None = None,
) -> RunReport:
    """Run ``config.montecarlo_times`` trials and collect their metrics."""
    validate_config(config)
    # Sorted so a seeded run draws the same samples regardless of set ordering.
    words = sorted(dictionary)
    if config.sampling_size > len(words):
        raise SamplingError(
            f"Cannot sample {config.sampling_size} words from a dictionary of {len(words)}."
        )
    if rng is None:
        rng = random.Random(config.seed)

    report = RunReport()
    started_at = time.perf_counter()
    previous: TrialMetrics | None = None
    for trial_index in range(config.montecarlo_times):
        carry = previous if config.cumulative_counters else None
        metrics = run_trial(
            trial_index, words, config, engine_factory, rng, started_at, carry
        )
        report.trials.append(metrics)
        previous = metrics
        if on_trial is not None:
            on_trial(metrics)
    return report


def run_trial(
    trial_index: int,
    words: Sequence[str],
    config: BenchConfig,
    engine_factory: EngineFactory,
    rng: random.Random,
    started_at: float | None = None,
    carry: TrialMetrics | None = None,
) -> TrialMetrics:
    """
    Resample, build a fresh engine from the known words and score every test case.

    ``carry`` seeds the counters with those of an earlier trial; without it the
    counters start from zero.
    """
    if started_at is None:
        started_at = time.perf_counter()
    metrics = TrialMetrics(trial_index=trial_index)
    if carry is not None:
        metrics.predicted_positive = carry.predicted_positive
        metrics.actual_positive = carry.actual_positive
        metrics.true_positive = carry.true_positive

    split = sample_split(words, config.sampling_size, config.holdout_ratio, rng)
    build_start = time.perf_counter()
    engine = engine_factory(split.known)
    metrics.build_ms = (time.perf_counter() - build_start) * 1000.0
    LOGGER.debug(
        "Trial %d: built engine from %d known words (%d held out) in %.1f ms",
        trial_index,
        len(split.known),
        len(split.held_out),
        metrics.build_ms,
    )

    def score(case: TestCase) -> None:
        tokens = _tokenize(engine, case, trial_index)
        metrics.actual_positive += len(case.words)
        metrics.test_cases += 1
        if tokens is None:
            metrics.contract_violations += 1
            return
        metrics.predicted_positive += len(tokens)
        result = align_boundaries(case.words, tokens)
        metrics.true_positive += result.true_positive
        try:
            check_round_trip(case.text, tokens)
        except EngineContractError as exc:
            metrics.contract_violations += 1
            LOGGER.debug(
                "Trial %d: engine contract violation%s: %s",
                trial_index,
                " (tokens exhausted)" if result.exhausted else "",
                exc,
            )

    for_each_test_case(split.sample, config.permutation_width, score)
    metrics.elapsed_ms = (time.perf_counter() - started_at) * 1000.0
    if metrics.contract_violations:
        LOGGER.warning(
            "Trial %d: %d of %d test cases violated the engine contract",
            trial_index,
            metrics.contract_violations,
            metrics.test_cases,
        )
    return metrics


def _tokenize(
    engine: SegmentationEngine, case: TestCase, trial_index: int
) -> List[str] | None:
    """Call the engine, turning any failure into ``None`` so the trial can continue."""
    try:
        tokens = list(engine.tokenize(case.text))
    except Exception as exc:  # noqa: broad-except
        LOGGER.debug(
            "Trial %d: engine failed to tokenize %r: %s", trial_index, case.text, exc
        )
        return None
    if not all(isinstance(token, str) for token in tokens):
        LOGGER.debug(
            "Trial %d: engine returned non-string tokens for %r: %r",
            trial_index,
            case.text,
            tokens,
        )
        return None
    return tokens
