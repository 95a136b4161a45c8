"""Batch search: analyze every ruleset in the catalog and rank the runs.

Runs are independent. With ``workers > 1`` they execute in a process pool,
and results are merged in job order so the output matches a serial run with
the same seed.
"""

from __future__ import annotations

import logging
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from random import Random
from typing import Iterable, Iterator, Sequence

from cube_automata.analysis.analyzer import SimulationResult, analyze_ruleset
from cube_automata.config.constants import (
    BATCH_RANDOM_START_DENSITY,
    PROGRESS_LOG_INTERVAL,
    TOP_RULESET_COUNT,
)
from cube_automata.config.types import BatchSimulationConfig, Ruleset
from cube_automata.domain.grid import Grid
from cube_automata.domain.patterns import create_life3d_seed_pattern, create_random_pattern
from cube_automata.experiments.rulesets import generate_rulesets

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BatchJob:
    """One analyzer run: a ruleset, its run index and the seed it draws from."""

    index: int
    ruleset: Ruleset
    run: int
    seed: int
    initial_pattern: Grid | None = None


@dataclass(frozen=True)
class BatchSummary:
    total_rulesets: int
    total_runs: int
    average_interest_score: float
    best_result: SimulationResult | None
    classifications: dict[str, int]
    top_rulesets: tuple[SimulationResult, ...]


@dataclass(frozen=True)
class BatchResult:
    config: BatchSimulationConfig
    results: tuple[SimulationResult, ...]
    summary: BatchSummary
    timestamp: str


def pattern_rng(seed: int) -> Random:
    """Random stream for a job's start pattern, independent of the analyzer's ``Random(seed)``."""
    return Random(f"{seed}-pattern")


def plan_jobs(config: BatchSimulationConfig, rulesets: Sequence[Ruleset]) -> list[BatchJob]:
    """Expand rulesets into runs and fix each run's starting pattern.

    Run 0 starts from a sparse random pattern when random starts are enabled;
    run 1 starts from the seed cross when pattern starts are enabled; every
    other run lets the analyzer draw its default start. Job ``i`` uses seed
    ``config.seed + i``; its random start comes from :func:`pattern_rng`.
    """
    jobs: list[BatchJob] = []
    for ruleset in rulesets:
        for run in range(config.runs_per_ruleset):
            index = len(jobs)
            seed = config.seed + index
            pattern: Grid | None = None
            if config.include_random_start and run == 0:
                pattern = create_random_pattern(
                    ruleset.cube_size, BATCH_RANDOM_START_DENSITY, rng=pattern_rng(seed)
                )
            elif config.include_pattern_start and run == 1:
                pattern = create_life3d_seed_pattern(ruleset.cube_size)
            jobs.append(BatchJob(index=index, ruleset=ruleset, run=run, seed=seed, initial_pattern=pattern))
    return jobs


def run_job(job: BatchJob) -> SimulationResult:
    result = analyze_ruleset(job.ruleset, job.initial_pattern, seed=job.seed)
    return replace(result, run_index=job.run)


def _execute(jobs: Sequence[BatchJob], workers: int) -> Iterator[SimulationResult]:
    if workers <= 1 or len(jobs) <= 1:
        for job in jobs:
            yield run_job(job)
        return
    with ProcessPoolExecutor(max_workers=workers) as pool:
        yield from pool.map(run_job, jobs, chunksize=max(1, len(jobs) // (workers * 4)))


def summarize(results: Iterable[SimulationResult]) -> BatchSummary:
    """Aggregate counts, mean score, best run, class histogram and the top ten.

    The best run is the first with the maximal score. The top list is a stable
    descending sort, so equal scores keep their run order.
    """
    results = list(results)
    if not results:
        return BatchSummary(
            total_rulesets=0,
            total_runs=0,
            average_interest_score=0.0,
            best_result=None,
            classifications={},
            top_rulesets=(),
        )
    best = results[0]
    for result in results[1:]:
        if result.metrics.interest_score > best.metrics.interest_score:
            best = result
    classifications: dict[str, int] = {}
    for result in results:
        label = result.metrics.classification.value
        classifications[label] = classifications.get(label, 0) + 1
    ranked = sorted(results, key=lambda r: r.metrics.interest_score, reverse=True)
    return BatchSummary(
        total_rulesets=len({r.ruleset.name for r in results}),
        total_runs=len(results),
        average_interest_score=sum(r.metrics.interest_score for r in results) / len(results),
        best_result=best,
        classifications=classifications,
        top_rulesets=tuple(ranked[:TOP_RULESET_COUNT]),
    )


def run_batch_simulation(
    config: BatchSimulationConfig, rulesets: Sequence[Ruleset] | None = None
) -> BatchResult:
    """Analyze every ruleset ``runs_per_ruleset`` times and summarize the batch."""
    if rulesets is None:
        rulesets = generate_rulesets(
            config.cube_size, config.max_generations, config.include_extended_algorithms
        )
    jobs = plan_jobs(config, rulesets)
    logger.info(
        "Starting batch: %d rulesets, %d runs, %d^3 cube, %d max generations",
        len(rulesets),
        len(jobs),
        config.cube_size,
        config.max_generations,
    )
    results: list[SimulationResult] = []
    for result in _execute(jobs, config.workers):
        results.append(result)
        if len(results) % PROGRESS_LOG_INTERVAL == 0:
            logger.info(
                "Progress: %d/%d (%d%%)",
                len(results),
                len(jobs),
                round(len(results) / len(jobs) * 100),
            )
    summary = summarize(results)
    if summary.best_result is not None:
        logger.info("Batch complete; best ruleset: %s", summary.best_result.summary)
    return BatchResult(
        config=config,
        results=tuple(results),
        summary=summary,
        timestamp=datetime.now(timezone.utc).isoformat(),
    )
