"""Batch search over the ruleset catalog."""

from cube_automata.experiments.batch import (
    BatchJob,
    BatchResult,
    BatchSummary,
    pattern_rng,
    plan_jobs,
    run_batch_simulation,
    summarize,
)
from cube_automata.experiments.rulesets import generate_rulesets

__all__ = [
    "BatchJob",
    "BatchResult",
    "BatchSummary",
    "generate_rulesets",
    "pattern_rng",
    "plan_jobs",
    "run_batch_simulation",
    "summarize",
]
