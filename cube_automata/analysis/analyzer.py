"""Drive one ruleset to completion and turn its trajectory into metrics."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from random import Random
from typing import Sequence

from cube_automata.config.constants import ANALYZER_START_DENSITY
from cube_automata.config.types import Ruleset
from cube_automata.domain.grid import Grid, color_counts, population
from cube_automata.domain.snapshot import GenerationSnapshot
from cube_automata.metrics.scoring import Classification, ScoreInputs, classify, interest_score
from cube_automata.metrics.spatial import (
    center_of_mass,
    cluster_count,
    edge_population,
    spatial_distribution,
)
from cube_automata.metrics.temporal import detect_oscillation, find_stability_generation
from cube_automata.simulation.driver import Simulation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimulationMetrics:
    """Scalar summary of one run."""

    total_generations: int = 0
    final_population: int = 0
    max_population: int = 0
    avg_population: float = 0.0
    stability_generation: int = 0
    oscillation_period: int = 0
    color_diversity: int = 0
    spatial_distribution: float = 0.0
    avg_change_per_generation: float = 0.0
    total_changes: int = 0
    cluster_count: int = 0
    edge_population: int = 0
    center_population: int = 0
    interest_score: int = 0
    classification: Classification = Classification.EXTINCT


@dataclass(frozen=True)
class SimulationResult:
    ruleset: Ruleset
    metrics: SimulationMetrics
    generation_data: tuple[GenerationSnapshot, ...]
    seed: int | None = None
    run_index: int = 0

    @property
    def summary(self) -> str:
        m = self.metrics
        return (
            f"{self.ruleset.name}: {m.classification.value} "
            f"(score: {m.interest_score}/100, {m.total_generations} gen, "
            f"final pop: {m.final_population})"
        )


def snapshot_of(grid: Grid, cube_size: int, generation: int, changes: int) -> GenerationSnapshot:
    return GenerationSnapshot(
        generation=generation,
        population=population(grid),
        changes=changes,
        color_counts=color_counts(grid),
        center_of_mass=center_of_mass(grid, cube_size),
    )


def compute_metrics(
    snapshots: Sequence[GenerationSnapshot], final_grid: Grid, cube_size: int
) -> SimulationMetrics:
    """Aggregate a run's snapshots.

    A run that never ticked is measured on its starting grid with zero
    generations; if that grid is also empty the default metrics apply.
    """
    total_generations = len(snapshots)
    if not snapshots:
        if population(final_grid) == 0:
            return SimulationMetrics()
        snapshots = [snapshot_of(final_grid, cube_size, 0, 0)]
    final = snapshots[-1]
    populations = [s.population for s in snapshots]
    total_changes = sum(s.changes for s in snapshots)
    avg_population = sum(populations) / len(snapshots)
    avg_changes = total_changes / len(snapshots)
    oscillation_period = detect_oscillation(populations)
    diversity = len(final.color_counts)
    spread = spatial_distribution(final.center_of_mass)
    edges = edge_population(final_grid, cube_size)
    score = interest_score(
        ScoreInputs(
            total_generations=total_generations,
            max_population=max(populations),
            avg_population=avg_population,
            final_population=final.population,
            oscillation_period=oscillation_period,
            color_diversity=diversity,
            avg_change_per_generation=avg_changes,
            spatial_distribution=spread,
        )
    )
    return SimulationMetrics(
        total_generations=total_generations,
        final_population=final.population,
        max_population=max(populations),
        avg_population=avg_population,
        stability_generation=find_stability_generation(snapshots) if total_generations else 0,
        oscillation_period=oscillation_period,
        color_diversity=diversity,
        spatial_distribution=spread,
        avg_change_per_generation=avg_changes,
        total_changes=total_changes,
        cluster_count=cluster_count(final_grid, cube_size),
        edge_population=edges,
        center_population=final.population - edges,
        interest_score=score,
        classification=classify(snapshots, cube_size, oscillation_period),
    )


def analyze_ruleset(
    ruleset: Ruleset,
    initial_pattern: Sequence[int | None] | None = None,
    *,
    seed: int | None = None,
    density: float = ANALYZER_START_DENSITY,
) -> SimulationResult:
    """Run *ruleset* until it stabilizes, dies out or hits its generation cap.

    Without *initial_pattern* the run starts from a sparse random pattern
    drawn with *seed*; the same seed also drives any rule-level randomness.
    """
    logger.debug("Analyzing ruleset %s (seed=%s)", ruleset.name, seed)
    simulation = Simulation(
        ruleset.cube_size,
        ruleset.config,
        initial_pattern,
        max_generations=ruleset.max_generations,
        rng=Random(seed),
        density=density,
    )
    snapshots: list[GenerationSnapshot] = []
    while simulation.is_running:
        step = simulation.step()
        snapshots.append(snapshot_of(step.grid, ruleset.cube_size, step.generation, step.changes))
    metrics = compute_metrics(snapshots, simulation.grid, ruleset.cube_size)
    result = SimulationResult(
        ruleset=ruleset, metrics=metrics, generation_data=tuple(snapshots), seed=seed
    )
    logger.debug("%s", result.summary)
    return result
