"""Interest score and qualitative classification of a finished run."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from cube_automata.config.constants import CLASSIFICATION_WINDOW, EXPLOSIVE_FRACTION
from cube_automata.domain.snapshot import GenerationSnapshot
from cube_automata.metrics.temporal import detect_movement


class Classification(str, Enum):
    """Qualitative long-run behavior of a simulation."""

    EXTINCT = "extinct"
    STABLE = "stable"
    OSCILLATING = "oscillating"
    CHAOTIC = "chaotic"
    EXPLOSIVE = "explosive"
    GLIDER = "glider"


@dataclass(frozen=True)
class ScoreInputs:
    """Run statistics feeding :func:`interest_score`."""

    total_generations: int
    max_population: int
    avg_population: float
    final_population: int
    oscillation_period: int
    color_diversity: int
    avg_change_per_generation: float
    spatial_distribution: float


def interest_score(inputs: ScoreInputs) -> int:
    """Combine longevity, population, activity, diversity, periodicity and spread.

    Each term is capped on its own; the sum is rounded half up and capped at 100.
    """
    score = min(inputs.total_generations / 4, 25)
    if inputs.max_population > 0 and inputs.final_population > 0:
        score += min(inputs.avg_population / 10, 20)
    score += min(inputs.avg_change_per_generation * 2, 20)
    score += min(inputs.color_diversity * 3, 15)
    if inputs.oscillation_period > 1:
        score += 15
    elif inputs.final_population > 0 and inputs.total_generations > 50:
        score += 10
    score += min(inputs.spatial_distribution * 10, 10)
    return min(int(math.floor(score + 0.5)), 100)


def classify(
    snapshots: Sequence[GenerationSnapshot], cube_size: int, oscillation_period: int
) -> Classification:
    """Classify a run from its snapshots; an empty sequence is extinct."""
    if not snapshots:
        return Classification.EXTINCT
    final = snapshots[-1]
    if final.population == 0:
        return Classification.EXTINCT
    if final.population > cube_size**3 * EXPLOSIVE_FRACTION:
        return Classification.EXPLOSIVE
    if oscillation_period > 1:
        return Classification.OSCILLATING
    if sum(s.changes for s in snapshots[-CLASSIFICATION_WINDOW:]) == 0:
        return Classification.STABLE
    if detect_movement(snapshots):
        return Classification.GLIDER
    return Classification.CHAOTIC
