"""Temporal metrics over a run's snapshot sequence: stability, periodicity, drift."""

from __future__ import annotations

import math
from typing import Sequence

from cube_automata.config.constants import (
    CLASSIFICATION_WINDOW,
    GLIDER_MOVEMENT_THRESHOLD,
    MAX_OSCILLATION_PERIOD,
    MIN_OSCILLATION_PERIOD,
    MIN_OSCILLATION_SAMPLES,
    OSCILLATION_REPEATS,
    OSCILLATION_WINDOW,
    STABILITY_WINDOW,
)
from cube_automata.domain.snapshot import GenerationSnapshot


def find_stability_generation(snapshots: Sequence[GenerationSnapshot]) -> int:
    """Earliest generation after which ``STABILITY_WINDOW`` snapshots show no change.

    Returns ``len(snapshots)`` when the run never settles.
    """
    for start in range(len(snapshots) - STABILITY_WINDOW + 1):
        window = snapshots[start : start + STABILITY_WINDOW]
        if all(snapshot.changes == 0 for snapshot in window):
            return start
    return len(snapshots)


def _repeats_with_period(values: Sequence[int], period: int) -> bool:
    if len(values) < period * (OSCILLATION_REPEATS + 1):
        return False
    last = len(values) - 1
    for offset in range(period):
        expected = values[last - offset]
        for repeat in range(1, OSCILLATION_REPEATS + 1):
            if values[last - offset - repeat * period] != expected:
                return False
    return True


def detect_oscillation(populations: Sequence[int]) -> int:
    """Smallest period in ``[2, 10]`` repeating over the last 20 samples, else 0.

    A constant sequence repeats with every period and therefore reports 2.
    """
    if len(populations) < MIN_OSCILLATION_SAMPLES:
        return 0
    recent = list(populations[-OSCILLATION_WINDOW:])
    for period in range(MIN_OSCILLATION_PERIOD, MAX_OSCILLATION_PERIOD + 1):
        if _repeats_with_period(recent, period):
            return period
    return 0


def center_of_mass_movement(snapshots: Sequence[GenerationSnapshot]) -> float:
    """Summed Euclidean step length of the center of mass across *snapshots*."""
    total = 0.0
    for prev, curr in zip(snapshots, snapshots[1:], strict=False):
        total += math.dist(prev.center_of_mass, curr.center_of_mass)
    return total


def detect_movement(snapshots: Sequence[GenerationSnapshot]) -> bool:
    """True when the recent center of mass drifted far enough to suggest a glider."""
    if len(snapshots) < CLASSIFICATION_WINDOW:
        return False
    recent = snapshots[-CLASSIFICATION_WINDOW:]
    return center_of_mass_movement(recent) > GLIDER_MOVEMENT_THRESHOLD
