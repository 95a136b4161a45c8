"""Three-dimensional Life with edge bias and age banding."""

from __future__ import annotations

import math

from cube_automata.config.types import Life3DConfig
from cube_automata.domain.cell_state import LifeCellState, States
from cube_automata.domain.grid import (
    Grid,
    dominant_color,
    edge_mask,
    neighbor_color_counts,
    neighbor_table,
)

AGE_BANDS: tuple[tuple[float, int], ...] = ((0.2, 0), (0.4, 3), (0.6, 2), (0.8, 1))
"""Upper bound of each age fraction band and its color; older cells get ``OLDEST_COLOR``."""

OLDEST_COLOR = 4


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def age_color(age: int, max_age: int) -> int:
    """Map an age to one of five fixed color bands."""
    fraction = min(age / max_age, 1.0) if max_age > 0 else 1.0
    for upper, color in AGE_BANDS:
        if fraction < upper:
            return color
    return OLDEST_COLOR


def effective_neighbors(raw_count: int, is_edge: bool, edge_bias: float) -> int:
    if not is_edge:
        return raw_count
    return round_half_up(raw_count * edge_bias)


def evolve_life3d(grid: Grid, states: States, n: int, config: Life3DConfig) -> tuple[Grid, States]:
    """Apply birth/survival sets to every cell.

    Surviving and newborn cells age by one tick (capped at ``max_age``); a
    newborn takes the most common neighbor color, lowest color on ties.
    """
    table = neighbor_table(n)
    edges = edge_mask(n)
    new_grid: list[int | None] = []
    new_states: list[LifeCellState] = []
    for i, current in enumerate(grid):
        counts = neighbor_color_counts(grid, table[i])
        effective = effective_neighbors(sum(counts.values()), edges[i], config.edge_bias)
        previous = states[i]
        age = getattr(previous, "age", 0)
        color: int | None
        if current is not None:
            if effective in config.survival_neighbors:
                color = current
                age = min(age + 1, config.max_age)
            else:
                color = None
                age = 0
        elif effective in config.birth_neighbors:
            born, _ = dominant_color(counts)
            color = born if born is not None else 0
            age = min(1, config.max_age)
        else:
            color = None
            age = 0
        if color is not None and config.use_age_colors:
            color = age_color(age, config.max_age)
        new_grid.append(color)
        new_states.append(LifeCellState(color=color, age=age, is_edge=edges[i]))
    return tuple(new_grid), tuple(new_states)
