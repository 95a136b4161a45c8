"""Color competition: birth into, and takeover by, the dominant neighbor color."""

from __future__ import annotations

from cube_automata.config.types import CompetitionConfig
from cube_automata.domain.cell_state import CellState, States
from cube_automata.domain.grid import Grid, dominant_color, neighbor_color_counts, neighbor_table


def next_color(
    current: int | None, counts: dict[int, int], config: CompetitionConfig
) -> int | None:
    """Next value of one cell given its neighbor color counts."""
    dominant, dominant_count = dominant_color(counts)
    if current is None:
        if dominant is not None and dominant_count >= config.min_neighbors_to_birth:
            return dominant
        return None
    if (
        dominant is not None
        and dominant != current
        and dominant_count >= config.competition_threshold
    ):
        return dominant
    if sum(counts.values()) < config.min_neighbors_to_survive:
        return None
    return current


def evolve_competition(
    grid: Grid, states: States, n: int, config: CompetitionConfig
) -> tuple[Grid, States]:
    table = neighbor_table(n)
    new_grid = tuple(
        next_color(grid[i], neighbor_color_counts(grid, table[i]), config)
        for i in range(len(grid))
    )
    return new_grid, tuple(CellState(color=color) for color in new_grid)
