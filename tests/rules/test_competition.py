"""Tests for cube_automata.rules.competition."""

from __future__ import annotations

from cube_automata.config.types import CompetitionConfig
from cube_automata.domain.cell_state import initialize_competition
from cube_automata.domain.grid import coord_to_index, population
from cube_automata.rules.competition import evolve_competition, next_color

N = 3
CENTER = coord_to_index(1, 1, 1, N)


def _step(grid, config=CompetitionConfig()):
    return evolve_competition(grid, initialize_competition(grid), N, config)


def test_lone_cell_dies() -> None:
    grid = [None] * 27
    grid[CENTER] = 0
    new_grid, states = _step(tuple(grid))
    assert population(new_grid) == 0
    assert all(s.color is None for s in states)


def test_surrounded_hole_is_filled() -> None:
    grid = [0] * 27
    grid[CENTER] = None
    new_grid, _ = _step(tuple(grid))
    assert new_grid == (0,) * 27


def test_outnumbered_cell_is_taken_over() -> None:
    grid = [0] * 27
    grid[CENTER] = 1
    new_grid, _ = _step(tuple(grid))
    assert new_grid[CENTER] == 0


def test_birth_tie_prefers_lowest_color() -> None:
    grid: list[int | None] = [None] * 27
    for coord in [(0, 0, 0), (1, 0, 0), (2, 0, 0), (0, 1, 0), (2, 1, 0)]:
        grid[coord_to_index(*coord, N)] = 4
    for coord in [(0, 0, 2), (1, 0, 2), (2, 0, 2), (0, 1, 2), (2, 1, 2)]:
        grid[coord_to_index(*coord, N)] = 2
    new_grid, _ = _step(tuple(grid))
    assert new_grid[CENTER] == 2


class TestNextColor:
    config = CompetitionConfig(min_neighbors_to_survive=4, min_neighbors_to_birth=5, competition_threshold=7)

    def test_empty_cell_below_birth_threshold_stays_empty(self) -> None:
        assert next_color(None, {1: 4}, self.config) is None

    def test_survival_counts_all_colors(self) -> None:
        assert next_color(3, {1: 2, 2: 2}, self.config) == 3

    def test_death_by_isolation(self) -> None:
        assert next_color(3, {3: 3}, self.config) is None

    def test_same_color_majority_does_not_flip(self) -> None:
        assert next_color(2, {2: 10}, self.config) == 2

    def test_malformed_thresholds_are_accepted(self) -> None:
        config = CompetitionConfig(min_neighbors_to_survive=6, min_neighbors_to_birth=2, competition_threshold=99)
        assert next_color(None, {0: 2}, config) == 0
        assert next_color(1, {0: 5}, config) is None
