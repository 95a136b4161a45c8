"""Tests for cube_automata.metrics.spatial."""

from __future__ import annotations

import pytest

from cube_automata.domain.grid import coord_to_index, empty_grid
from cube_automata.metrics.spatial import (
    center_of_mass,
    cluster_count,
    edge_population,
    spatial_distribution,
)


def _grid(n: int, cells) -> tuple[int | None, ...]:
    grid = list(empty_grid(n))
    for x, y, z in cells:
        grid[coord_to_index(x, y, z, n)] = 0
    return tuple(grid)


def test_center_of_mass_of_two_cells() -> None:
    grid = _grid(4, [(0, 0, 0), (2, 2, 2)])
    assert center_of_mass(grid, 4) == pytest.approx((1.0, 1.0, 1.0))


def test_center_of_mass_of_empty_grid() -> None:
    assert center_of_mass(empty_grid(3), 3) == (0.0, 0.0, 0.0)


def test_spatial_distribution_is_scaled_and_capped() -> None:
    assert spatial_distribution((3.0, 4.0, 0.0)) == pytest.approx(0.5)
    assert spatial_distribution((30.0, 0.0, 0.0)) == 1.0


def test_diagonal_neighbors_form_one_cluster() -> None:
    grid = _grid(4, [(0, 0, 0), (1, 1, 1), (3, 3, 3)])
    assert cluster_count(grid, 4) == 2


def test_cluster_count_of_empty_grid() -> None:
    assert cluster_count(empty_grid(3), 3) == 0


def test_edge_population_counts_boundary_cells() -> None:
    grid = _grid(3, [(0, 1, 1), (1, 1, 1), (2, 2, 2)])
    assert edge_population(grid, 3) == 2
