"""Tests for cube_automata.rules.magnet."""

from __future__ import annotations

import math
from random import Random

import pytest

from cube_automata.config.types import MagnetConfig
from cube_automata.domain.cell_state import MagnetCellState, initialize_spins
from cube_automata.domain.patterns import create_random_pattern
from cube_automata.rules.magnet import average_neighbor_spin, evolve_magnet, normalize, spin_to_color


def _norm(vec) -> float:
    return math.sqrt(sum(c * c for c in vec))


def test_normalize_keeps_zero_vector() -> None:
    assert normalize((0.0, 0.0, 0.0)) == (0.0, 0.0, 0.0)
    assert normalize((3.0, 0.0, 4.0)) == pytest.approx((0.6, 0.0, 0.8))


@pytest.mark.parametrize(
    ("spin", "color"),
    [((1.0, 0.0, 0.0), 3), ((-1.0, 0.0, 0.0), 0), ((0.0, 0.0, 1.0), 4), ((0.0, 0.0, -1.0), 1)],
)
def test_spin_to_color(spin, color) -> None:
    assert spin_to_color(spin) == color


def test_aligned_spins_stay_aligned() -> None:
    grid = (0,) * 8
    states = initialize_spins(grid, 2, "uniform")
    new_grid, new_states = evolve_magnet(grid, states, 2, MagnetConfig(turbulence=0.0))
    for state in new_states:
        assert state.spin == pytest.approx((0.0, 1.0, 0.0))
        assert state.temperature == pytest.approx(0.99)
    assert set(new_grid) == {spin_to_color((0.0, 1.0, 0.0))}


def test_spin_blends_toward_neighbors() -> None:
    grid = (0, 0)
    states = (
        MagnetCellState(color=0, spin=(1.0, 0.0, 0.0), spin_strength=1.0),
        MagnetCellState(color=0, spin=(0.0, 0.0, 1.0), spin_strength=1.0),
    )
    grid = grid + (None,) * 6
    states = states + (MagnetCellState(),) * 6
    _, new_states = evolve_magnet(grid, states, 2, MagnetConfig(turbulence=0.0, alignment_strength=0.5, viscosity=0.0))
    assert new_states[0].spin == pytest.approx(normalize((0.5, 0.0, 0.5)))
    assert new_states[1].spin == pytest.approx(normalize((0.5, 0.0, 0.5)))


def test_global_field_tilts_spin() -> None:
    grid = (0,)
    states = (MagnetCellState(color=0, spin=(1.0, 0.0, 0.0), spin_strength=1.0),)
    config = MagnetConfig(turbulence=0.0, global_field=(0.0, 1.0, 0.0))
    _, new_states = evolve_magnet(grid, states, 1, config)
    spin = new_states[0].spin
    assert spin[1] > 0
    assert _norm(spin) == pytest.approx(1.0)


def test_vortex_adds_tangential_pull() -> None:
    n = 3
    grid = [None] * 27
    grid[2] = 0
    states = [MagnetCellState()] * 27
    states[2] = MagnetCellState(color=0, spin=(1.0, 0.0, 0.0), spin_strength=1.0)
    config = MagnetConfig(turbulence=0.0, alignment_strength=0.0, vortex_centers=((0.0, 0.0, 0.0),))
    _, new_states = evolve_magnet(tuple(grid), tuple(states), n, config)
    assert new_states[2].spin == pytest.approx(normalize((1.0, 0.0, 0.2)))


def test_weak_spins_keep_their_color() -> None:
    grid = (5,)
    states = (MagnetCellState(color=5, spin=(1.0, 0.0, 0.0), spin_strength=0.05),)
    new_grid, _ = evolve_magnet(grid, states, 1, MagnetConfig(turbulence=0.0))
    assert new_grid == (5,)


def test_temperature_has_a_floor() -> None:
    grid = (0,)
    states = (MagnetCellState(color=0, spin=(1.0, 0.0, 0.0), spin_strength=1.0, temperature=0.1),)
    _, new_states = evolve_magnet(grid, states, 1, MagnetConfig(turbulence=0.0))
    assert new_states[0].temperature == pytest.approx(0.1)


def test_turbulence_is_reproducible_with_seed() -> None:
    n = 3
    grid = create_random_pattern(n, 0.7, rng=Random(1))
    states = initialize_spins(grid, n, "random", Random(2))
    config = MagnetConfig(turbulence=0.3)
    first = evolve_magnet(grid, states, n, config, rng=Random(7))
    second = evolve_magnet(grid, states, n, config, rng=Random(7))
    assert first == second


def test_average_ignores_empty_neighbors() -> None:
    states = (
        MagnetCellState(color=None, spin=(1.0, 0.0, 0.0)),
        MagnetCellState(color=1, spin=(0.0, 0.0, 1.0), spin_strength=1.0),
    )
    assert average_neighbor_spin(states, (0, 1)) == (0.0, 0.0, 1.0)
    assert average_neighbor_spin(states, (0,)) == (0.0, 0.0, 0.0)


def test_empty_cells_stay_empty() -> None:
    grid = (None,) * 8
    new_grid, _ = evolve_magnet(grid, initialize_spins(grid, 2), 2, MagnetConfig())
    assert new_grid == grid
