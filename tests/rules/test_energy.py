"""Tests for cube_automata.rules.energy."""

from __future__ import annotations

import math
from random import Random

import pytest

from cube_automata.config.types import EnergyConfig
from cube_automata.domain.cell_state import EnergyCellState, initialize_energy
from cube_automata.domain.grid import population
from cube_automata.domain.patterns import create_random_pattern
from cube_automata.rules.energy import evolve_energy

QUIET = dict(
    base_decay_rate=0.0,
    diffusion_rate=0.0,
    death_threshold=0.0,
    birth_energy_cost=1.0,
    energy_transfer_rate=0.0,
)


def test_values_stay_clamped_over_many_steps() -> None:
    n = 4
    grid = create_random_pattern(n, 0.5, rng=Random(2))
    config = EnergyConfig(
        injection_points=((0, 0, 0), (2, 2, 2), (3, 3, 3)),
        injection_rate=0.9,
        energy_transfer_rate=0.8,
        diffusion_rate=0.5,
    )
    states = initialize_energy(grid, initial_energy=1.0)
    for _ in range(15):
        grid, states = evolve_energy(grid, states, n, config)
        for state in states:
            assert 0.0 <= state.energy <= 1.0
            assert 0.0 <= state.nutrients <= 1.0


def test_nutrients_convert_before_decay() -> None:
    grid = (0,)
    states = (EnergyCellState(color=0, energy=0.5, nutrients=0.5),)
    config = EnergyConfig(base_decay_rate=0.02)
    _, new_states = evolve_energy(grid, states, 1, config)
    assert new_states[0].energy == pytest.approx(0.58)
    assert new_states[0].nutrients == pytest.approx(0.4)


def test_starving_cell_dies() -> None:
    grid = (0,)
    new_grid, new_states = evolve_energy(grid, initialize_energy(grid), 1, EnergyConfig(base_decay_rate=0.6))
    assert new_grid == (None,)
    assert new_states[0].energy == 0.0


def test_injection_adds_nutrients_and_ignores_out_of_range_points() -> None:
    grid = (0,)
    config = EnergyConfig(injection_points=((0, 0, 0), (5, 5, 5), (-1, 0, 0)), injection_rate=0.5)
    _, new_states = evolve_energy(grid, initialize_energy(grid), 1, config)
    assert new_states[0].nutrients == pytest.approx(0.5)
    assert new_states[0].energy == pytest.approx(0.48)


def test_competition_moves_energy_from_richer_to_poorer() -> None:
    grid = (0, 1, None, None, None, None, None, None)
    states = (
        EnergyCellState(color=0, energy=0.8),
        EnergyCellState(color=1, energy=0.2),
    ) + (EnergyCellState(),) * 6
    config = EnergyConfig(**{**QUIET, "energy_transfer_rate": 0.5})
    new_grid, new_states = evolve_energy(grid, states, 2, config)
    assert new_grid == grid
    assert new_states[0].energy == pytest.approx(0.65)
    assert new_states[1].energy == pytest.approx(0.35)


def test_same_color_neighbors_do_not_compete() -> None:
    grid = (2, 2) + (None,) * 6
    states = (EnergyCellState(color=2, energy=0.9), EnergyCellState(color=2, energy=0.1)) + (
        EnergyCellState(),
    ) * 6
    config = EnergyConfig(**{**QUIET, "energy_transfer_rate": 0.5})
    _, new_states = evolve_energy(grid, states, 2, config)
    assert new_states[0].energy == pytest.approx(0.9)
    assert new_states[1].energy == pytest.approx(0.1)


def test_births_are_funded_by_the_richest_neighbor() -> None:
    grid = (0, 0) + (None,) * 6
    states = (EnergyCellState(color=0, energy=1.0), EnergyCellState(color=0, energy=0.5)) + (
        EnergyCellState(),
    ) * 6
    config = EnergyConfig(**{**QUIET, "birth_energy_cost": 0.25})
    new_grid, new_states = evolve_energy(grid, states, 2, config)
    assert new_grid == (0, 0, 0, 0, 0, 0, None, None)
    assert [s.energy for s in new_states[2:6]] == pytest.approx([0.125] * 4)
    assert new_states[0].energy == pytest.approx(0.0)
    assert new_states[1].energy == pytest.approx(0.5)


def test_diffusion_conserves_energy_between_living_cells() -> None:
    grid = (0, 0) + (None,) * 6
    states = (EnergyCellState(color=0, energy=0.6), EnergyCellState(color=0, energy=0.2)) + (
        EnergyCellState(),
    ) * 6
    config = EnergyConfig(**{**QUIET, "diffusion_rate": 0.5})
    _, new_states = evolve_energy(grid, states, 2, config)
    assert new_states[0].energy == pytest.approx(0.4)
    assert new_states[1].energy == pytest.approx(0.4)


def test_flow_vectors_are_unit_or_zero() -> None:
    n = 3
    grid = create_random_pattern(n, 0.6, rng=Random(4))
    _, states = evolve_energy(grid, initialize_energy(grid), n, EnergyConfig())
    for state in states:
        magnitude = math.sqrt(sum(c * c for c in state.energy_flow))
        assert magnitude == pytest.approx(1.0) or magnitude == 0.0


def test_empty_grid_stays_empty() -> None:
    grid = (None,) * 8
    new_grid, _ = evolve_energy(grid, initialize_energy(grid), 2, EnergyConfig(injection_points=((0, 0, 0),)))
    assert population(new_grid) == 0
