"""Tests for cube_automata.simulation.driver."""

from __future__ import annotations

from random import Random

import pytest

from cube_automata.config.types import CompetitionConfig, EnergyConfig, InfoConfig, Life3DConfig
from cube_automata.domain.cell_state import EnergyCellState, InfoCellState, LifeCellState
from cube_automata.domain.grid import coord_to_index, empty_grid
from cube_automata.simulation.driver import RunStatus, Simulation, StabilityDetector

STILL_LIFE = Life3DConfig(
    birth_neighbors=frozenset(),
    survival_neighbors=frozenset(range(27)),
    use_age_colors=False,
)


def _lone_cell(n: int = 3) -> tuple[int | None, ...]:
    grid: list[int | None] = [None] * n**3
    grid[coord_to_index(1, 1, 1, n)] = 0
    return tuple(grid)


class TestStabilityDetector:
    def test_requires_consecutive_quiet_ticks(self) -> None:
        detector = StabilityDetector(window=3)
        assert [detector.observe(c) for c in (0, 0, 1, 0, 0, 0)] == [
            False,
            False,
            False,
            False,
            False,
            True,
        ]

    def test_invalid_window(self) -> None:
        with pytest.raises(ValueError):
            StabilityDetector(window=0)


class TestSimulation:
    def test_lone_competition_cell_goes_extinct(self) -> None:
        sim = Simulation(3, CompetitionConfig(), _lone_cell())
        result = sim.step()
        assert result.population == 0
        assert result.generation == 1
        assert result.changes == 1
        assert sim.status is RunStatus.EXTINCT
        assert not sim.is_running

    def test_empty_start_is_extinct_immediately(self) -> None:
        sim = Simulation(3, CompetitionConfig(), empty_grid(3))
        assert sim.status is RunStatus.EXTINCT
        assert sim.run() == []
        assert sim.generation == 0

    def test_still_life_becomes_stable_after_three_quiet_ticks(self) -> None:
        sim = Simulation(3, STILL_LIFE, _lone_cell(), max_generations=50)
        results = sim.run()
        assert len(results) == 3
        assert sim.status is RunStatus.STABLE

    def test_generation_cap(self) -> None:
        sim = Simulation(3, STILL_LIFE, _lone_cell(), max_generations=2)
        sim.run()
        assert sim.generation == 2
        assert sim.status is RunStatus.GENERATION_CAP

    def test_zero_generation_cap(self) -> None:
        sim = Simulation(3, STILL_LIFE, _lone_cell(), max_generations=0)
        assert sim.status is RunStatus.GENERATION_CAP
        assert sim.run() == []

    def test_stop_cancels_before_next_tick(self) -> None:
        sim = Simulation(3, STILL_LIFE, _lone_cell(), max_generations=50)
        sim.step()
        sim.stop()
        assert sim.status is RunStatus.STOPPED
        assert sim.run() == []
        assert sim.generation == 1

    def test_random_start_is_seeded(self) -> None:
        first = Simulation(4, CompetitionConfig(), rng=Random(3), density=0.5)
        second = Simulation(4, CompetitionConfig(), rng=Random(3), density=0.5)
        assert first.grid == second.grid
        assert len(first.grid) == 64

    def test_wrong_pattern_length_raises(self) -> None:
        with pytest.raises(ValueError):
            Simulation(3, CompetitionConfig(), (None,) * 8)

    def test_set_algorithm_replaces_every_state(self) -> None:
        sim = Simulation(3, STILL_LIFE, _lone_cell())
        sim.step()
        assert isinstance(sim.states[0], LifeCellState)
        sim.set_algorithm(EnergyConfig())
        assert all(type(s) is EnergyCellState for s in sim.states)
        center = coord_to_index(1, 1, 1, 3)
        assert sim.states[center].energy == 0.5
        sim.set_algorithm(InfoConfig())
        assert all(type(s) is InfoCellState for s in sim.states)
        assert sim.grid == _lone_cell()

    def test_set_algorithm_keeps_stopped_status(self) -> None:
        sim = Simulation(3, STILL_LIFE, _lone_cell(), max_generations=50)
        sim.stop()
        sim.set_algorithm(Life3DConfig())
        assert sim.status is RunStatus.STOPPED
        assert sim.run() == []

    def test_set_algorithm_keeps_stable_status(self) -> None:
        sim = Simulation(3, STILL_LIFE, _lone_cell(), max_generations=50)
        sim.run()
        sim.set_algorithm(CompetitionConfig())
        assert sim.status is RunStatus.STABLE

    def test_set_algorithm_while_running_stays_running(self) -> None:
        sim = Simulation(3, STILL_LIFE, _lone_cell(), max_generations=50)
        sim.set_algorithm(CompetitionConfig())
        assert sim.status is RunStatus.RUNNING

    def test_reset_restarts_from_generation_zero(self) -> None:
        sim = Simulation(3, STILL_LIFE, _lone_cell())
        sim.run()
        sim.reset(_lone_cell())
        assert sim.generation == 0
        assert sim.status is RunStatus.RUNNING

    def test_step_result_matches_accessors(self) -> None:
        sim = Simulation(3, CompetitionConfig(), _lone_cell())
        result = sim.step()
        assert result.grid == sim.grid
        assert result.states == sim.states
        assert result.generation == sim.generation
