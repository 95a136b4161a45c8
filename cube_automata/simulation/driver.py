"""Run state machine: owns one grid/state pair and advances it tick by tick.

A run moves from RUNNING to exactly one terminal status: EXTINCT the tick
population reaches 0, STABLE after ``STABILITY_WINDOW`` consecutive ticks
without a changed cell, GENERATION_CAP at ``max_generations``, or STOPPED
when a caller cancels between ticks.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from random import Random
from typing import Sequence

from cube_automata.config.constants import (
    ANALYZER_START_DENSITY,
    DEFAULT_MAX_GENERATIONS,
    STABILITY_WINDOW,
)
from cube_automata.config.types import AlgorithmConfig
from cube_automata.domain.cell_state import States, initialize_states
from cube_automata.domain.grid import Grid, count_changes, population, validate_grid
from cube_automata.domain.patterns import create_random_pattern
from cube_automata.rules import apply_rule

logger = logging.getLogger(__name__)


class RunStatus(str, Enum):
    RUNNING = "running"
    STABLE = "stable"
    EXTINCT = "extinct"
    GENERATION_CAP = "generation_cap"
    STOPPED = "stopped"


@dataclass(frozen=True)
class StepResult:
    """Outcome of one tick."""

    grid: Grid
    states: States
    generation: int
    changes: int
    population: int


class StabilityDetector:
    """Detect runs whose grid has stopped changing for ``window`` ticks."""

    def __init__(self, window: int = STABILITY_WINDOW) -> None:
        if window < 1:
            raise ValueError("window must be >= 1")
        self.window = window
        self._quiet_ticks = 0

    def observe(self, changes: int) -> bool:
        """Record one tick's change count and return True once stable."""
        if changes == 0:
            self._quiet_ticks += 1
        else:
            self._quiet_ticks = 0
        return self._quiet_ticks >= self.window

    def reset(self) -> None:
        self._quiet_ticks = 0


class Simulation:
    """One cube simulation driven by a single update law.

    When *initial_pattern* is omitted a sparse random pattern is drawn from
    *rng* at ``density``. Collaborators read the current grid and state
    through properties and advance the run with :meth:`step`; they never
    mutate either directly.
    """

    def __init__(
        self,
        cube_size: int,
        config: AlgorithmConfig,
        initial_pattern: Sequence[int | None] | None = None,
        *,
        max_generations: int = DEFAULT_MAX_GENERATIONS,
        rng: Random | None = None,
        density: float = ANALYZER_START_DENSITY,
    ) -> None:
        if cube_size < 1:
            raise ValueError("cube_size must be >= 1")
        if max_generations < 0:
            raise ValueError("max_generations must be >= 0")
        self._n = cube_size
        self._config = config
        self._max_generations = max_generations
        self._rng = rng or Random()
        self._density = density
        self._detector = StabilityDetector()
        self.reset(initial_pattern)

    # -- read-only accessors -------------------------------------------------

    @property
    def cube_size(self) -> int:
        return self._n

    @property
    def config(self) -> AlgorithmConfig:
        return self._config

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def states(self) -> States:
        return self._states

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def status(self) -> RunStatus:
        return self._status

    @property
    def is_running(self) -> bool:
        return self._status is RunStatus.RUNNING

    @property
    def population(self) -> int:
        return population(self._grid)

    # -- control -------------------------------------------------------------

    def reset(self, initial_pattern: Sequence[int | None] | None = None) -> None:
        """Start over from *initial_pattern* (or a fresh random one) at generation 0."""
        if initial_pattern is None:
            self._grid = create_random_pattern(self._n, self._density, rng=self._rng)
        else:
            self._grid = validate_grid(initial_pattern, self._n)
        self._states = initialize_states(self._config, self._grid, self._n, self._rng)
        self._generation = 0
        self._detector.reset()
        self._status = self._initial_status()

    def set_algorithm(self, config: AlgorithmConfig) -> None:
        """Switch update law, rebuilding every cell's state from the current grid.

        A finished run keeps its terminal status.
        """
        self._config = config
        self._states = initialize_states(config, self._grid, self._n, self._rng)
        self._detector.reset()
        if self._status is RunStatus.RUNNING:
            self._status = self._initial_status()
        logger.debug("Switched to %s at generation %d", config.algorithm.value, self._generation)

    def stop(self) -> None:
        """Cancel the run; takes effect before the next tick."""
        if self._status is RunStatus.RUNNING:
            self._status = RunStatus.STOPPED

    def step(self) -> StepResult:
        """Apply one tick of the configured rule and update the run status.

        Stepping a finished run still advances the grid; only the status stays
        at its terminal value.
        """
        next_generation = self._generation + 1
        new_grid, new_states = apply_rule(
            self._config,
            self._grid,
            self._states,
            self._n,
            generation=next_generation,
            rng=self._rng,
        )
        changes = count_changes(self._grid, new_grid)
        alive = population(new_grid)
        self._grid = new_grid
        self._states = new_states
        self._generation = next_generation
        stable = self._detector.observe(changes)
        if self._status is RunStatus.RUNNING:
            if alive == 0:
                self._status = RunStatus.EXTINCT
            elif stable:
                self._status = RunStatus.STABLE
            elif self._generation >= self._max_generations:
                self._status = RunStatus.GENERATION_CAP
        return StepResult(
            grid=new_grid,
            states=new_states,
            generation=next_generation,
            changes=changes,
            population=alive,
        )

    def run(self) -> list[StepResult]:
        """Tick until the run reaches a terminal status."""
        results: list[StepResult] = []
        while self.is_running:
            results.append(self.step())
        return results

    def _initial_status(self) -> RunStatus:
        if population(self._grid) == 0:
            return RunStatus.EXTINCT
        if self._generation >= self._max_generations:
            return RunStatus.GENERATION_CAP
        return RunStatus.RUNNING
