"""Per-cell update laws and the dispatcher that selects one by config type."""

from __future__ import annotations

from random import Random

from cube_automata.config.types import (
    AlgorithmConfig,
    CompetitionConfig,
    EnergyConfig,
    InfoConfig,
    Life3DConfig,
    MagnetConfig,
)
from cube_automata.domain.cell_state import States
from cube_automata.domain.grid import Grid
from cube_automata.rules.competition import evolve_competition
from cube_automata.rules.energy import evolve_energy
from cube_automata.rules.info import evolve_info
from cube_automata.rules.life3d import evolve_life3d
from cube_automata.rules.magnet import evolve_magnet

__all__ = [
    "apply_rule",
    "evolve_competition",
    "evolve_energy",
    "evolve_info",
    "evolve_life3d",
    "evolve_magnet",
]


def apply_rule(
    config: AlgorithmConfig,
    grid: Grid,
    states: States,
    n: int,
    *,
    generation: int = 0,
    rng: Random | None = None,
) -> tuple[Grid, States]:
    """Advance *grid*/*states* by one synchronous tick of the rule *config* selects."""
    if isinstance(config, CompetitionConfig):
        return evolve_competition(grid, states, n, config)
    if isinstance(config, Life3DConfig):
        return evolve_life3d(grid, states, n, config)
    if isinstance(config, EnergyConfig):
        return evolve_energy(grid, states, n, config)
    if isinstance(config, MagnetConfig):
        return evolve_magnet(grid, states, n, config, rng=rng)
    if isinstance(config, InfoConfig):
        return evolve_info(grid, states, n, config, generation=generation)
    raise TypeError(f"unsupported config type: {type(config).__name__}")
