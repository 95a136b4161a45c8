"""Per-cell state records carried alongside the visible color grid.

Each update law owns one immutable state variant. Initializers build a fresh
state tuple from a plain color grid; switching algorithms always goes through
``initialize_states`` so no activity field carries over between laws. Empty
cells (``color is None``) hold zeroed activity fields.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import IntEnum
from random import Random
from typing import Literal, Sequence

from cube_automata.config.types import (
    AlgorithmConfig,
    CompetitionConfig,
    EnergyConfig,
    InfoConfig,
    Life3DConfig,
    MagnetConfig,
)
from cube_automata.domain.grid import Grid, coord_to_index, edge_mask, in_bounds, index_to_coord

Vec3 = tuple[float, float, float]
ZERO_VEC: Vec3 = (0.0, 0.0, 0.0)


class GateType(IntEnum):
    """Logic function of a cell in the information-processing rule."""

    WIRE = 0
    AND = 1
    OR = 2
    XOR = 3
    NOT = 4
    THRESHOLD = 5
    DELAY = 6
    SOURCE = 7
    SINK = 8


@dataclass(frozen=True)
class CellState:
    """Color-only state used by the competition rule."""

    color: int | None = None


@dataclass(frozen=True)
class LifeCellState(CellState):
    age: int = 0
    is_edge: bool = False


@dataclass(frozen=True)
class EnergyCellState(CellState):
    energy: float = 0.0
    nutrients: float = 0.0
    energy_flow: Vec3 = ZERO_VEC
    """Unit vector toward higher-energy neighbors (diagnostic only)."""


@dataclass(frozen=True)
class MagnetCellState(CellState):
    spin: Vec3 = ZERO_VEC
    spin_strength: float = 0.0
    temperature: float = 1.0


@dataclass(frozen=True)
class InfoCellState(CellState):
    gate_type: GateType = GateType.WIRE
    output_signal: float = 0.0
    input_buffer: tuple[float, ...] = ()
    """Inputs captured last tick; only DELAY gates read it back."""
    signal_history: tuple[float, ...] = ()
    """Most recent output signals, oldest first."""


States = tuple[CellState, ...]

SpinPattern = Literal["random", "uniform", "radial", "vortex"]
GatePattern = Literal["wire", "random", "by_color"]


def initialize_competition(grid: Sequence[int | None]) -> tuple[CellState, ...]:
    return tuple(CellState(color=color) for color in grid)


def initialize_life(grid: Sequence[int | None], n: int) -> tuple[LifeCellState, ...]:
    mask = edge_mask(n)
    return tuple(
        LifeCellState(color=color, age=0, is_edge=mask[i]) for i, color in enumerate(grid)
    )


def initialize_energy(
    grid: Sequence[int | None], initial_energy: float = 0.5
) -> tuple[EnergyCellState, ...]:
    """Give every living cell ``initial_energy`` and no stored nutrients."""
    return tuple(
        EnergyCellState(color=color, energy=initial_energy if color is not None else 0.0)
        for color in grid
    )


def _random_unit_vector(rng: Random) -> Vec3:
    theta = rng.random() * math.pi * 2
    phi = math.acos(2 * rng.random() - 1)
    return (math.sin(phi) * math.cos(theta), math.sin(phi) * math.sin(theta), math.cos(phi))


def _spin_for(index: int, n: int, pattern: SpinPattern, rng: Random) -> Vec3:
    if pattern == "random":
        return _random_unit_vector(rng)
    if pattern == "uniform":
        return (0.0, 1.0, 0.0)
    center = n / 2
    x, y, z = index_to_coord(index, n)
    dx, dy, dz = x - center, y - center, z - center
    if pattern == "radial":
        magnitude = math.sqrt(dx * dx + dy * dy + dz * dz) or 1.0
        return (dx / magnitude, dy / magnitude, dz / magnitude)
    if pattern == "vortex":
        magnitude = math.sqrt(dx * dx + dz * dz) or 1.0
        return (-dz / magnitude, 0.0, dx / magnitude)
    raise ValueError(f"unknown spin pattern: {pattern}")


def initialize_spins(
    grid: Sequence[int | None],
    n: int,
    pattern: SpinPattern = "random",
    rng: Random | None = None,
) -> tuple[MagnetCellState, ...]:
    """Assign unit spins to living cells; empty cells get a zero spin."""
    rng = rng or Random(0)
    states: list[MagnetCellState] = []
    for i, color in enumerate(grid):
        if color is None:
            states.append(MagnetCellState(color=None, temperature=1.0))
            continue
        states.append(
            MagnetCellState(
                color=color,
                spin=_spin_for(i, n, pattern, rng),
                spin_strength=1.0,
                temperature=1.0,
            )
        )
    return tuple(states)


def gate_from_name(name: str) -> GateType:
    """Resolve a gate name; unknown names fall back to WIRE."""
    try:
        return GateType[name.upper()]
    except KeyError:
        return GateType.WIRE


def initialize_info(
    grid: Sequence[int | None],
    config: InfoConfig | None = None,
    pattern: GatePattern = "wire",
    rng: Random | None = None,
) -> tuple[InfoCellState, ...]:
    """Turn living cells into gates.

    ``wire`` makes every living cell a WIRE; ``by_color`` looks the cell color
    up in ``config.gate_types``; ``random`` draws from the same palette and
    fires roughly one cell in ten.
    """
    config = config or InfoConfig()
    rng = rng or Random(0)
    palette = list(config.palette) or ["WIRE"]
    states: list[InfoCellState] = []
    for color in grid:
        if color is None:
            states.append(InfoCellState(color=None))
            continue
        signal = 0.0
        if pattern == "wire":
            gate = GateType.WIRE
        elif pattern == "by_color":
            gate = gate_from_name(config.gate_name(color))
        elif pattern == "random":
            gate = gate_from_name(rng.choice(palette))
            signal = 1.0 if rng.random() < 0.1 else 0.0
        else:
            raise ValueError(f"unknown gate pattern: {pattern}")
        states.append(InfoCellState(color=color, gate_type=gate, output_signal=signal))
    return tuple(states)


def initialize_states(
    config: AlgorithmConfig,
    grid: Sequence[int | None],
    n: int,
    rng: Random | None = None,
) -> tuple[CellState, ...]:
    """Build a fresh state tuple for the algorithm selected by *config*."""
    if isinstance(config, CompetitionConfig):
        return initialize_competition(grid)
    if isinstance(config, Life3DConfig):
        return initialize_life(grid, n)
    if isinstance(config, EnergyConfig):
        return initialize_energy(grid)
    if isinstance(config, MagnetConfig):
        return initialize_spins(grid, n, "random", rng)
    if isinstance(config, InfoConfig):
        return initialize_info(grid, config, "wire", rng)
    raise TypeError(f"unsupported config type: {type(config).__name__}")


# ---------------------------------------------------------------------------
# Circuit building helpers
# ---------------------------------------------------------------------------


def place_gate(
    grid: Grid,
    states: tuple[InfoCellState, ...],
    position: tuple[int, int, int],
    n: int,
    gate_type: GateType,
    color: int = 0,
) -> tuple[Grid, tuple[InfoCellState, ...]]:
    """Return copies of *grid*/*states* with a gate placed at *position*.

    Positions outside the cube leave both unchanged.
    """
    x, y, z = position
    if not in_bounds(x, y, z, n):
        return grid, states
    index = coord_to_index(x, y, z, n)
    new_grid = list(grid)
    new_states = list(states)
    new_grid[index] = color
    new_states[index] = replace(
        new_states[index], color=color, gate_type=gate_type, output_signal=0.0
    )
    return tuple(new_grid), tuple(new_states)


def connect_gates(
    grid: Grid,
    states: tuple[InfoCellState, ...],
    start: tuple[int, int, int],
    end: tuple[int, int, int],
    n: int,
) -> tuple[Grid, tuple[InfoCellState, ...]]:
    """Lay a straight WIRE line from *start* to *end* (both inclusive)."""
    steps = max(abs(b - a) for a, b in zip(start, end, strict=True))
    for i in range(steps + 1):
        t = i / steps if steps > 0 else 0.0
        point = tuple(int(math.floor(a + (b - a) * t + 0.5)) for a, b in zip(start, end, strict=True))
        grid, states = place_gate(grid, states, point, n, GateType.WIRE)  # type: ignore[arg-type]
    return grid, states
