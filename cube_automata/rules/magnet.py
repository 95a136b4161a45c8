"""Spin-alignment rule with external field, vortex pull and turbulence."""

from __future__ import annotations

import math
from random import Random

from cube_automata.config.constants import (
    GLOBAL_FIELD_WEIGHT,
    MIN_TEMPERATURE,
    NUM_COLORS,
    SPIN_COLOR_THRESHOLD,
    TEMPERATURE_DECAY,
    VORTEX_CORE_RADIUS,
    VORTEX_WEIGHT,
)
from cube_automata.config.types import MagnetConfig
from cube_automata.domain.cell_state import ZERO_VEC, MagnetCellState, States, Vec3
from cube_automata.domain.grid import Grid, index_to_coord, neighbor_table


def normalize(vec: Vec3) -> Vec3:
    """Unit vector along *vec*; the zero vector stays zero."""
    magnitude = math.sqrt(vec[0] * vec[0] + vec[1] * vec[1] + vec[2] * vec[2])
    if magnitude == 0:
        return ZERO_VEC
    return (vec[0] / magnitude, vec[1] / magnitude, vec[2] / magnitude)


def spin_to_color(spin: Vec3) -> int:
    """Bucket the azimuth of *spin* in the XZ plane into one of six colors."""
    hue = (math.atan2(spin[2], spin[0]) + math.pi) / (2 * math.pi)
    return int(hue * NUM_COLORS) % NUM_COLORS


def average_neighbor_spin(states: States, cells: tuple[int, ...]) -> Vec3:
    """Strength-weighted mean spin of the living cells among *cells*."""
    sx = sy = sz = 0.0
    total = 0.0
    for j in cells:
        neighbor = states[j]
        if neighbor.color is None:
            continue
        spin = getattr(neighbor, "spin", ZERO_VEC)
        weight = getattr(neighbor, "spin_strength", 0.0) or 1.0
        sx += spin[0] * weight
        sy += spin[1] * weight
        sz += spin[2] * weight
        total += weight
    if total == 0:
        return ZERO_VEC
    return (sx / total, sy / total, sz / total)


def _vortex_pull(position: tuple[int, int, int], center: Vec3) -> Vec3:
    dx = position[0] - center[0]
    dy = position[1] - center[1]
    dz = position[2] - center[2]
    radial = math.sqrt(dx * dx + dy * dy + dz * dz)
    if radial < VORTEX_CORE_RADIUS:
        return ZERO_VEC
    return (-dz / radial * VORTEX_WEIGHT, 0.0, dx / radial * VORTEX_WEIGHT)


def evolve_magnet(
    grid: Grid,
    states: States,
    n: int,
    config: MagnetConfig,
    *,
    rng: Random | None = None,
) -> tuple[Grid, States]:
    """Blend every living spin toward its neighbors and recolor by direction.

    Turbulence draws from *rng*; pass a seeded ``Random`` for reproducible runs.
    """
    rng = rng or Random()
    table = neighbor_table(n)
    factor = config.alignment_strength * (1 - config.viscosity)
    new_grid = list(grid)
    new_states: list[MagnetCellState] = []
    for i, color in enumerate(grid):
        state = states[i]
        temperature = getattr(state, "temperature", 1.0)
        if color is None:
            new_states.append(MagnetCellState(color=None, temperature=temperature))
            continue
        spin = getattr(state, "spin", ZERO_VEC)
        strength = getattr(state, "spin_strength", 0.0)
        mean = average_neighbor_spin(states, table[i])
        blended = [spin[k] * (1 - factor) + mean[k] * factor for k in range(3)]
        if config.global_field is not None:
            for k in range(3):
                blended[k] += config.global_field[k] * GLOBAL_FIELD_WEIGHT
        if config.vortex_centers:
            position = index_to_coord(i, n)
            for center in config.vortex_centers:
                pull = _vortex_pull(position, center)
                for k in range(3):
                    blended[k] += pull[k]
        if config.turbulence > 0:
            for k in range(3):
                blended[k] += (rng.random() - 0.5) * config.turbulence
        new_spin = normalize((blended[0], blended[1], blended[2]))
        if strength > SPIN_COLOR_THRESHOLD:
            new_grid[i] = spin_to_color(new_spin)
        new_states.append(
            MagnetCellState(
                color=new_grid[i],
                spin=new_spin,
                spin_strength=strength,
                temperature=max(MIN_TEMPERATURE, temperature * TEMPERATURE_DECAY),
            )
        )
    return tuple(new_grid), tuple(new_states)
