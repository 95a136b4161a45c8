"""Metabolism rule: cells live on an energy budget fed by injected nutrients.

One tick runs seven sub-steps in order: nutrient conversion and decay,
diffusion, nutrient injection, starvation, energy-funded births, pairwise
competition between colors, and the diagnostic flow field. Energy and
nutrients are clamped to ``[0, 1]`` after every sub-step.
"""

from __future__ import annotations

import math

from cube_automata.config.constants import MAX_NUTRIENT_CONVERSION
from cube_automata.config.types import EnergyConfig
from cube_automata.domain.cell_state import ZERO_VEC, EnergyCellState, States, Vec3
from cube_automata.domain.grid import (
    MOORE_OFFSETS,
    Grid,
    coord_to_index,
    in_bounds,
    index_to_coord,
    neighbor_table,
)


def _clamp(values: list[float]) -> None:
    for i, value in enumerate(values):
        values[i] = min(1.0, max(0.0, value))


def _decay(colors, energy, nutrients, config: EnergyConfig) -> None:
    for i, color in enumerate(colors):
        if color is None:
            continue
        converted = min(nutrients[i], MAX_NUTRIENT_CONVERSION)
        if converted > 0:
            energy[i] += converted
            nutrients[i] -= converted
        energy[i] -= config.base_decay_rate


def _diffuse(colors, energy, table, rate: float) -> list[float]:
    diffused = list(energy)
    for i, color in enumerate(colors):
        if color is None or energy[i] <= 0:
            continue
        living = [j for j in table[i] if colors[j] is not None]
        if not living:
            continue
        spread = energy[i] * rate
        diffused[i] -= spread
        share = spread / len(living)
        for j in living:
            diffused[j] += share
    return diffused


def _inject(nutrients, n: int, config: EnergyConfig) -> None:
    for x, y, z in config.injection_points:
        if in_bounds(x, y, z, n):
            index = coord_to_index(x, y, z, n)
            nutrients[index] += config.injection_rate


def _starve(colors, energy, config: EnergyConfig) -> None:
    for i, color in enumerate(colors):
        if color is not None and energy[i] < config.death_threshold:
            colors[i] = None
            energy[i] = 0.0


def _births(colors, energy, table, config: EnergyConfig) -> None:
    cost = config.birth_energy_cost
    candidates: list[tuple[int, int]] = []
    for i, color in enumerate(colors):
        if color is not None:
            continue
        donors = [j for j in table[i] if colors[j] is not None and energy[j] > cost]
        if len(donors) < 2:
            continue
        parent = donors[0]
        for j in donors[1:]:
            if energy[j] > energy[parent]:
                parent = j
        candidates.append((i, parent))
    for child, parent in candidates:
        if colors[child] is None and energy[parent] >= cost:
            colors[child] = colors[parent]
            energy[child] = cost / 2
            energy[parent] -= cost


def _compete(colors, energy, table, config: EnergyConfig) -> None:
    """Move energy from the richer to the poorer cell of each mixed-color pair.

    Transfers are computed from the energies at the start of this sub-step
    and each unordered neighbor pair is visited once.
    """
    deltas = [0.0] * len(energy)
    for i, color in enumerate(colors):
        if color is None:
            continue
        for j in table[i]:
            if j <= i or colors[j] is None or colors[j] == color:
                continue
            high, low = (i, j) if energy[i] >= energy[j] else (j, i)
            transfer = (energy[high] - energy[low]) * config.energy_transfer_rate * 0.5
            deltas[high] -= transfer
            deltas[low] += transfer
    for i, delta in enumerate(deltas):
        energy[i] += delta


def _flow(colors, energy, n: int) -> list[Vec3]:
    flows: list[Vec3] = []
    for i, color in enumerate(colors):
        if color is None or energy[i] <= 0:
            flows.append(ZERO_VEC)
            continue
        x, y, z = index_to_coord(i, n)
        fx = fy = fz = 0.0
        for dx, dy, dz in MOORE_OFFSETS:
            if not in_bounds(x + dx, y + dy, z + dz, n):
                continue
            diff = energy[coord_to_index(x + dx, y + dy, z + dz, n)] - energy[i]
            fx += diff * dx
            fy += diff * dy
            fz += diff * dz
        magnitude = math.sqrt(fx * fx + fy * fy + fz * fz)
        if magnitude > 0:
            flows.append((fx / magnitude, fy / magnitude, fz / magnitude))
        else:
            flows.append(ZERO_VEC)
    return flows


def evolve_energy(grid: Grid, states: States, n: int, config: EnergyConfig) -> tuple[Grid, States]:
    table = neighbor_table(n)
    colors = list(grid)
    energy = [getattr(s, "energy", 0.0) if c is not None else 0.0 for s, c in zip(states, grid, strict=True)]
    nutrients = [getattr(s, "nutrients", 0.0) for s in states]

    _decay(colors, energy, nutrients, config)
    _clamp(energy)
    _clamp(nutrients)

    energy = _diffuse(colors, energy, table, config.diffusion_rate)
    _clamp(energy)

    _inject(nutrients, n, config)
    _clamp(nutrients)

    _starve(colors, energy, config)

    _births(colors, energy, table, config)
    _clamp(energy)

    if config.competition_radius > 0:
        _compete(colors, energy, table, config)
        _clamp(energy)

    flows = _flow(colors, energy, n)
    new_states = tuple(
        EnergyCellState(color=colors[i], energy=energy[i], nutrients=nutrients[i], energy_flow=flows[i])
        for i in range(len(colors))
    )
    return tuple(colors), new_states
