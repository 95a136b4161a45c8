"""Named rule presets for each update law."""

from __future__ import annotations

import math

from cube_automata.config.types import (
    CompetitionConfig,
    EnergyConfig,
    InfoConfig,
    Life3DConfig,
    MagnetConfig,
    Vec3,
)

DEFAULT_COMPETITION_CONFIG = CompetitionConfig()
"""Batch/analysis default ``{4, 5, 7}``."""

INTERACTIVE_COMPETITION_CONFIG = CompetitionConfig(
    min_neighbors_to_survive=2,
    min_neighbors_to_birth=3,
    competition_threshold=4,
)
"""Livelier thresholds used when stepping a small cube interactively."""

LIFE3D_PRESETS: dict[str, Life3DConfig] = {
    "classic": Life3DConfig(
        birth_neighbors=frozenset({5}),
        survival_neighbors=frozenset({5, 6, 7}),
        use_age_colors=True,
        max_age=50,
        edge_bias=0.8,
    ),
    "stable": Life3DConfig(
        birth_neighbors=frozenset({6}),
        survival_neighbors=frozenset({4, 5, 6, 7}),
        use_age_colors=True,
        max_age=30,
        edge_bias=0.9,
    ),
    "growth": Life3DConfig(
        birth_neighbors=frozenset({4, 5}),
        survival_neighbors=frozenset({4, 5, 6, 7, 8}),
        use_age_colors=True,
        max_age=20,
        edge_bias=1.2,
    ),
    "decay": Life3DConfig(
        birth_neighbors=frozenset({6, 7}),
        survival_neighbors=frozenset({5, 6}),
        use_age_colors=True,
        max_age=15,
        edge_bias=0.6,
    ),
}


def energy_presets(cube_size: int) -> dict[str, EnergyConfig]:
    """Energy presets; injection points depend on the cube size."""
    mid = cube_size // 2
    return {
        "central_source": EnergyConfig(injection_points=((mid, mid, mid),), injection_rate=0.8),
        "corner_sources": EnergyConfig(
            injection_points=((0, 0, 0), (cube_size - 1, cube_size - 1, cube_size - 1)),
            injection_rate=0.6,
        ),
        "fountain": EnergyConfig(
            base_decay_rate=0.03,
            diffusion_rate=0.3,
            injection_points=((mid, 0, mid),),
            injection_rate=1.0,
        ),
        "scarcity": EnergyConfig(
            base_decay_rate=0.05,
            birth_energy_cost=0.5,
            energy_transfer_rate=0.2,
            competition_radius=2,
        ),
    }


def _unit(vec: Vec3) -> Vec3:
    magnitude = math.sqrt(sum(c * c for c in vec))
    if magnitude == 0:
        return (0.0, 0.0, 0.0)
    return (vec[0] / magnitude, vec[1] / magnitude, vec[2] / magnitude)


def magnet_presets(cube_size: int, field_direction: Vec3 = (0.0, 1.0, 0.0)) -> dict[str, MagnetConfig]:
    """Magnet presets; vortex centers depend on the cube size."""
    half = cube_size / 2
    return {
        "uniform_field": MagnetConfig(global_field=_unit(field_direction), alignment_strength=0.5),
        "single_vortex": MagnetConfig(
            vortex_centers=((half, half, half),),
            alignment_strength=0.4,
            turbulence=0.02,
        ),
        "double_vortex": MagnetConfig(
            vortex_centers=(
                (cube_size / 3, half, cube_size / 3),
                (2 * cube_size / 3, half, 2 * cube_size / 3),
            ),
            alignment_strength=0.35,
            turbulence=0.03,
        ),
        "turbulent_flow": MagnetConfig(alignment_strength=0.2, turbulence=0.15, viscosity=0.05),
        "magnetic_domains": MagnetConfig(
            alignment_strength=0.6,
            alignment_radius=2,
            viscosity=0.3,
            turbulence=0.01,
        ),
    }


INFO_PRESETS: dict[str, InfoConfig] = {
    "empty_board": InfoConfig(signal_decay=0.05, signal_threshold=0.3),
    "fast_signals": InfoConfig(signal_decay=0.02, propagation_delay=0, signal_threshold=0.2),
    "noisy_circuit": InfoConfig(signal_decay=0.2, signal_threshold=0.7),
    "digital_logic": InfoConfig(
        signal_decay=0.0,
        signal_threshold=0.5,
        gate_types={
            0: "WIRE",
            1: "AND",
            2: "OR",
            3: "NOT",
            4: "XOR",
            5: "THRESHOLD",
            6: "DELAY",
            7: "SOURCE",
        },
    ),
}
