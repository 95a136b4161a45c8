"""Domain layer: grid topology, per-cell state and initial patterns."""

from cube_automata.domain.cell_state import (
    CellState,
    EnergyCellState,
    GateType,
    InfoCellState,
    LifeCellState,
    MagnetCellState,
    States,
    connect_gates,
    initialize_energy,
    initialize_info,
    initialize_life,
    initialize_spins,
    initialize_states,
    place_gate,
)
from cube_automata.domain.grid import (
    Grid,
    color_counts,
    coord_to_index,
    count_changes,
    dominant_color,
    index_to_coord,
    neighbors,
    population,
)
from cube_automata.domain.patterns import (
    create_color_wave_pattern,
    create_glider_pattern,
    create_life3d_seed_pattern,
    create_random_pattern,
)
from cube_automata.domain.snapshot import GenerationSnapshot

__all__ = [
    "CellState",
    "EnergyCellState",
    "GateType",
    "GenerationSnapshot",
    "Grid",
    "InfoCellState",
    "LifeCellState",
    "MagnetCellState",
    "States",
    "color_counts",
    "connect_gates",
    "coord_to_index",
    "count_changes",
    "create_color_wave_pattern",
    "create_glider_pattern",
    "create_life3d_seed_pattern",
    "create_random_pattern",
    "dominant_color",
    "index_to_coord",
    "initialize_energy",
    "initialize_info",
    "initialize_life",
    "initialize_spins",
    "initialize_states",
    "neighbors",
    "place_gate",
    "population",
]
