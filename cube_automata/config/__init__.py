"""Configuration layer: constants, typed config dataclasses and presets."""

from cube_automata.config.constants import (
    DEFAULT_CUBE_SIZE,
    DEFAULT_MAX_GENERATIONS,
    NUM_COLORS,
    STABILITY_WINDOW,
    TOP_RULESET_COUNT,
)
from cube_automata.config.presets import (
    DEFAULT_COMPETITION_CONFIG,
    INFO_PRESETS,
    INTERACTIVE_COMPETITION_CONFIG,
    LIFE3D_PRESETS,
    energy_presets,
    magnet_presets,
)
from cube_automata.config.types import (
    Algorithm,
    AlgorithmConfig,
    BatchSimulationConfig,
    CompetitionConfig,
    EnergyConfig,
    InfoConfig,
    Life3DConfig,
    MagnetConfig,
    Ruleset,
    SourceMode,
    config_from_dict,
    config_to_dict,
)

__all__ = [
    "Algorithm",
    "AlgorithmConfig",
    "BatchSimulationConfig",
    "CompetitionConfig",
    "DEFAULT_COMPETITION_CONFIG",
    "DEFAULT_CUBE_SIZE",
    "DEFAULT_MAX_GENERATIONS",
    "EnergyConfig",
    "INFO_PRESETS",
    "INTERACTIVE_COMPETITION_CONFIG",
    "InfoConfig",
    "LIFE3D_PRESETS",
    "Life3DConfig",
    "MagnetConfig",
    "NUM_COLORS",
    "Ruleset",
    "STABILITY_WINDOW",
    "SourceMode",
    "TOP_RULESET_COUNT",
    "config_from_dict",
    "config_to_dict",
    "energy_presets",
    "magnet_presets",
]
