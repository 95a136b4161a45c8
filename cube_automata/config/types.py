"""Configuration dataclasses for rules, rulesets and batch search.

Each update law has its own frozen config dataclass tagged with the
``Algorithm`` it drives; ``AlgorithmConfig`` is the union of the five and is
the only selector of which rule runs. Validation here is structural only:
rule parameters such as birth sets or thresholds are accepted as data even
when they can never fire.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Mapping, Union

from cube_automata.config.constants import DEFAULT_CUBE_SIZE, DEFAULT_MAX_GENERATIONS

__all__ = [
    "Algorithm",
    "AlgorithmConfig",
    "BatchSimulationConfig",
    "CompetitionConfig",
    "EnergyConfig",
    "InfoConfig",
    "Life3DConfig",
    "MagnetConfig",
    "Ruleset",
    "SourceMode",
    "config_from_dict",
    "config_to_dict",
]

Vec3 = tuple[float, float, float]


class Algorithm(str, Enum):
    """Per-cell update law selector."""

    COMPETITION = "competition"
    LIFE3D = "life3d"
    ENERGY = "energy"
    MAGNET = "magnet"
    INFO = "info"


class SourceMode(str, Enum):
    """Output policy of SOURCE gates in the information-processing rule."""

    CONSTANT = "constant"
    OSCILLATING = "oscillating"


# ---------------------------------------------------------------------------
# Per-algorithm configs
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class CompetitionConfig:
    """Color competition: birth, takeover and loneliness death thresholds."""

    algorithm: ClassVar[Algorithm] = Algorithm.COMPETITION

    min_neighbors_to_survive: int = 4
    min_neighbors_to_birth: int = 5
    competition_threshold: int = 7


@dataclass(frozen=True)
class Life3DConfig:
    """Birth/survival neighbor-count sets with optional age coloring."""

    algorithm: ClassVar[Algorithm] = Algorithm.LIFE3D

    birth_neighbors: frozenset[int] = frozenset({5})
    survival_neighbors: frozenset[int] = frozenset({5, 6, 7})
    use_age_colors: bool = True
    max_age: int = 50
    edge_bias: float = 1.0
    """Multiplier applied to the neighbor count of boundary cells."""

    def __post_init__(self) -> None:
        object.__setattr__(self, "birth_neighbors", frozenset(self.birth_neighbors))
        object.__setattr__(self, "survival_neighbors", frozenset(self.survival_neighbors))


@dataclass(frozen=True)
class EnergyConfig:
    """Metabolism model: decay, diffusion, nutrient injection and competition."""

    algorithm: ClassVar[Algorithm] = Algorithm.ENERGY

    base_decay_rate: float = 0.02
    birth_energy_cost: float = 0.3
    death_threshold: float = 0.05
    diffusion_rate: float = 0.2
    injection_points: tuple[tuple[int, int, int], ...] = ()
    injection_rate: float = 0.5
    energy_transfer_rate: float = 0.1
    competition_radius: int = 1
    """Competition is disabled at 0; any positive value uses the 26-neighborhood."""

    def __post_init__(self) -> None:
        points = tuple(tuple(int(c) for c in point) for point in self.injection_points)
        if any(len(point) != 3 for point in points):
            raise ValueError("injection_points entries must be (x, y, z) triples")
        object.__setattr__(self, "injection_points", points)


@dataclass(frozen=True)
class MagnetConfig:
    """Spin alignment with optional external field and vortex centers."""

    algorithm: ClassVar[Algorithm] = Algorithm.MAGNET

    alignment_strength: float = 0.3
    alignment_radius: int = 1
    viscosity: float = 0.1
    turbulence: float = 0.05
    global_field: Vec3 | None = None
    vortex_centers: tuple[Vec3, ...] = ()

    def __post_init__(self) -> None:
        if self.global_field is not None:
            global_field = tuple(float(c) for c in self.global_field)
            if len(global_field) != 3:
                raise ValueError("global_field must be an (x, y, z) triple")
            object.__setattr__(self, "global_field", global_field)
        centers = tuple(tuple(float(c) for c in center) for center in self.vortex_centers)
        if any(len(center) != 3 for center in centers):
            raise ValueError("vortex_centers entries must be (x, y, z) triples")
        object.__setattr__(self, "vortex_centers", centers)


GatePalette = tuple[tuple[int, str], ...]

DEFAULT_GATE_TYPES: GatePalette = (
    (0, "WIRE"),
    (1, "AND"),
    (2, "OR"),
    (3, "XOR"),
    (4, "NOT"),
    (5, "THRESHOLD"),
)


@dataclass(frozen=True)
class InfoConfig:
    """Logic-gate network: signal decay, activation threshold and gate palette."""

    algorithm: ClassVar[Algorithm] = Algorithm.INFO

    gate_types: GatePalette = DEFAULT_GATE_TYPES
    """Sorted ``(key, gate name)`` pairs; a mapping is accepted and converted."""
    signal_decay: float = 0.1
    signal_threshold: float = 0.5
    propagation_delay: int = 1
    """Informational; every gate already reads its inputs with a one-tick delay."""
    source_mode: SourceMode = SourceMode.CONSTANT

    def __post_init__(self) -> None:
        pairs = self.gate_types.items() if isinstance(self.gate_types, Mapping) else self.gate_types
        palette = {int(key): str(value).upper() for key, value in pairs}
        object.__setattr__(self, "gate_types", tuple(sorted(palette.items())))
        object.__setattr__(self, "source_mode", SourceMode(self.source_mode))

    def gate_name(self, key: int, default: str = "WIRE") -> str:
        """Gate name registered under *key*, or *default*."""
        return dict(self.gate_types).get(key, default)

    @property
    def palette(self) -> tuple[str, ...]:
        return tuple(name for _, name in self.gate_types)


AlgorithmConfig = Union[CompetitionConfig, Life3DConfig, EnergyConfig, MagnetConfig, InfoConfig]

_CONFIG_TYPES: dict[Algorithm, type] = {
    Algorithm.COMPETITION: CompetitionConfig,
    Algorithm.LIFE3D: Life3DConfig,
    Algorithm.ENERGY: EnergyConfig,
    Algorithm.MAGNET: MagnetConfig,
    Algorithm.INFO: InfoConfig,
}


def _camel_case(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def config_from_dict(algorithm: Algorithm | str, raw: Mapping[str, Any] | None) -> AlgorithmConfig:
    """Build the config for *algorithm* from a JSON-like mapping.

    Keys may be snake_case or camelCase. Missing keys take the dataclass
    defaults and unrecognized keys are ignored.
    """
    try:
        algo = Algorithm(algorithm)
    except ValueError as exc:
        valid = ", ".join(a.value for a in Algorithm)
        raise ValueError(f"algorithm must be one of {valid}") from exc
    config_type = _CONFIG_TYPES[algo]
    raw = raw or {}
    kwargs: dict[str, Any] = {}
    for config_field in dataclasses.fields(config_type):
        for key in (config_field.name, _camel_case(config_field.name)):
            if key in raw:
                kwargs[config_field.name] = raw[key]
                break
    return config_type(**kwargs)


def config_to_dict(config: AlgorithmConfig) -> dict[str, Any]:
    """Return a JSON-compatible mapping of *config* (sets sorted, tuples as lists)."""
    payload: dict[str, Any] = {}
    for config_field in dataclasses.fields(config):
        value = getattr(config, config_field.name)
        if isinstance(value, frozenset):
            value = sorted(value)
        elif isinstance(value, Enum):
            value = value.value
        elif config_field.name == "gate_types":
            value = {str(k): v for k, v in value}
        elif isinstance(value, tuple):
            value = [list(v) if isinstance(v, tuple) else v for v in value]
        payload[config_field.name] = value
    return payload


# ---------------------------------------------------------------------------
# Jobs
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Ruleset:
    """A named, fully parameterized simulation job."""

    name: str
    cube_size: int
    max_generations: int
    config: AlgorithmConfig

    def __post_init__(self) -> None:
        if self.cube_size < 1:
            raise ValueError("cube_size must be >= 1")
        if self.max_generations < 0:
            raise ValueError("max_generations must be >= 0")

    @property
    def algorithm(self) -> Algorithm:
        return self.config.algorithm


@dataclass(frozen=True)
class BatchSimulationConfig:
    """Batch-search runtime parameters."""

    cube_size: int = DEFAULT_CUBE_SIZE
    max_generations: int = DEFAULT_MAX_GENERATIONS
    runs_per_ruleset: int = 1
    include_random_start: bool = True
    include_pattern_start: bool = False
    seed: int = 0
    """Base seed; run ``i`` of the batch uses ``seed + i``."""
    workers: int = 1
    include_extended_algorithms: bool = False

    def __post_init__(self) -> None:
        if self.cube_size < 1:
            raise ValueError("cube_size must be >= 1")
        if self.max_generations < 0:
            raise ValueError("max_generations must be >= 0")
        if self.runs_per_ruleset < 1:
            raise ValueError("runs_per_ruleset must be >= 1")
        if self.workers < 1:
            raise ValueError("workers must be >= 1")
