"""Ruleset catalog explored by the batch search."""

from __future__ import annotations

from cube_automata.config.presets import INFO_PRESETS, energy_presets, magnet_presets
from cube_automata.config.types import CompetitionConfig, Life3DConfig, Ruleset

CLASSIC_LIFE_RULES: tuple[tuple[str, tuple[int, ...], tuple[int, ...]], ...] = (
    ("Life5567", (5,), (5, 6, 7)),
    ("Life6567", (6,), (5, 6, 7)),
    ("Life45-56", (4, 5), (5, 6)),
    ("Life56-456", (5, 6), (4, 5, 6)),
    ("Life4-4567", (4,), (4, 5, 6, 7)),
    ("Life67-56", (6, 7), (5, 6)),
    ("Life5-456", (5,), (4, 5, 6)),
    ("Life456-678", (4, 5, 6), (6, 7, 8)),
)
"""Named ``(name, birth, survival)`` Life3D rules."""

CLASSIC_MAX_AGES = (20, 50, 100)

BIRTH_OPTIONS: tuple[tuple[int, ...], ...] = (
    (3,), (4,), (5,), (6,), (7,),
    (4, 5), (5, 6), (6, 7),
    (3, 4, 5), (5, 6, 7),
)  # fmt: skip

SURVIVAL_OPTIONS: tuple[tuple[int, ...], ...] = (
    (4, 5), (5, 6), (6, 7), (7, 8),
    (4, 5, 6), (5, 6, 7), (6, 7, 8),
    (3, 4, 5, 6), (4, 5, 6, 7),
)  # fmt: skip

BIRTH_SURVIVAL_STRIDE = 3
"""Keep every third birth/survival combination."""

EDGE_BIAS_BASES: tuple[tuple[str, tuple[int, ...], tuple[int, ...]], ...] = (
    ("Classic", (5,), (5, 6, 7)),
    ("Growth", (4, 5), (5, 6)),
    ("Stable", (6,), (4, 5, 6, 7)),
)

EDGE_BIASES = (0.5, 0.7, 0.9, 1.1, 1.3, 1.5)

COMPETITION_SURVIVAL_RANGE = (2, 3, 4, 5, 6)
COMPETITION_BIRTH_RANGE = (3, 4, 5, 6, 7, 8)
COMPETITION_THRESHOLD_RANGE = (4, 6, 8, 10, 12)


def _digits(values: tuple[int, ...]) -> str:
    return "".join(str(v) for v in values)


def life3d_classic_variations(cube_size: int, max_generations: int) -> list[Ruleset]:
    """Classic rules crossed with age coloring on/off and three age caps."""
    rulesets: list[Ruleset] = []
    for name, birth, survival in CLASSIC_LIFE_RULES:
        for use_age_colors in (True, False):
            for max_age in CLASSIC_MAX_AGES:
                suffix = f"age{max_age}" if use_age_colors else f"noage{max_age}"
                rulesets.append(
                    Ruleset(
                        name=f"{name}_{suffix}",
                        cube_size=cube_size,
                        max_generations=max_generations,
                        config=Life3DConfig(
                            birth_neighbors=frozenset(birth),
                            survival_neighbors=frozenset(survival),
                            use_age_colors=use_age_colors,
                            max_age=max_age,
                            edge_bias=1.0,
                        ),
                    )
                )
    return rulesets


def life3d_birth_survival_variations(cube_size: int, max_generations: int) -> list[Ruleset]:
    rulesets: list[Ruleset] = []
    combination = 0
    for birth in BIRTH_OPTIONS:
        for survival in SURVIVAL_OPTIONS:
            keep = combination % BIRTH_SURVIVAL_STRIDE == 0
            combination += 1
            if not keep:
                continue
            rulesets.append(
                Ruleset(
                    name=f"B{_digits(birth)}S{_digits(survival)}",
                    cube_size=cube_size,
                    max_generations=max_generations,
                    config=Life3DConfig(
                        birth_neighbors=frozenset(birth),
                        survival_neighbors=frozenset(survival),
                        use_age_colors=True,
                        max_age=50,
                        edge_bias=1.0,
                    ),
                )
            )
    return rulesets


def life3d_edge_bias_variations(cube_size: int, max_generations: int) -> list[Ruleset]:
    return [
        Ruleset(
            name=f"{name}_edge{bias}",
            cube_size=cube_size,
            max_generations=max_generations,
            config=Life3DConfig(
                birth_neighbors=frozenset(birth),
                survival_neighbors=frozenset(survival),
                use_age_colors=True,
                max_age=50,
                edge_bias=bias,
            ),
        )
        for name, birth, survival in EDGE_BIAS_BASES
        for bias in EDGE_BIASES
    ]


def competition_variations(cube_size: int, max_generations: int) -> list[Ruleset]:
    """Competition sweep restricted to ``birth > survival``."""
    return [
        Ruleset(
            name=f"Comp_S{survival}B{birth}C{threshold}",
            cube_size=cube_size,
            max_generations=max_generations,
            config=CompetitionConfig(
                min_neighbors_to_survive=survival,
                min_neighbors_to_birth=birth,
                competition_threshold=threshold,
            ),
        )
        for survival in COMPETITION_SURVIVAL_RANGE
        for birth in COMPETITION_BIRTH_RANGE
        for threshold in COMPETITION_THRESHOLD_RANGE
        if birth > survival
    ]


def extended_algorithm_variations(cube_size: int, max_generations: int) -> list[Ruleset]:
    """One ruleset per energy, magnet and info preset."""
    rulesets: list[Ruleset] = []
    for prefix, presets in (
        ("Energy", energy_presets(cube_size)),
        ("Magnet", magnet_presets(cube_size)),
        ("Info", INFO_PRESETS),
    ):
        for name, config in presets.items():
            rulesets.append(
                Ruleset(
                    name=f"{prefix}_{name}",
                    cube_size=cube_size,
                    max_generations=max_generations,
                    config=config,
                )
            )
    return rulesets


def generate_rulesets(
    cube_size: int, max_generations: int, include_extended_algorithms: bool = False
) -> list[Ruleset]:
    """Full batch catalog in a fixed order."""
    rulesets = [
        *life3d_classic_variations(cube_size, max_generations),
        *life3d_birth_survival_variations(cube_size, max_generations),
        *life3d_edge_bias_variations(cube_size, max_generations),
        *competition_variations(cube_size, max_generations),
    ]
    if include_extended_algorithms:
        rulesets.extend(extended_algorithm_variations(cube_size, max_generations))
    return rulesets
