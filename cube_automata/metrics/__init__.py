"""Run metrics: temporal detectors, spatial measures, scoring and classification."""

from cube_automata.metrics.scoring import Classification, ScoreInputs, classify, interest_score
from cube_automata.metrics.spatial import (
    center_of_mass,
    cluster_count,
    edge_population,
    spatial_distribution,
)
from cube_automata.metrics.temporal import (
    center_of_mass_movement,
    detect_movement,
    detect_oscillation,
    find_stability_generation,
)

__all__ = [
    "Classification",
    "ScoreInputs",
    "center_of_mass",
    "center_of_mass_movement",
    "classify",
    "cluster_count",
    "detect_movement",
    "detect_oscillation",
    "edge_population",
    "find_stability_generation",
    "interest_score",
    "spatial_distribution",
]
