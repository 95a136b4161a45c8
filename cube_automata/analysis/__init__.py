"""Single-run analysis: snapshots, metrics and result records."""

from cube_automata.analysis.analyzer import (
    SimulationMetrics,
    SimulationResult,
    analyze_ruleset,
    compute_metrics,
)

__all__ = [
    "SimulationMetrics",
    "SimulationResult",
    "analyze_ruleset",
    "compute_metrics",
]
