"""Simulation driver: per-run state machine over one grid/state pair."""

from cube_automata.simulation.driver import RunStatus, Simulation, StabilityDetector, StepResult

__all__ = [
    "RunStatus",
    "Simulation",
    "StabilityDetector",
    "StepResult",
]
