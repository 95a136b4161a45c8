"""Typed per-generation snapshot recorded by the analyzer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping


@dataclass(frozen=True)
class GenerationSnapshot:
    """Immutable summary of one generation of a run."""

    generation: int
    population: int
    changes: int
    color_counts: tuple[tuple[int, int], ...]
    """Sorted ``(color, count)`` pairs of living cells; a mapping is accepted."""
    center_of_mass: tuple[float, float, float]

    def __post_init__(self) -> None:
        counts = self.color_counts
        pairs = counts.items() if isinstance(counts, Mapping) else counts
        object.__setattr__(self, "color_counts", tuple(sorted(pairs)))
        object.__setattr__(self, "center_of_mass", tuple(self.center_of_mass))
