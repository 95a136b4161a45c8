"""Spatial metrics on a single grid: center of mass, spread, clusters, boundary share."""

from __future__ import annotations

from typing import Sequence

import networkx as nx
import numpy as np

from cube_automata.config.constants import SPATIAL_DISTRIBUTION_SCALE
from cube_automata.domain.grid import edge_mask, index_to_coord, neighbor_table


def center_of_mass(grid: Sequence[int | None], n: int) -> tuple[float, float, float]:
    """Mean coordinate of living cells; the origin for an empty grid."""
    living = [index_to_coord(i, n) for i, cell in enumerate(grid) if cell is not None]
    if not living:
        return (0.0, 0.0, 0.0)
    mean = np.asarray(living, dtype=float).mean(axis=0)
    return (float(mean[0]), float(mean[1]), float(mean[2]))


def spatial_distribution(center: Sequence[float]) -> float:
    """Distance of the center of mass from the origin, scaled and capped at 1."""
    distance = float(np.linalg.norm(np.asarray(center, dtype=float)))
    return min(distance / SPATIAL_DISTRIBUTION_SCALE, 1.0)


def cluster_count(grid: Sequence[int | None], n: int) -> int:
    """Number of 26-connected components of living cells, any color."""
    graph = nx.Graph()
    table = neighbor_table(n)
    for i, cell in enumerate(grid):
        if cell is None:
            continue
        graph.add_node(i)
        for j in table[i]:
            if j > i and grid[j] is not None:
                graph.add_edge(i, j)
    return nx.number_connected_components(graph)


def edge_population(grid: Sequence[int | None], n: int) -> int:
    """Living cells with at least one coordinate on the cube boundary."""
    mask = edge_mask(n)
    return sum(1 for i, cell in enumerate(grid) if cell is not None and mask[i])
