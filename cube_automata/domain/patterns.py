"""Seedable initial patterns for cube simulations.

Every generator returns a fresh ``Grid`` of length ``n**3``; positions that
fall outside the cube are skipped rather than wrapped.
"""

from __future__ import annotations

import math
from random import Random
from typing import Iterable

from cube_automata.config.constants import NUM_COLORS
from cube_automata.domain.grid import Grid, cell_count, coord_to_index, in_bounds, index_to_coord


def _paint(n: int, cells: Iterable[tuple[tuple[int, int, int], int]]) -> Grid:
    grid: list[int | None] = [None] * cell_count(n)
    for (x, y, z), color in cells:
        if in_bounds(x, y, z, n):
            grid[coord_to_index(x, y, z, n)] = color
    return tuple(grid)


def create_random_pattern(
    n: int,
    density: float = 0.3,
    num_colors: int = NUM_COLORS,
    rng: Random | None = None,
) -> Grid:
    """Fill each cell with probability *density* using a uniform random color."""
    if not 0.0 <= density <= 1.0:
        raise ValueError("density must be in [0.0, 1.0]")
    rng = rng or Random()
    grid: list[int | None] = []
    for _ in range(cell_count(n)):
        if rng.random() < density:
            grid.append(rng.randrange(num_colors))
        else:
            grid.append(None)
    return tuple(grid)


def create_life3d_seed_pattern(n: int) -> Grid:
    """Five-cell plus sign in the central z-plane, each arm a different color."""
    c = n // 2
    arms = [(c, c, c), (c - 1, c, c), (c + 1, c, c), (c, c - 1, c), (c, c + 1, c)]
    return _paint(n, ((pos, i % NUM_COLORS) for i, pos in enumerate(arms)))


def create_life3d_corner_pattern(n: int) -> Grid:
    """Small L-shaped tetrads near four corners, one color per corner."""
    corners = [(1, 1, 1), (n - 2, 1, 1), (1, n - 2, 1), (1, 1, n - 2)]
    cells = []
    for color, (x, y, z) in enumerate(corners):
        for pos in ((x, y, z), (x + 1, y, z), (x, y + 1, z), (x, y, z + 1)):
            cells.append((pos, color))
    return _paint(n, cells)


def create_life3d_layered_pattern(n: int) -> Grid:
    """Plus signs on every odd inner z-layer, colored by layer."""
    c = n // 2
    cells = []
    for z in range(1, n - 1, 2):
        for x, y in ((c, c), (c - 1, c), (c + 1, c), (c, c - 1), (c, c + 1)):
            cells.append(((x, y, z), z % NUM_COLORS))
    return _paint(n, cells)


def create_life3d_spiral_pattern(n: int) -> Grid:
    c = n // 2
    radius = min(2, n // 3)
    cells = []
    for z in range(1, n - 1):
        angle = (z / n) * math.pi * 2
        x = int(round(c + radius * math.cos(angle)))
        y = int(round(c + radius * math.sin(angle)))
        cells.append(((x, y, z), z % NUM_COLORS))
        cells.append(((x + 1, y, z), z % NUM_COLORS))
    return _paint(n, cells)


def create_glider_pattern(n: int) -> Grid:
    """Three small tetrads: two near opposite corners and one at the center."""
    c = n // 2
    cells = [
        ((1, 1, 1), 0),
        ((2, 1, 1), 0),
        ((1, 2, 1), 0),
        ((1, 1, 2), 0),
        ((n - 2, n - 2, 1), 1),
        ((n - 3, n - 2, 1), 1),
        ((n - 2, n - 3, 1), 1),
        ((n - 2, n - 2, 2), 1),
        ((c, c, c), 2),
        ((c + 1, c, c), 2),
        ((c, c + 1, c), 2),
        ((c, c, c + 1), 2),
    ]
    return _paint(n, cells)


def create_color_wave_pattern(n: int) -> Grid:
    """Checkerboard of diagonal color bands."""
    grid: list[int | None] = [None] * cell_count(n)
    for i in range(len(grid)):
        x, y, z = index_to_coord(i, n)
        if (x + y + z) % 2 == 0:
            grid[i] = (x + y + z) % NUM_COLORS
    return tuple(grid)


def create_magnet_vortex_pattern(n: int) -> Grid:
    """Hollow cylinder around the Y axis colored by azimuth."""
    c = n // 2
    grid: list[int | None] = [None] * cell_count(n)
    for i in range(len(grid)):
        x, _, z = index_to_coord(i, n)
        dx, dz = x - c, z - c
        distance = math.sqrt(dx * dx + dz * dz)
        if 0.5 < distance < n / 2:
            hue = (math.atan2(dz, dx) + math.pi) / (2 * math.pi)
            grid[i] = int(hue * NUM_COLORS) % NUM_COLORS
    return tuple(grid)


def create_info_oscillator_pattern(n: int) -> Grid:
    """Four-cell ring in the central y-plane around a center cell."""
    c = n // 2
    ring = [(c - 1, c, c), (c, c, c - 1), (c + 1, c, c), (c, c, c + 1)]
    cells = [(pos, i % 2) for i, pos in enumerate(ring)]
    cells.append(((c, c, c), 4))
    return _paint(n, cells)


def create_info_signal_line_pattern(n: int) -> Grid:
    """A line along X with a distinct head cell, plus two branches for n >= 5."""
    y = z = n // 2
    cells = [((x, y, z), 5 if x == 0 else 0) for x in range(n)]
    if n >= 5:
        cells.extend(((x, y + 1, z), 1) for x in range(2, n - 1))
        cells.extend(((x, y - 1, z), 2) for x in range(2, n - 1))
    return _paint(n, cells)
