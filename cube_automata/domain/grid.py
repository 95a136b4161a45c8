"""Cubic grid topology: linear index <-> (x, y, z) and Moore neighborhoods.

Cells are stored in a flat sequence of length ``n**3`` with index
``x + y*n + z*n*n``. Neighborhoods are clipped at the cube boundary (no
wrap-around), so a corner has 7 neighbors, an edge cell 11, a face cell 17
and an interior cell 26 once ``n >= 3``.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Sequence

Coord = tuple[int, int, int]

Grid = tuple[int | None, ...]
"""Immutable cell values for one generation: a color index or ``None`` (empty)."""

MOORE_OFFSETS: tuple[Coord, ...] = tuple(
    (dx, dy, dz)
    for dx in (-1, 0, 1)
    for dy in (-1, 0, 1)
    for dz in (-1, 0, 1)
    if (dx, dy, dz) != (0, 0, 0)
)
"""The 26 Moore offsets, ``dx`` outermost and ``dz`` innermost."""


def cell_count(n: int) -> int:
    return n * n * n


def index_to_coord(index: int, n: int) -> Coord:
    """Map a linear cell index to ``(x, y, z)``."""
    plane = n * n
    z = index // plane
    y = (index % plane) // n
    x = index % n
    return (x, y, z)


def coord_to_index(x: int, y: int, z: int, n: int) -> int:
    """Map ``(x, y, z)`` to a linear cell index."""
    return x + y * n + z * n * n


def in_bounds(x: int, y: int, z: int, n: int) -> bool:
    return 0 <= x < n and 0 <= y < n and 0 <= z < n


def is_edge_cell(index: int, n: int) -> bool:
    """True when any coordinate of the cell lies on the cube boundary."""
    return any(c == 0 or c == n - 1 for c in index_to_coord(index, n))


def neighbors(index: int, n: int) -> tuple[int, ...]:
    """Return the in-bounds Moore neighbors of *index* in offset order."""
    return neighbor_table(n)[index]


@lru_cache(maxsize=32)
def neighbor_table(n: int) -> tuple[tuple[int, ...], ...]:
    """Precomputed neighbor indices for every cell of an ``n``-cube."""
    table: list[tuple[int, ...]] = []
    for index in range(cell_count(n)):
        x, y, z = index_to_coord(index, n)
        cells: list[int] = []
        for dx, dy, dz in MOORE_OFFSETS:
            nx_, ny_, nz_ = x + dx, y + dy, z + dz
            if in_bounds(nx_, ny_, nz_, n):
                cells.append(coord_to_index(nx_, ny_, nz_, n))
        table.append(tuple(cells))
    return tuple(table)


@lru_cache(maxsize=32)
def edge_mask(n: int) -> tuple[bool, ...]:
    """Per-cell boundary flags for an ``n``-cube."""
    return tuple(is_edge_cell(index, n) for index in range(cell_count(n)))


def empty_grid(n: int) -> Grid:
    return (None,) * cell_count(n)


def population(grid: Sequence[int | None]) -> int:
    """Number of living (non-empty) cells."""
    return sum(1 for cell in grid if cell is not None)


def count_changes(previous: Sequence[int | None], current: Sequence[int | None]) -> int:
    """Number of cells whose value differs between two grids."""
    return sum(1 for a, b in zip(previous, current, strict=True) if a != b)


def color_counts(grid: Sequence[int | None]) -> dict[int, int]:
    """Living-cell count per color, keys in ascending color order."""
    counts: dict[int, int] = {}
    for cell in grid:
        if cell is not None:
            counts[cell] = counts.get(cell, 0) + 1
    return dict(sorted(counts.items()))


def dominant_color(counts: dict[int, int]) -> tuple[int | None, int]:
    """Return ``(color, count)`` of the most frequent color.

    Colors are scanned in ascending numeric order and only a strictly greater
    count replaces the current pick, so ties resolve to the lowest color.
    Returns ``(None, 0)`` for an empty mapping.
    """
    best: int | None = None
    best_count = 0
    for color in sorted(counts):
        if counts[color] > best_count:
            best = color
            best_count = counts[color]
    return best, best_count


def neighbor_color_counts(grid: Sequence[int | None], cells: Sequence[int]) -> dict[int, int]:
    """Count colors among the given neighbor indices, ignoring empty cells."""
    counts: dict[int, int] = {}
    for neighbor in cells:
        color = grid[neighbor]
        if color is not None:
            counts[color] = counts.get(color, 0) + 1
    return counts


def validate_grid(grid: Sequence[int | None], n: int) -> Grid:
    """Return *grid* as a tuple, checking its length against the cube size."""
    if len(grid) != cell_count(n):
        raise ValueError(f"grid has {len(grid)} cells; expected {cell_count(n)} for cube size {n}")
    return tuple(grid)
