from __future__ import annotations

import numpy as np

from . import config

Cell = tuple[int, int]


def add_vectors(a: Cell, b: Cell) -> Cell:
    return (a[0] + b[0], a[1] + b[1])


def in_bounds(cell: Cell, size: int = config.GRID_SIZE) -> bool:
    x, y = cell
    return 0 <= x < size and 0 <= y < size


def free_cells(snake, size: int = config.GRID_SIZE) -> list[Cell]:
    """Every in-bounds cell the snake does not cover, in row-major order."""
    occupied = np.zeros((size, size), dtype=bool)
    for cell in snake:
        if in_bounds(cell, size):
            x, y = cell
            occupied[y, x] = True
    ys, xs = np.nonzero(~occupied)
    return list(zip(xs.tolist(), ys.tolist()))
