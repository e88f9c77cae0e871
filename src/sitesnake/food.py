from __future__ import annotations

import logging
import random

from . import config
from .grid import Cell, free_cells

logger = logging.getLogger(__name__)


def place_food(snake, rng: random.Random, size: int = config.GRID_SIZE) -> Cell | None:
    """Pick a uniformly random in-bounds cell that is not part of the snake.

    Draws at random until a free cell turns up. After FOOD_RETRY_LIMIT misses
    the board is nearly full, so the free cells are enumerated and one of
    them is chosen directly. Returns None when the snake covers every cell.
    """
    occupied = set(snake)
    for _ in range(config.FOOD_RETRY_LIMIT):
        pos = (rng.randint(0, size - 1), rng.randint(0, size - 1))
        if pos not in occupied:
            return pos

    candidates = free_cells(snake, size)
    logger.debug("food rejection sampling exhausted, %d free cells left", len(candidates))
    if not candidates:
        return None
    return rng.choice(candidates)
