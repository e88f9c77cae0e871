from __future__ import annotations

import pygame

from . import config
from .grid import add_vectors

KEY_DIRECTIONS = {
    pygame.K_UP: config.UP,
    pygame.K_w: config.UP,
    pygame.K_DOWN: config.DOWN,
    pygame.K_s: config.DOWN,
    pygame.K_LEFT: config.LEFT,
    pygame.K_a: config.LEFT,
    pygame.K_RIGHT: config.RIGHT,
    pygame.K_d: config.RIGHT,
}
PAUSE_KEY = pygame.K_SPACE


def on_key(loop, key: int) -> bool:
    """Route a key press to the game loop.

    Returns True when the key belongs to the game (pause or a direction),
    whether or not it changed anything.
    """
    if key == PAUSE_KEY:
        if loop.is_running:
            loop.toggle_pause()
        return True

    new_dir = KEY_DIRECTIONS.get(key)
    if new_dir is None:
        return False
    if not loop.is_running or loop.is_paused:
        return True
    # Reversal check is against the applied direction, not the buffered one.
    if add_vectors(loop.state.direction, new_dir) != (0, 0):
        loop.request_direction(new_dir)
    return True


class DifficultySelector:
    """The difficulty control; the loop reads base_interval() on demand."""

    def __init__(self, name: str = config.DEFAULT_DIFFICULTY):
        self.select(name)

    def select(self, name: str) -> None:
        if name not in config.DIFFICULTIES:
            raise ValueError(f"unknown difficulty: {name}")
        self.name = name

    def base_interval(self) -> int:
        return config.DIFFICULTIES[self.name]
