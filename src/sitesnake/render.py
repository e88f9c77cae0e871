from __future__ import annotations

import pygame

from . import config
from .state import State


def draw_board(surface: pygame.Surface, state: State, show_grid: bool = True) -> None:
    surface.fill(config.BACKGROUND)

    if show_grid:
        for i in range(config.GRID_SIZE + 1):
            p = i * config.BLOCK
            pygame.draw.line(surface, config.GRID_LINE, (p, 0), (p, config.HEIGHT))
            pygame.draw.line(surface, config.GRID_LINE, (0, p), (config.WIDTH, p))

    size = config.BLOCK - 1
    for x, y in state.snake:
        pygame.draw.rect(surface, config.SNAKE, pygame.Rect(x * config.BLOCK, y * config.BLOCK, size, size))

    if state.food is not None:
        fx, fy = state.food
        pygame.draw.rect(surface, config.FOOD, pygame.Rect(fx * config.BLOCK, fy * config.BLOCK, size, size))


def draw_hud(surface: pygame.Surface, font: pygame.font.Font, loop, difficulty: str) -> None:
    surface.fill(config.HUD_BACKGROUND)
    state = loop.state
    stats = f"Score {state.score}   Level {state.level}   Best {loop.high_score}"
    surface.blit(font.render(stats, True, config.TEXT), (8, 4))

    if loop.final_score is not None:
        hint = f"Game over! Final score {loop.final_score}. R to restart"
    elif not loop.is_running:
        hint = f"Enter to start  [{difficulty}]  1/2/3 difficulty"
    elif loop.is_paused:
        hint = "Paused. Space to resume"
    else:
        hint = ""
    if hint:
        surface.blit(font.render(hint, True, config.TEXT), (8, 24))
