from __future__ import annotations

from pathlib import Path

import pygame

from . import config
from .controls import DifficultySelector, on_key
from .highscore import HighScoreStore
from .loop import GameLoop
from .render import draw_board, draw_hud
from .timer import TICK_EVENT, PygameTimer

DIFFICULTY_KEYS = {
    pygame.K_1: "easy",
    pygame.K_2: "normal",
    pygame.K_3: "hard",
}


def handle_event(event: pygame.event.Event, loop: GameLoop, selector: DifficultySelector) -> bool:
    """Route one pygame event. Returns False once the player asks to quit."""
    if event.type == pygame.QUIT:
        return False
    if event.type == TICK_EVENT:
        loop.tick()
    elif event.type == pygame.KEYDOWN:
        if event.key in (pygame.K_ESCAPE, pygame.K_q):
            return False
        if event.key == pygame.K_RETURN:
            loop.start()
        elif event.key == pygame.K_r:
            loop.restart()
        elif event.key == pygame.K_p:
            loop.toggle_pause()
        elif event.key in DIFFICULTY_KEYS:
            # The difficulty control is only offered between games.
            if not loop.is_running:
                selector.select(DIFFICULTY_KEYS[event.key])
        else:
            on_key(loop, event.key)
    return True


def run(difficulty: str, highscore_file: Path, show_grid: bool = True) -> int | None:
    pygame.init()
    pygame.display.set_caption("Snake")
    screen = pygame.display.set_mode(config.WINDOW_SIZE)
    hud = screen.subsurface(pygame.Rect(0, 0, config.WIDTH, config.HUD_HEIGHT))
    board = screen.subsurface(pygame.Rect(0, config.HUD_HEIGHT, config.WIDTH, config.HEIGHT))
    font = pygame.font.SysFont(None, 22)
    clock = pygame.time.Clock()

    selector = DifficultySelector(difficulty)
    loop = GameLoop(PygameTimer(), HighScoreStore(highscore_file), selector.base_interval)

    running = True
    while running:
        for event in pygame.event.get():
            if not handle_event(event, loop, selector):
                running = False
                break

        draw_hud(hud, font, loop, selector.name)
        draw_board(board, loop.state, show_grid)
        pygame.display.flip()
        clock.tick(config.FPS)

    pygame.quit()
    return loop.final_score
