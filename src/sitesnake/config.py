from __future__ import annotations

import os
from pathlib import Path

GRID_SIZE = 20
BLOCK = 20
WIDTH, HEIGHT = GRID_SIZE * BLOCK, GRID_SIZE * BLOCK
HUD_HEIGHT = 48
WINDOW_SIZE = (WIDTH, HEIGHT + HUD_HEIGHT)
FPS = 60

POINTS_PER_FOOD = 10
POINTS_PER_LEVEL = 50
SPEED_STEP_PER_LEVEL = 10
MIN_INTERVAL = 30

# Base tick interval in milliseconds per difficulty.
DIFFICULTIES = {
    "easy": 200,
    "normal": 150,
    "hard": 100,
}
DEFAULT_DIFFICULTY = "normal"

UP = (0, -1)
DOWN = (0, 1)
LEFT = (-1, 0)
RIGHT = (1, 0)

START_SNAKE = [(10, 10), (9, 10), (8, 10)]
START_DIRECTION = RIGHT

# Rejection-sampling draws before falling back to a full-board scan.
FOOD_RETRY_LIMIT = 1000

BACKGROUND = (245, 245, 245)
GRID_LINE = (224, 224, 224)
SNAKE = (76, 175, 80)
FOOD = (244, 67, 54)
HUD_BACKGROUND = (33, 33, 33)
TEXT = (240, 240, 240)

HIGHSCORE_KEY = "snakeHighScore"
HIGHSCORE_FILE = Path(
    os.environ.get(
        "SITESNAKE_HIGHSCORE_FILE",
        Path.home() / ".local" / "share" / "sitesnake" / "highscore.json",
    )
)
