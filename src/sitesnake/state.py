from __future__ import annotations

import random
from collections import namedtuple

from . import config
from .food import place_food

State = namedtuple(
    "State",
    [
        "snake",
        "direction",
        "next_direction",
        "food",
        "score",
        "level",
        "interval",
        "running",
        "paused",
        "timer",
        "game_over",
    ],
)
# snake: list[(x, y)], head is first element.
# direction: (dx, dy) applied on the last tick.
# next_direction: (dx, dy) buffered by input, adopted on the next tick.
# food: (x, y), or None once the snake covers the whole board.
# interval: tick period in milliseconds.
# timer: opaque handle of the armed tick timer, None while idle or paused.


def new_state(base_interval: int, rng: random.Random) -> State:
    snake = list(config.START_SNAKE)
    return State(
        snake=snake,
        direction=config.START_DIRECTION,
        next_direction=config.START_DIRECTION,
        food=place_food(snake, rng),
        score=0,
        level=1,
        interval=base_interval,
        running=False,
        paused=False,
        timer=None,
        game_over=False,
    )


class Functor:
    """Tiny helper for chaining state transforms."""

    def __init__(self, value):
        self.value = value

    def map(self, func):
        return Functor(func(self.value))

    def get(self):
        return self.value
