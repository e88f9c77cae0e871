from __future__ import annotations

from . import config
from .state import State


def level_for(score: int) -> int:
    return score // config.POINTS_PER_LEVEL + 1


def interval_for(level: int, base_interval: int) -> int:
    return max(config.MIN_INTERVAL, base_interval - config.SPEED_STEP_PER_LEVEL * (level - 1))


def add_points(state: State, points: int, base_interval: int) -> State:
    """Add points and level up when the score crosses a level threshold.

    The level never goes down, and the interval is only recomputed on a
    level increase, using the base interval current at that moment.
    """
    score = state.score + points
    level = level_for(score)
    if level <= state.level:
        return state._replace(score=score)
    return state._replace(score=score, level=level, interval=interval_for(level, base_interval))
