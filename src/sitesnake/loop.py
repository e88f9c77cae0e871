from __future__ import annotations

import logging
import random
from typing import Callable

from .logic import game_tick
from .state import State, new_state

logger = logging.getLogger(__name__)


class GameLoop:
    """Owns the game state and the tick timer.

    Idle -> Running <-> Paused, and back to Idle on game over. The timer is
    any object with ``start(interval_ms) -> handle`` and ``cancel(handle)``;
    it is expected to call :meth:`tick` once per interval on the same thread
    that delivers key input.

    ``base_interval`` is the difficulty control. It is sampled at every start
    and every level-up, never cached.
    """

    def __init__(self, timer, store, base_interval: Callable[[], int], rng: random.Random | None = None):
        self.timer = timer
        self.store = store
        self.base_interval = base_interval
        self.rng = rng or random.Random()
        self.on_game_over: list[Callable[[int], None]] = []

        self.state: State = new_state(self.base_interval(), self.rng)
        self.high_score: int = self.store.load()
        self.final_score: int | None = None

    @property
    def is_running(self) -> bool:
        return self.state.running

    @property
    def is_paused(self) -> bool:
        return self.state.paused

    def start(self) -> None:
        if self.state.running:
            return
        self._begin()

    def restart(self) -> None:
        if self.state.timer is not None:
            self.timer.cancel(self.state.timer)
        self._begin()

    def _begin(self) -> None:
        state = new_state(self.base_interval(), self.rng)
        self.high_score = self.store.load()
        self.final_score = None
        self.state = state._replace(running=True, paused=False, timer=self.timer.start(state.interval))
        logger.info("Game started at %d ms per tick", state.interval)

    def tick(self) -> None:
        # A tick event may already be queued when the timer gets cancelled.
        if not self.state.running or self.state.paused:
            return

        prev = self.state
        self.state = game_tick(prev, self.base_interval(), self.rng)

        if self.state.level > prev.level:
            logger.info("Level %d, %d ms per tick", self.state.level, self.state.interval)
            self._replace_timer()

        if self.state.score > self.high_score:
            self.high_score = self.state.score
            logger.info("New high score %d", self.high_score)
            self.store.save(self.high_score)

        if self.state.game_over:
            self._game_over()

    def _replace_timer(self) -> None:
        if self.state.timer is None:
            return
        self.timer.cancel(self.state.timer)
        self.state = self.state._replace(timer=self.timer.start(self.state.interval))

    def _game_over(self) -> None:
        if self.state.timer is not None:
            self.timer.cancel(self.state.timer)
        self.state = self.state._replace(running=False, paused=False, timer=None)
        self.final_score = self.state.score
        logger.info("Game over, final score %d", self.final_score)
        for listener in self.on_game_over:
            listener(self.final_score)

    def toggle_pause(self) -> None:
        if not self.state.running:
            return
        if self.state.paused:
            self.state = self.state._replace(paused=False, timer=self.timer.start(self.state.interval))
        else:
            self.timer.cancel(self.state.timer)
            self.state = self.state._replace(paused=True, timer=None)

    def request_direction(self, direction: tuple[int, int]) -> None:
        self.state = self.state._replace(next_direction=direction)
