from __future__ import annotations

import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from sitesnake.highscore import HighScoreStore
from sitesnake.loop import GameLoop


class FakeTimer:
    """Records timer calls; the test drives ticks by hand."""

    def __init__(self):
        self.calls = []
        self.active = set()
        self._next = 1

    def start(self, interval_ms):
        handle = self._next
        self._next += 1
        self.active.add(handle)
        self.calls.append(("start", interval_ms, handle))
        return handle

    def cancel(self, handle):
        self.active.discard(handle)
        self.calls.append(("cancel", handle))

    def intervals(self):
        return [c[1] for c in self.calls if c[0] == "start"]


class MemoryStore:
    def __init__(self, value=0):
        self.value = value
        self.saves = []

    def load(self):
        return self.value

    def save(self, score):
        self.value = score
        self.saves.append(score)


@pytest.fixture
def timer():
    return FakeTimer()


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def make_loop(timer, store):
    def _make(base=150, seed=7):
        return GameLoop(timer, store, lambda: base, rng=random.Random(seed))

    return _make


@pytest.fixture
def file_store(tmp_path):
    return HighScoreStore(tmp_path / "highscore.json")
