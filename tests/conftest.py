import os
import random

# Headless pygame for every test module
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest  # noqa: E402

from gridsnake.model import SnakeGame  # noqa: E402


class FakeScheduler:
    def __init__(self):
        self.calls = []
        self.interval = 0

    def reschedule(self, interval):
        self.calls.append(("reschedule", interval))
        self.interval = interval

    def cancel(self):
        self.calls.append(("cancel",))
        self.interval = 0


class FakeStore:
    def __init__(self, value=0):
        self.value = value
        self.writes = []

    def get(self):
        return self.value

    def set(self, value):
        self.writes.append(value)
        self.value = value


class RecordingSink:
    def __init__(self):
        self.events = []

    def log_event(self, name, params=None):
        self.events.append((name, dict(params or {})))

    def named(self, name):
        return [params for event, params in self.events if event == name]


class FakeClock:
    def __init__(self, now=100.0):
        self.now = now

    def __call__(self):
        return self.now


@pytest.fixture
def scheduler():
    return FakeScheduler()


@pytest.fixture
def store():
    return FakeStore()


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def make_game(scheduler, store, sink, clock):
    def _make(**kwargs):
        kwargs.setdefault("rng", random.Random(7))
        kwargs.setdefault("clock", clock)
        return SnakeGame(scheduler, store, sink, **kwargs)
    return _make


@pytest.fixture
def game(make_game):
    return make_game()
