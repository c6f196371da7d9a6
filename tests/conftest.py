import os
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from bowling_sim.models import Frame, FrameOutcome, Game


class ScriptedRandom:
    """Random source that replays fixed draws, in order."""

    def __init__(self, draws):
        self.draws = list(draws)

    def _next(self):
        if not self.draws:
            raise AssertionError("ran out of scripted draws")
        return self.draws.pop(0)

    def randrange(self, stop):
        value = self._next()
        assert 0 <= value < stop
        return value

    def randint(self, a, b):
        value = self._next()
        assert a <= value <= b
        return value


def build_game(regular, last=(0, 0, 0)):
    """Build a played game from nine ``(type, first, second)`` tuples and the
    tenth frame's three balls."""
    frames = [
        Frame(type=kind, first_ball=first, second_ball=second)
        for kind, first, second in regular
    ]
    first, second, third = last
    frames.append(
        Frame(
            type=FrameOutcome.LAST_FRAME,
            first_ball=first,
            second_ball=second,
            third_ball=third,
        )
    )
    return Game(frames=frames)


def zeros():
    return [(FrameOutcome.OPEN, 0, 0)] * 9


@pytest.fixture
def scripted():
    return ScriptedRandom


@pytest.fixture
def make_game():
    return build_game


@pytest.fixture
def open_zeros():
    return zeros()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep local environment settings out of the tests."""
    for var in ("BOWLING_SEED", "BOWLING_LOG_LEVEL", "SENTRY_DSN", "SENTRY_ENVIRONMENT"):
        monkeypatch.delenv(var, raising=False)
    yield
