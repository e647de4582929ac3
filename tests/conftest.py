import pygame  # type: ignore
import pytest

from snakey.controls import FrameInput
from snakey.states import GameStateMachine
from snakey import layout


class StubRng:
    """randrange() replays queued values, then keeps returning 0."""

    def __init__(self, *values):
        self.values = list(values)

    def randrange(self, n):
        return self.values.pop(0) % n if self.values else 0


class RecordingRenderer:
    def __init__(self):
        self.calls = []

    def _record(self, *call):
        self.calls.append(call)

    def begin_frame(self):
        self._record("begin")

    def end_frame(self):
        self._record("end")

    def clear(self, color):
        self._record("clear", color)

    def fill_rect(self, rect, color):
        self._record("fill_rect", pygame.Rect(rect), tuple(color))

    def outline_rect(self, rect, color):
        self._record("outline_rect", pygame.Rect(rect), tuple(color))

    def line(self, start, end, color):
        self._record("line", start, end, tuple(color))

    def text(self, s, x, y, size, color):
        self._record("text", s, x, y, size, tuple(color))

    def measure_text(self, s, size):
        return len(s) * size // 2

    def texts(self):
        return [c[1] for c in self.calls if c[0] == "text"]


def click(rect, **kw):
    return FrameInput(mouse_pos=rect.center, mouse_pressed=True, mouse_down=True, **kw)


def keys(*pressed, held=()):
    return FrameInput(keys_down=frozenset(held) | frozenset(pressed), keys_pressed=tuple(pressed))


def hold(*held):
    return FrameInput(keys_down=frozenset(held))


def start_playing(game, t=0):
    """StartMenu -> Countdown -> Playing; returns the time play began."""
    game.update(click(layout.start_menu_buttons()["PLAY"]), t)
    game.update(FrameInput(), t + 3000)
    return t + 3000


@pytest.fixture
def game():
    return GameStateMachine(rng=StubRng())


@pytest.fixture
def renderer():
    return RecordingRenderer()
