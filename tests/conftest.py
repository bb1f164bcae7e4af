"""Shared fakes: a scripted terminal and a hand-cranked clock."""

from dataclasses import dataclass

import pytest

from mindgames.events import KeyEvent


@dataclass
class Tick:
    """Script item: advance the fake clock by `seconds`."""
    seconds: float


class FakeClock:
    def __init__(self, now: float = 100.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeTerminal:
    """Plays back a script of KeyEvents and Ticks; records every frame drawn.

    Running past the end of the script raises OSError so a broken test
    cannot spin forever.
    """

    def __init__(self, script=(), clock: FakeClock | None = None):
        self.script = list(script)
        self.clock = clock
        self.frames = []

    def draw(self, frame) -> None:
        self.frames.append(frame)

    def _apply_tick(self) -> bool:
        if self.script and isinstance(self.script[0], Tick):
            tick = self.script.pop(0)
            if self.clock:
                self.clock.advance(tick.seconds)
            return True
        return False

    def poll(self, timeout: float) -> bool:
        if self._apply_tick():
            return False
        if not self.script:
            raise OSError("script exhausted")
        return True

    def read(self) -> KeyEvent:
        while self._apply_tick():
            pass
        if not self.script:
            raise OSError("script exhausted")
        return self.script.pop(0)


def keys(*chars: str) -> list[KeyEvent]:
    return [KeyEvent.of(c) for c in chars]


@pytest.fixture
def clock():
    return FakeClock()
