"""Reaction Time: wait for green, then press as fast as you can.

Five attempts per run; the stats screen shows the average in ms.
"""

import random
import time
from dataclasses import dataclass, field

from mindgames.events import KeyEvent
from mindgames.frame import Frame, line
from mindgames.games.base import FRAME_DELAY, POLL_INTERVAL, Game

# -- config ----------------------------------------------------------------
TOTAL_ATTEMPTS = 5
DELAY_MIN_MS = 2000   # inclusive
DELAY_MAX_MS = 4000   # exclusive


@dataclass
class ReactionSession:
    attempts: int = TOTAL_ATTEMPTS
    done: int = 0
    history: list[int] = field(default_factory=list)  # reaction times (ms)
    start_time: float | None = None  # set while active
    wait_until: float | None = None  # set while waiting
    result_ms: int = 0               # shown by success / stats


# -- renderers -------------------------------------------------------------

def render_ready() -> Frame:
    return Frame("blue", [
        line("⚡"),
        line("When the red box turns green, press as quickly as you can"),
        line("Press any key to start"),
    ])


def render_waiting() -> Frame:
    return Frame("red", [line("Wait for green")])


def render_too_soon() -> Frame:
    return Frame("light_blue", [
        line("Too soon!"),
        line("Try again by pressing a key"),
    ])


def render_active() -> Frame:
    return Frame("green", [line("Press now!")])


def render_success(ms: int, done: int, total: int) -> Frame:
    return Frame("cyan", [
        line(f"{ms} ms"),
        line(f"Attempt {done}/{total}"),
        line("Keep going! Press to continue"),
    ])


def render_stats(avg_ms: int, history: list[int]) -> Frame:
    return Frame("cyan", [
        line("Average reaction time"),
        line(f"{avg_ms} ms"),
        line(" · ".join(f"{t}" for t in history), bold=False),
    ])


# -- game logic ------------------------------------------------------------

class ReactionGame(Game):
    name = "⚡ Reaction Time"
    description = "Test your visual reflexes"

    def __init__(self, attempts: int = TOTAL_ATTEMPTS, clock=time.monotonic,
                 rng: random.Random | None = None,
                 poll_interval: float = POLL_INTERVAL, frame_delay: float = FRAME_DELAY):
        if attempts <= 0:
            raise ValueError(f"attempts must be positive, got {attempts}")
        super().__init__()
        self.attempts = attempts
        self.clock = clock
        self.rng = rng or random.Random()
        self.poll_interval = poll_interval
        self.frame_delay = frame_delay
        self.state = "ready"  # ready | waiting | too_soon | active | success | stats
        self.session = ReactionSession(attempts=attempts)

    def reset(self):
        self.state = "ready"
        self.session = ReactionSession(attempts=self.attempts)

    def start_waiting(self):
        """Schedule the green light a random 2-4 seconds from now."""
        s = self.session
        delay_ms = self.rng.randrange(DELAY_MIN_MS, DELAY_MAX_MS)
        self.state = "waiting"
        s.wait_until = self.clock() + delay_ms / 1000
        s.start_time = None

    def update(self):
        """Timer transition: waiting -> active once the deadline passes."""
        s = self.session
        if self.state == "waiting" and s.wait_until is not None:
            now = self.clock()
            if now >= s.wait_until:
                self.state = "active"
                s.start_time = now
                s.wait_until = None

    def handle_input(self, event: KeyEvent) -> None:
        if event.is_quit():
            if self.state == "ready":
                self.quit = True
            self.reset()
            return

        s = self.session
        if self.state == "ready":
            self.start_waiting()
        elif self.state == "waiting":
            self.state = "too_soon"
            s.wait_until = None
        elif self.state == "too_soon":
            self.start_waiting()
        elif self.state == "active":
            elapsed_ms = int((self.clock() - s.start_time) * 1000)
            s.history.append(elapsed_ms)
            s.done += 1
            s.start_time = None
            s.result_ms = elapsed_ms
            self.state = "success"
        elif self.state == "success":
            if s.done < s.attempts:
                self.start_waiting()
            else:
                s.result_ms = sum(s.history) // s.attempts
                self.state = "stats"
        elif self.state == "stats":
            self.reset()

    def frame(self) -> Frame:
        s = self.session
        if self.state == "waiting":
            return render_waiting()
        if self.state == "too_soon":
            return render_too_soon()
        if self.state == "active":
            return render_active()
        if self.state == "success":
            return render_success(s.result_ms, s.done, s.attempts)
        if self.state == "stats":
            return render_stats(s.result_ms, s.history)
        return render_ready()

    def run(self, terminal) -> None:
        went_green = False
        while not self.quit:
            terminal.draw(self.frame())
            if went_green:
                # time from the moment green is on screen
                self.session.start_time = self.clock()
                went_green = False
            if terminal.poll(self.poll_interval):
                self.handle_events(terminal)
            was_waiting = self.state == "waiting"
            self.update()
            if was_waiting and self.state == "active":
                went_green = True
                continue
            if self.frame_delay:
                time.sleep(self.frame_delay)
        self.quit = False
