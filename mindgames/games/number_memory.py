"""Number Memory: remember the longest number you can.

A number flashes for a moment, then you type it back. Each correct answer
adds one digit.
"""

import random
import time
from dataclasses import dataclass

from mindgames.events import BACKSPACE, ENTER, KeyEvent
from mindgames.frame import Frame, Progress, line
from mindgames.games.base import FRAME_DELAY, POLL_INTERVAL, Game

# -- config ----------------------------------------------------------------
SHOW_DURATION = 1.7  # seconds the number stays on screen
START_LEVEL = 1


@dataclass
class NumberMemorySession:
    level: int = START_LEVEL
    number: str | None = None
    answer: str | None = None
    show_start: float | None = None


def generate_number(level: int, rng: random.Random) -> str:
    """`level` independent uniform digits."""
    return "".join(str(rng.randrange(10)) for _ in range(level))


def remaining_fraction(show_start: float | None, now: float,
                       duration: float = SHOW_DURATION) -> float:
    """Share of the reveal time left, clamped to [0, 1]; 1.0 before the timer starts."""
    if show_start is None:
        return 1.0
    return max(0.0, min(1.0, (duration - (now - show_start)) / duration))


# -- renderers -------------------------------------------------------------

def render_title() -> Frame:
    return Frame("cyan", [
        line("Number Memory"),
        line("The average person can remember 7 numbers at once. Can you do more?", bold=False),
        line(""),
        line("Press any key to start"),
    ])


def render_showing(number: str, fraction: float) -> Frame:
    return Frame("cyan", [line(number, "black")],
                 progress=Progress(int(fraction * 100), fg="white"))


def render_waiting(answer: str) -> Frame:
    return Frame("cyan", [
        line("What was the number?", "black"),
        line("Press Enter to submit", "black", bold=False),
        line(""),
        line(answer or "_", "black"),
    ])


def render_result(s: NumberMemorySession, failed: bool) -> Frame:
    return Frame("cyan", [
        line("Number", "black", bold=False),
        line(s.number or "", "black"),
        line("Your Answer", "black", bold=False),
        line(s.answer or "", "black", strike=failed),
        line("Level", "black", bold=False),
        line(str(s.level), "black"),
        line(""),
        line("Press any key to try again" if failed else "Press any key for the next number",
             "black", bold=False),
    ])


# -- game logic ------------------------------------------------------------

class NumberMemoryGame(Game):
    name = "🧠🔢 Number Memory"
    description = "Remember the longest number you can"

    def __init__(self, clock=time.monotonic, rng: random.Random | None = None,
                 show_duration: float = SHOW_DURATION,
                 poll_interval: float = POLL_INTERVAL, frame_delay: float = FRAME_DELAY):
        super().__init__()
        self.clock = clock
        self.rng = rng or random.Random()
        self.show_duration = show_duration
        self.poll_interval = poll_interval
        self.frame_delay = frame_delay
        self.state = "title"  # title | showing | waiting | success | end
        self.session = NumberMemorySession()

    def reset(self):
        self.state = "title"
        self.session = NumberMemorySession()

    def show_number(self):
        """Start a reveal round at the current level."""
        s = self.session
        s.number = generate_number(s.level, self.rng)
        s.answer = ""
        s.show_start = self.clock()
        self.state = "showing"

    def update(self):
        """Timer transition: showing -> waiting once the reveal time is up."""
        s = self.session
        if self.state == "showing" and s.show_start is not None:
            if self.clock() - s.show_start >= self.show_duration:
                self.state = "waiting"

    def submit(self):
        s = self.session
        if s.answer == s.number:
            s.level += 1
            self.state = "success"
        else:
            self.state = "end"

    def handle_input(self, event: KeyEvent) -> None:
        if event.is_quit():
            if self.state == "title":
                self.quit = True
            self.reset()
            return

        s = self.session
        if self.state == "title":
            self.show_number()
        elif self.state == "showing":
            pass  # keys are ignored while the number is up
        elif self.state == "waiting":
            if event.key == ENTER:
                self.submit()
            elif event.key == BACKSPACE:
                s.answer = s.answer[:-1]
            elif event.is_digit():
                s.answer += event.char
        elif self.state == "success":
            self.show_number()
        elif self.state == "end":
            self.reset()

    def frame(self) -> Frame:
        s = self.session
        if self.state == "showing":
            fraction = remaining_fraction(s.show_start, self.clock(), self.show_duration)
            return render_showing(s.number, fraction)
        if self.state == "waiting":
            return render_waiting(s.answer)
        if self.state in ("success", "end"):
            return render_result(s, failed=self.state == "end")
        return render_title()

    def run(self, terminal) -> None:
        while not self.quit:
            terminal.draw(self.frame())
            if self.state == "showing":
                if terminal.poll(self.poll_interval):
                    self.handle_events(terminal)
                self.update()
                if self.frame_delay:
                    time.sleep(self.frame_delay)
            else:
                self.handle_events(terminal)
        self.quit = False
