"""The shared terminal handle: one owner at a time, passed by reference."""

import curses
import os

from mindgames.events import KeyEvent, translate_key
from mindgames.frame import Frame
from mindgames.renderer import FrameRecorder, draw_frame, init_colors


class Terminal:
    """Curses screen plus keyboard: draw frames, poll and read key presses."""

    def __init__(self, stdscr, recorder: FrameRecorder | None = None):
        self.stdscr = stdscr
        self.recorder = recorder
        self._pending: KeyEvent | None = None

    def draw(self, frame: Frame) -> None:
        draw_frame(self.stdscr, frame)
        if self.recorder:
            self.recorder.record(frame)

    def poll(self, timeout: float) -> bool:
        """True if a key event is ready within `timeout` seconds.

        A resize or mouse report counts as no input.
        """
        if self._pending is not None:
            return True
        self.stdscr.timeout(max(0, int(timeout * 1000)))
        code = self.stdscr.getch()
        if code == -1:
            return False
        self._pending = translate_key(code)
        return self._pending is not None

    def read(self) -> KeyEvent:
        """Block until the next key event, skipping resize and mouse reports."""
        if self._pending is not None:
            event, self._pending = self._pending, None
            return event
        self.stdscr.timeout(-1)
        while True:
            code = self.stdscr.getch()
            if code == -1:
                raise OSError("failed to read key from terminal")
            event = translate_key(code)
            if event is not None:
                return event


def run_session(func, escape_delay_ms: int = 25, recorder: FrameRecorder | None = None):
    """Run func(terminal) with the terminal in raw mode on the alternate screen.

    curses.wrapper restores the terminal on every exit path, errors included.
    """
    os.environ.setdefault("ESCDELAY", str(escape_delay_ms))

    def _main(stdscr):
        try:
            curses.curs_set(0)
        except curses.error:
            pass  # terminal cannot hide the cursor
        curses.raw()
        stdscr.keypad(True)
        init_colors()
        return func(Terminal(stdscr, recorder=recorder))

    return curses.wrapper(_main)
